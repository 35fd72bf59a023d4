"""
Adaptateurs de parsing pour MediaLinker.

Ce package contient les implementations concretes des interfaces de parsing:
- ReleaseFilenameParser: Parse les noms de release par regles ordonnees
- extract_descriptors: Extrait les descripteurs qualite/source/codec/edition
"""

from medialinker.adapters.parsing.descriptors import extract_descriptors
from medialinker.adapters.parsing.release_parser import ReleaseFilenameParser

__all__ = ["ReleaseFilenameParser", "extract_descriptors"]
