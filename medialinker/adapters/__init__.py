"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- api/ : Clients API externes (TMDB, OMDb)
- parsing/ : Parsing des noms de release et extraction des descripteurs
- file_system : Opérations sur le système de fichiers et liens symboliques

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from medialinker.adapters.file_system import FileSystemAdapter
from medialinker.adapters.parsing.release_parser import ReleaseFilenameParser

__all__ = [
    "FileSystemAdapter",
    "ReleaseFilenameParser",
]
