"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les fournisseurs de métadonnées
- IMetadataProvider : Fournisseur principal (recherche classée)
- ISecondaryProvider : Fournisseur de repli (meilleure correspondance)
- SecondaryMatch : Correspondance retournée par le repli

Ports système de fichiers : Contrats pour les opérations fichiers
- IFileSystem : Opérations de base sur les fichiers
- ISymlinkManager : Création des liens symboliques

Ports parsing et cache
- IFilenameParser : Parsing des noms de release
- IKeyValueCache : Cache clé/valeur persistant
"""

from medialinker.core.ports.api_clients import (
    IMetadataProvider,
    ISecondaryProvider,
    SecondaryMatch,
)
from medialinker.core.ports.cache import IKeyValueCache
from medialinker.core.ports.file_system import (
    IFileSystem,
    ISymlinkManager,
)
from medialinker.core.ports.parser import IFilenameParser

__all__ = [
    # Clients API
    "IMetadataProvider",
    "ISecondaryProvider",
    "SecondaryMatch",
    # Système de fichiers
    "IFileSystem",
    "ISymlinkManager",
    # Parsing et cache
    "IFilenameParser",
    "IKeyValueCache",
]
