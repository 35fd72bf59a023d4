"""
Contexte d'execution d'un lot.

Cree une seule fois par execution et transmis explicitement au resolver,
au materializer et a l'orchestrateur : politique de nommage, racines,
mode simulation, delais et handles des deux caches persistants.
"""

from dataclasses import dataclass
from pathlib import Path

from medialinker.core.ports.cache import IKeyValueCache
from medialinker.core.value_objects.naming_policy import NamingPolicy


@dataclass
class RunContext:
    """
    Configuration et etat partages d'une execution.

    Attributs:
        policy: Politique de nommage (films, series, animes)
        source_root: Racine de l'arborescence source (lecture seule)
        dest_root: Racine de la bibliotheque de destination
        metadata_cache: Cache "titre|annee" -> ProviderRecord serialise
        link_cache: Cache nom de fichier source -> chemin du lien
        dry_run: Simule sans modifier le systeme de fichiers ni le cache de liens
        base_delay: Delai de base entre deux appels reseau (secondes)
        jitter: Fenetre aleatoire ajoutee au delai de base (secondes)
    """

    policy: NamingPolicy
    source_root: Path
    dest_root: Path
    metadata_cache: IKeyValueCache
    link_cache: IKeyValueCache
    dry_run: bool = False
    base_delay: float = 1.0
    jitter: float = 2.0
