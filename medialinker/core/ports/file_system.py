"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations fichiers.
Les implémentations (adaptateurs) fournissent l'accès concret au système de fichiers
et la gestion des liens symboliques.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations de lecture (existence, parcours de l'arborescence
    source) et de mutation (création de répertoires, renommage).
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Vérifie si une entrée existe sur le disque.

        Un lien symbolique cassé compte comme existant : l'entrée occupe
        le chemin de destination.
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """
        Crée un répertoire et ses parents (sans erreur s'il existe).

        Lève :
            OSError : si la création échoue
        """
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme une entrée (fichier, répertoire ou lien).

        Lève :
            OSError : si le renommage échoue
        """
        ...

    @abstractmethod
    def list_entries(self, directory: Path) -> list[Path]:
        """Liste les entrées directes d'un répertoire, triées par nom."""
        ...

    @abstractmethod
    def list_video_files(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt récursivement un répertoire et produit les fichiers vidéo.

        Lève :
            OSError : si le répertoire racine est illisible
        """
        ...


class ISymlinkManager(ABC):
    """
    Interface pour la gestion des liens symboliques.
    """

    @abstractmethod
    def create_symlink(self, target: Path, link: Path) -> None:
        """
        Crée un lien symbolique.

        Args :
            target : Chemin vers lequel le lien pointe (le fichier réel)
            link : Chemin où le lien symbolique sera créé

        Lève :
            OSError : si la création échoue (y compris FileExistsError)
        """
        ...
