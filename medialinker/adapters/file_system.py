"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem et ISymlinkManager pour les operations
fichiers reelles. Fournit egalement le parcours recursif de l'arborescence source.
"""

import os
from pathlib import Path
from typing import Iterator

from loguru import logger

from medialinker.core.ports.file_system import IFileSystem, ISymlinkManager
from medialinker.utils.constants import VIDEO_EXTENSIONS


class FileSystemAdapter(IFileSystem, ISymlinkManager):
    """
    Implementation de IFileSystem et ISymlinkManager pour le systeme de fichiers reel.

    Les operations de mutation levent OSError : l'appelant decide de la
    portee de l'erreur (un fichier, jamais le lot entier).
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe (un lien casse compte comme existant)."""
        return os.path.lexists(path)

    def make_dirs(self, path: Path) -> None:
        """Cree le repertoire et ses parents si necessaire."""
        path.mkdir(parents=True, exist_ok=True)

    def rename(self, source: Path, destination: Path) -> None:
        """Renomme une entree sans suivre les liens symboliques."""
        os.rename(source, destination)

    def list_entries(self, directory: Path) -> list[Path]:
        """Liste les entrees directes d'un repertoire, triees par nom."""
        return sorted(directory.iterdir(), key=lambda p: p.name)

    # Implementation de ISymlinkManager

    def create_symlink(self, target: Path, link: Path) -> None:
        """
        Cree un lien symbolique.

        Args:
            target: Chemin vers lequel le lien pointe (le fichier reel)
            link: Chemin ou le lien symbolique sera cree
        """
        link.symlink_to(target)

    # Methodes utilitaires pour le scan

    def list_video_files(self, directory: Path) -> Iterator[Path]:
        """
        Liste les fichiers video dans un repertoire (recursif).

        Parcours en profondeur, entrees triees par nom pour un ordre stable.
        Filtre:
        - Par extension (VIDEO_EXTENSIONS, insensible a la casse)
        - Exclut les symlinks

        Args:
            directory: Repertoire a scanner

        Yields:
            Chemins vers les fichiers video

        Raises:
            OSError: Si le repertoire racine est illisible
        """
        # Liste la racine immediatement : une racine illisible est fatale
        entries = self.list_entries(directory)
        yield from self._walk(entries)

    def _walk(self, entries: list[Path]) -> Iterator[Path]:
        for path in entries:
            if path.is_symlink():
                continue
            if path.is_dir():
                try:
                    children = self.list_entries(path)
                except OSError as e:
                    logger.warning(f"Repertoire ignore: {path} ({e})")
                    continue
                yield from self._walk(children)
            elif path.is_file() and path.suffix.lower() in VIDEO_EXTENSIONS:
                yield path
