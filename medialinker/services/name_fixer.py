"""
Correction des noms contenant des deux-points dans une bibliotheque.

Les entrees directes d'un repertoire dont le nom contient ":" sont
renommees avec la meme regle que celle utilisee a la creation des liens
(voir naming.replace_colons), pour que les deux restent coherents.
"""

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from medialinker.core.ports.file_system import IFileSystem
from medialinker.services.naming import replace_colons


@dataclass
class RenameReport:
    """Resultat d'une passe de correction.

    Attributes:
        renamed: Couples (ancien chemin, nouveau chemin) renommes ou a renommer
        skipped: Entrees dont la cible existe deja
        failed: Couples (chemin, message d'erreur)
    """

    renamed: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)


class NameFixer:
    """
    Renomme les entrees contenant des deux-points.

    Example:
        fixer = NameFixer(file_system)
        report = fixer.fix(Path("/media/movies"), dry_run=True)
        for old, new in report.renamed:
            print(f"{old.name} -> {new.name}")
    """

    def __init__(self, file_system: IFileSystem) -> None:
        self._fs = file_system

    def fix(self, directory: Path, dry_run: bool = False) -> RenameReport:
        """
        Corrige les noms des entrees directes de `directory`.

        Args:
            directory: Repertoire de la bibliotheque
            dry_run: Si True, calcule les renommages sans les appliquer

        Returns:
            RenameReport des operations

        Raises:
            OSError: Si le repertoire ne peut pas etre liste
        """
        report = RenameReport()

        for entry in self._fs.list_entries(Path(directory)):
            if ":" not in entry.name:
                continue

            target = entry.with_name(replace_colons(entry.name))
            if self._fs.exists(target):
                logger.warning(f"Cible deja existante, ignore: {target}")
                report.skipped.append(entry)
                continue

            if dry_run:
                logger.info(f"[DRY RUN] {entry.name} -> {target.name}")
                report.renamed.append((entry, target))
                continue

            try:
                self._fs.rename(entry, target)
            except OSError as e:
                logger.error(f"Echec du renommage de {entry}: {e}")
                report.failed.append((entry, str(e)))
                continue

            logger.info(f"Renomme: {entry.name} -> {target.name}")
            report.renamed.append((entry, target))

        return report
