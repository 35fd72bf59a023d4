"""
Interfaces ports pour le parsing de noms de fichiers.

Interface abstraite (port) definissant le contrat pour transformer le nom
d'une release en informations structurees.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from medialinker.core.value_objects.parsed_info import ParseOutcome


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers video.

    Definit le contrat pour extraire titre, annee, saison, episodes et
    descripteurs depuis le chemin d'un fichier source.
    """

    @abstractmethod
    def parse(self, source: Path) -> ParseOutcome:
        """
        Parse le nom d'un fichier video source.

        Args:
            source: Chemin du fichier (le nom du dossier parent sert de repli
                    quand le nom de fichier ne contient pas de titre)

        Retourne:
            ParsedRelease en cas de succes, sinon un rejet type
            (SkippedSpecial pour la saison 0, Unparsable sinon).
        """
        ...
