"""
Objets valeur pour les informations de parsing de noms de fichiers.

Objets valeur immutables representant les informations extraites du parsing
d'un nom de release, ainsi que les rejets types retournes par le parser
(episode special, nom inexploitable).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MediaType(Enum):
    """Type de contenu traite par une execution.

    Valeurs:
        MOVIE: Film (titre + annee)
        SERIES: Serie TV (titre + saison/episodes)
        ANIME: Anime (titre du dossier + episodes en numerotation absolue)
    """

    MOVIE = "movie"
    SERIES = "series"
    ANIME = "anime"


@dataclass(frozen=True)
class ParsedRelease:
    """
    Informations extraites du nom d'une release.

    Attributs:
        raw_title: Titre nettoye, utilise comme requete fournisseur
        year: Annee detectee (indice pour la resolution), optionnelle
        season: Numero de saison (jamais 0), None pour les films
        episodes: Episodes uniques et croissants, vide pour les films
        descriptors: Descripteurs en majuscules, dans l'ordre d'apparition
        media_type: Type de contenu de la politique de nommage
    """

    raw_title: str
    year: Optional[int] = None
    season: Optional[int] = None
    episodes: tuple[int, ...] = ()
    descriptors: tuple[str, ...] = ()
    media_type: MediaType = MediaType.MOVIE

    @property
    def is_episodic(self) -> bool:
        """Indique si la release porte une saison et des episodes."""
        return self.season is not None and bool(self.episodes)

    @property
    def descriptor_label(self) -> str:
        """Descripteurs joints pour l'affichage (ex: "1080P WEB-DL X264")."""
        return " ".join(self.descriptors)


@dataclass(frozen=True)
class SkippedSpecial:
    """Rejet : saison 0 (special, bonus), le fichier est ignore."""

    filename: str
    reason: str = "saison 0 (special)"


@dataclass(frozen=True)
class Unparsable:
    """Rejet : titre ou saison/episode introuvable dans le nom de fichier."""

    filename: str
    reason: str


ParseOutcome = Union[ParsedRelease, SkippedSpecial, Unparsable]
