"""
Parser de noms de release base sur des regles ordonnees.

Implemente IFilenameParser pour les trois politiques de nommage. Le meme
moteur traite films, series et animes : seule la politique change (titre +
annee, ou titre + saison + fenetre d'episodes).

Etapes:
1. Retrait des prefixes de site ("www.site.org - ") et des tags [EZTV]
2. Masquage des descripteurs puis normalisation des separateurs (. et _)
3. Detection de l'annee (1950-2099) et de la saison/episode (matchers ordonnes)
4. Extraction du titre avant le motif, puis retrait des etiquettes
5. Repli sur le nom du dossier parent si le titre est vide
"""

import re
from pathlib import Path
from typing import Optional

from loguru import logger

from medialinker.adapters.parsing.descriptors import (
    blank_descriptors,
    extract_descriptors,
    first_descriptor_position,
)
from medialinker.adapters.parsing.episode_matchers import (
    expand_episodes,
    first_match,
    matchers_for,
)
from medialinker.core.ports.parser import IFilenameParser
from medialinker.core.value_objects.naming_policy import MOVIE_POLICY, NamingPolicy
from medialinker.core.value_objects.parsed_info import (
    ParsedRelease,
    ParseOutcome,
    SkippedSpecial,
    Unparsable,
)
from medialinker.utils.constants import MAX_EPISODE_SPAN, STRIP_LABELS, YEAR_PATTERN

_SITE_PREFIX = re.compile(
    r"^\s*(?:www\.[^\s-]+|[A-Za-z0-9-]+\.(?:org|com|net|to|io|cc|me|tv|xyz|info|club))\s*-\s*",
    re.IGNORECASE,
)
_BRACKET_TAG = re.compile(r"\[[^\]]*\]")
_SEPARATORS = re.compile(r"[._]")
_YEAR = re.compile(YEAR_PATTERN)
_SEASON_WORD = re.compile(r"\bSeason\s?\d{1,3}\b|\bS\d{1,2}\b", re.IGNORECASE)
_RESOLUTION = re.compile(r"\b\d{3,4}p\b", re.IGNORECASE)
_LABELS = re.compile(
    r"(?<![A-Za-z0-9])(?:"
    + "|".join(
        re.escape(label).replace(r"\ ", r"\s+")
        for label in sorted(STRIP_LABELS, key=len, reverse=True)
    )
    + r")(?![A-Za-z0-9])",
    re.IGNORECASE,
)
_BRACKET_CHARS = re.compile(r"[()\[\]{}]")
_SPACES = re.compile(r"\s{2,}")
_EDGE_DASHES = " -–—"


def strip_noise(name: str) -> str:
    """Retire le prefixe de site et les tags entre crochets."""
    name = _SITE_PREFIX.sub("", name, count=1)
    return _BRACKET_TAG.sub(lambda m: " " * len(m.group(0)), name)


def normalize_separators(text: str) -> str:
    """Remplace les points et underscores par des espaces."""
    return _SEPARATORS.sub(" ", text)


def clean_title(text: str) -> str:
    """
    Passe de retrait des etiquettes sur un titre candidat.

    Retire annees, marqueurs de saison, resolutions et le vocabulaire
    d'edition/source/groupes (insensible a la casse, par mot entier),
    puis normalise les espaces et les tirets en bordure.
    """
    text = _YEAR.sub(" ", text)
    text = _SEASON_WORD.sub(" ", text)
    text = _RESOLUTION.sub(" ", text)
    text = _LABELS.sub(" ", blank_descriptors(text))
    text = _BRACKET_CHARS.sub(" ", text)
    text = _SPACES.sub(" ", text)
    return text.strip(_EDGE_DASHES).strip()


def find_year(text: str) -> Optional[int]:
    """Premiere annee plausible (1950-2099) du texte."""
    match = _YEAR.search(text)
    return int(match.group(0)) if match else None


class ReleaseFilenameParser(IFilenameParser):
    """
    Parser de releases parametre par une politique de nommage.

    Example:
        parser = ReleaseFilenameParser(SERIES_POLICY)
        result = parser.parse(Path("/src/Show.S01E01-E03.mkv"))
        if isinstance(result, ParsedRelease):
            print(result.raw_title, result.season, result.episodes)
    """

    def __init__(self, policy: NamingPolicy = MOVIE_POLICY) -> None:
        self._policy = policy
        self._matchers = matchers_for(policy)

    @property
    def policy(self) -> NamingPolicy:
        return self._policy

    def parse(self, source: Path) -> ParseOutcome:
        """
        Parse le nom d'un fichier source selon la politique.

        Args:
            source: Chemin du fichier (l'extension est ignoree)

        Returns:
            ParsedRelease, SkippedSpecial (saison 0) ou Unparsable.
        """
        source = Path(source)
        stem = source.stem
        name = strip_noise(stem)
        scrubbed = normalize_separators(blank_descriptors(name))

        if self._policy.episodic:
            return self._parse_episodic(source, stem, scrubbed)
        return self._parse_movie(source, stem, name, scrubbed)

    def _parse_movie(
        self, source: Path, stem: str, name: str, scrubbed: str
    ) -> ParseOutcome:
        year_match = _YEAR.search(scrubbed)
        if year_match:
            candidate = scrubbed[: year_match.start()]
            year: Optional[int] = int(year_match.group(0))
        else:
            cut = first_descriptor_position(name)
            candidate = scrubbed[:cut] if cut is not None else scrubbed
            year = None

        title = clean_title(candidate)
        if not title:
            title, folder_year = self._title_from_folder(source)
            year = year or folder_year
        if not title:
            return Unparsable(source.name, "titre introuvable")

        return ParsedRelease(
            raw_title=title,
            year=year,
            descriptors=extract_descriptors(stem),
            media_type=self._policy.media_type,
        )

    def _parse_episodic(self, source: Path, stem: str, scrubbed: str) -> ParseOutcome:
        match = first_match(scrubbed, self._matchers)
        if match is None:
            return Unparsable(source.name, "saison/episode introuvable")

        if match.season == 0:
            return SkippedSpecial(source.name)

        episodes = expand_episodes(match, scrubbed, MAX_EPISODE_SPAN)
        year = find_year(scrubbed)

        title = ""
        if self._policy.title_from_folder:
            title, folder_year = self._title_from_folder(source)
            year = year or folder_year
        if not title:
            title = clean_title(scrubbed[: match.position])
        if not title:
            title, folder_year = self._title_from_folder(source)
            year = year or folder_year
        if not title:
            return Unparsable(source.name, "titre introuvable")

        descriptor_text = stem
        if self._policy.title_from_folder:
            descriptor_text = f"{source.parent.name} {stem}"

        logger.debug(
            f"{source.name}: {title} S{match.season:02d} {list(episodes)} ({match.matcher})"
        )
        return ParsedRelease(
            raw_title=title,
            year=year,
            season=match.season,
            episodes=episodes,
            descriptors=extract_descriptors(descriptor_text),
            media_type=self._policy.media_type,
        )

    def _title_from_folder(self, source: Path) -> tuple[str, Optional[int]]:
        """
        Derive un titre depuis le dossier parent.

        Les fichiers de sous-titres ou numerotes par episode seul ne portent
        pas de titre exploitable : le dossier de la release en porte un.
        """
        folder = source.parent.name
        if not folder:
            return "", None
        scrubbed = normalize_separators(blank_descriptors(strip_noise(folder)))
        year = find_year(scrubbed)
        if self._policy.absolute_episodes:
            # Les dossiers d'anime portent souvent des plages "001-024"
            scrubbed = re.sub(r"(?<!\d)\d{3,4}(?!\d)", " ", scrubbed)
        return clean_title(scrubbed), year
