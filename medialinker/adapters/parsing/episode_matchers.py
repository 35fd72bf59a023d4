"""
Matchers ordonnes pour la detection saison/episode.

Chaque matcher retourne un EpisodeMatch type ou None. Le parser parcourt la
liste dans l'ordre et retient le premier succes : les motifs ne sont jamais
combines.

Ordre pour les series:
1. S01E02, S01E02E03, S01E01-E03
2. 1x02, 1x02x03
3. 102 (premier chiffre = saison, deux suivants = episode)

Les animes remplacent le dernier motif par un numero absolu sur 3 chiffres
(saison 1).
"""

import re
from dataclasses import dataclass
from typing import Optional

from medialinker.core.value_objects.naming_policy import NamingPolicy

_NOT_ALNUM_BEFORE = r"(?<![A-Za-z0-9])"
_NOT_ALNUM_AFTER = r"(?![A-Za-z0-9])"

# Marqueurs d'episode explicites (E01, e02) n'importe ou dans le nom
_EPISODE_MARKER = re.compile(r"(?<![A-Za-z])E(\d{2,3})(?!\d)", re.IGNORECASE)


@dataclass(frozen=True)
class EpisodeMatch:
    """
    Correspondance saison/episode.

    Attributs:
        season: Numero de saison (0 = special)
        start: Premier episode
        end: Episode de fin explicite (plage), optionnel
        extras: Episodes supplementaires colles au premier (E01E02)
        position: Index du debut du motif dans le texte (fin du titre)
        matcher: Nom du matcher ayant reussi
    """

    season: int
    start: int
    end: Optional[int] = None
    extras: tuple[int, ...] = ()
    position: int = 0
    matcher: str = ""


class RegexEpisodeMatcher:
    """Matcher base sur une regex a groupes nommes (season, start, extras, end)."""

    def __init__(self, name: str, pattern: str, fixed_season: Optional[int] = None) -> None:
        self.name = name
        self._pattern = re.compile(pattern, re.IGNORECASE)
        self._fixed_season = fixed_season

    def match(self, text: str) -> Optional[EpisodeMatch]:
        """Retourne la premiere correspondance dans le texte, ou None."""
        found = self._pattern.search(text)
        if found is None:
            return None

        groups = found.groupdict()
        if self._fixed_season is not None:
            season = self._fixed_season
        else:
            season = int(groups["season"])

        extras = tuple(int(n) for n in re.findall(r"\d+", groups.get("extras") or ""))
        end = int(groups["end"]) if groups.get("end") else None

        return EpisodeMatch(
            season=season,
            start=int(groups["start"]),
            end=end,
            extras=extras,
            position=found.start(),
            matcher=self.name,
        )


SEASON_EPISODE_MATCHER = RegexEpisodeMatcher(
    "season_episode",
    _NOT_ALNUM_BEFORE
    + r"S(?P<season>\d{1,2}) ?E(?P<start>\d{2,3})"
    + r"(?P<extras>(?: ?E\d{2,3})*)"
    + r"(?: ?- ?E?(?P<end>\d{2,3}))?(?!\d)",
)

CROSS_MATCHER = RegexEpisodeMatcher(
    "cross",
    _NOT_ALNUM_BEFORE
    + r"(?P<season>\d{1,2})x(?P<start>\d{2})"
    + r"(?P<extras>(?:x\d{2})*)"
    + r"(?:-x?(?P<end>\d{2}))?(?!\d)",
)

THREE_DIGIT_MATCHER = RegexEpisodeMatcher(
    "three_digit",
    _NOT_ALNUM_BEFORE
    + r"(?P<season>\d)(?P<start>\d{2})"
    + r"(?:[-_ ](?P<end>\d{2}))?"
    + _NOT_ALNUM_AFTER,
)

ABSOLUTE_MATCHER = RegexEpisodeMatcher(
    "absolute",
    _NOT_ALNUM_BEFORE + r"(?P<start>\d{3})" + _NOT_ALNUM_AFTER,
    fixed_season=1,
)


def matchers_for(policy: NamingPolicy) -> tuple[RegexEpisodeMatcher, ...]:
    """Liste ordonnee des matchers pour une politique episodique."""
    if policy.absolute_episodes:
        return (SEASON_EPISODE_MATCHER, CROSS_MATCHER, ABSOLUTE_MATCHER)
    return (SEASON_EPISODE_MATCHER, CROSS_MATCHER, THREE_DIGIT_MATCHER)


def first_match(
    text: str, matchers: tuple[RegexEpisodeMatcher, ...]
) -> Optional[EpisodeMatch]:
    """Applique les matchers dans l'ordre et retourne le premier succes."""
    for matcher in matchers:
        result = matcher.match(text)
        if result is not None:
            return result
    return None


def episode_markers(text: str) -> list[int]:
    """Marqueurs E<nn> distincts, dans l'ordre d'apparition."""
    seen: dict[int, None] = {}
    for value in _EPISODE_MARKER.findall(text):
        seen.setdefault(int(value), None)
    return list(seen)


def expand_episodes(match: EpisodeMatch, text: str, max_span: int) -> tuple[int, ...]:
    """
    Calcule la liste des episodes d'une correspondance.

    Regles:
    - fin explicite avec start < end <= start + max_span : plage complete
    - fin explicite hors bornes : episode unique
    - sans fin : premier episode + extras, remplaces par l'ensemble des
      marqueurs E<nn> distincts du nom s'il y en a plusieurs

    Returns:
        Episodes uniques, tries par ordre croissant.
    """
    if match.end is not None:
        if match.start < match.end <= match.start + max_span:
            return tuple(range(match.start, match.end + 1))
        return (match.start,)

    episodes = [match.start, *match.extras]
    markers = episode_markers(text)
    if len(markers) > 1:
        episodes = markers
    return tuple(sorted(set(episodes)))
