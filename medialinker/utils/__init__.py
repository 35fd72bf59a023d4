"""
Utilitaires et constantes pour MediaLinker.

Ce module contient les constantes partagees.
"""

from medialinker.utils.constants import (
    MAX_EPISODE_SPAN,
    STRIP_LABELS,
    UNKNOWN_YEAR,
    VIDEO_EXTENSIONS,
    YEAR_PATTERN,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "STRIP_LABELS",
    "YEAR_PATTERN",
    "MAX_EPISODE_SPAN",
    "UNKNOWN_YEAR",
]
