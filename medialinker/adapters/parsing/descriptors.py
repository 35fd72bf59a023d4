"""
Extraction des descripteurs d'une release (qualite, source, codecs, edition).

Fonctions pures appliquees au nom original (non nettoye) du fichier:
- extract_descriptors : descripteurs uniques, en majuscules, dans l'ordre d'apparition
- blank_descriptors : masque les descripteurs par des espaces de meme longueur,
  pour que le parser ne lise jamais "720p" ou "x264" comme saison/episode
"""

import re
from typing import Optional

from medialinker.utils.constants import (
    AUDIO_CODEC_KEYWORDS,
    EDITION_KEYWORDS,
    QUALITY_KEYWORDS,
    SOURCE_KEYWORDS,
    VIDEO_CODEC_KEYWORDS,
)


def _keyword_fragment(keyword: str) -> str:
    """Les espaces d'un mot-cle acceptent aussi les separateurs de release."""
    return keyword.replace(" ", r"[ ._-]")


def _build_descriptor_regex() -> re.Pattern[str]:
    keywords = (
        *QUALITY_KEYWORDS,
        *SOURCE_KEYWORDS,
        *VIDEO_CODEC_KEYWORDS,
        *AUDIO_CODEC_KEYWORDS,
        *EDITION_KEYWORDS,
    )
    # Les alternatives les plus longues d'abord (DTS-HD avant DTS)
    fragments = sorted((_keyword_fragment(k) for k in keywords), key=len, reverse=True)
    return re.compile(rf"(?<![A-Za-z0-9])(?:{'|'.join(fragments)})(?![A-Za-z0-9])", re.IGNORECASE)


DESCRIPTOR_REGEX = _build_descriptor_regex()


def extract_descriptors(text: str) -> tuple[str, ...]:
    """
    Extrait les descripteurs d'un nom de release.

    Args:
        text: Nom du fichier (sans extension), non nettoye.

    Returns:
        Tuple de descripteurs en majuscules, dedoublonnes, dans l'ordre
        d'apparition (ex: ("1080P", "WEB-DL", "X264")).
    """
    seen: dict[str, None] = {}
    for match in DESCRIPTOR_REGEX.finditer(text.replace("_", " ")):
        seen.setdefault(match.group(0).upper(), None)
    return tuple(seen)


def first_descriptor_position(text: str) -> Optional[int]:
    """Position du premier descripteur dans le texte, None si aucun."""
    match = DESCRIPTOR_REGEX.search(text)
    return match.start() if match else None


def blank_descriptors(text: str) -> str:
    """Remplace chaque descripteur par des espaces (positions conservees)."""
    return DESCRIPTOR_REGEX.sub(lambda m: " " * len(m.group(0)), text)
