"""
Service de nommage canonique des liens.

Ce module fournit les fonctions de generation des chemins de destination
pour les films et les episodes. Toutes les fonctions sont pures : les memes
entrees donnent toujours le meme chemin.

Format films : {dest}/Titre (Annee)/Titre (Annee) - DESCRIPTEURS.ext
Format series : {dest}/Titre (Annee)/Season N/Titre SxxExx - DESCRIPTEURS.ext
"""

import unicodedata
from dataclasses import replace
from pathlib import Path

from pathvalidate import sanitize_filename

from medialinker.core.value_objects.naming_policy import NamingPolicy
from medialinker.core.value_objects.parsed_info import ParsedRelease
from medialinker.core.value_objects.provider_record import ProviderRecord
from medialinker.utils.constants import UNKNOWN_YEAR


# Longueur maximale d'un composant de chemin (hors extension)
MAX_FILENAME_LENGTH = 200

# Caracteres speciaux restants a remplacer par un tiret (apres les deux-points)
SPECIAL_CHARS_TO_DASH = frozenset({"/", "\\", "*", '"', "<", ">", "|"})


def replace_colons(text: str) -> str:
    """
    Reecrit les deux-points a la maniere de Radarr.

    ": " -> " - " puis ":" -> " -". Cette regle est partagee avec la
    commande fix-names pour que les noms crees et les noms corriges
    restent identiques.

    Args:
        text: Nom a reecrire.

    Returns:
        Nom sans deux-points.
    """
    return text.replace(": ", " - ").replace(":", " -")


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaine pour l'utiliser comme composant de chemin.

    Transformations appliquees :
    - Normalisation Unicode NFKC
    - Deux-points reecrits (voir replace_colons)
    - Caracteres speciaux (/ \\ * " < > |) -> tiret
    - Nettoyage pathvalidate (plateforme universelle)
    - Troncature a 200 caracteres maximum

    Args:
        text: Texte a nettoyer.

    Returns:
        Texte valide pour un nom de fichier ou de repertoire.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = replace_colons(text)

    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")

    # replacement_text="" car on a deja fait nos remplacements
    text = sanitize_filename(text, platform="universal", replacement_text="")

    if len(text) > MAX_FILENAME_LENGTH:
        text = text[:MAX_FILENAME_LENGTH].rstrip()

    return text


def folder_name(record: ProviderRecord) -> str:
    """Nom du dossier canonique : "Titre (Annee)"."""
    return f"{sanitize_for_filesystem(record.title)} ({record.year})"


def season_folder_name(season: int) -> str:
    """Dossier de saison, sans zero-padding : "Season 1"."""
    return f"Season {season}"


def _with_descriptors(base: str, descriptor_label: str, extension: str) -> str:
    if descriptor_label:
        return f"{base} - {descriptor_label}{extension}"
    return f"{base}{extension}"


def generate_movie_filename(
    record: ProviderRecord, descriptor_label: str, extension: str
) -> str:
    """
    Genere le nom de fichier canonique d'un film.

    Format : Titre (Annee)[ - DESCRIPTEURS].ext
    """
    return _with_descriptors(folder_name(record), descriptor_label, extension)


def generate_episode_filename(
    record: ProviderRecord,
    season: int,
    episode: int,
    descriptor_label: str,
    extension: str,
    episode_width: int = 2,
) -> str:
    """
    Genere le nom de fichier canonique d'un episode.

    Format : Titre SxxExx[ - DESCRIPTEURS].ext
    La saison est sur deux chiffres, l'episode sur `episode_width` chiffres.
    """
    title = sanitize_for_filesystem(record.title)
    code = f"S{season:02d}E{episode:0{episode_width}d}"
    return _with_descriptors(f"{title} {code}", descriptor_label, extension)


def destination_paths(
    parsed: ParsedRelease,
    record: ProviderRecord,
    extension: str,
    dest_root: Path,
    policy: NamingPolicy,
) -> list[Path]:
    """
    Calcule les chemins de destination d'un fichier source.

    Un film donne un seul chemin ; une release multi-episodes donne un
    chemin par episode, tous pointant vers le meme fichier source.

    Args:
        parsed: Informations extraites du nom de fichier.
        record: Enregistrement canonique du fournisseur.
        extension: Extension du fichier source (avec le point).
        dest_root: Racine de la bibliotheque de destination.
        policy: Politique de nommage de l'execution.

    Returns:
        Liste ordonnee des chemins de destination.
    """
    # Annee du fournisseur, sinon celle du nom de fichier
    if record.year == UNKNOWN_YEAR and parsed.year:
        record = replace(record, year=str(parsed.year))

    base_dir = Path(dest_root) / folder_name(record)
    label = parsed.descriptor_label

    if not policy.episodic or not parsed.is_episodic:
        return [base_dir / generate_movie_filename(record, label, extension)]

    season_dir = base_dir / season_folder_name(parsed.season)
    return [
        season_dir / generate_episode_filename(
            record, parsed.season, episode, label, extension, policy.episode_width
        )
        for episode in parsed.episodes
    ]
