"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIALINKER_,
et peut optionnellement être fournie via un fichier .env.

Les clés API (TMDB, OMDb) sont optionnelles : sans clé TMDB la commande link refuse de
démarrer, sans clé OMDb la recherche de repli est simplement désactivée.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de medialinker/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIALINKER_.
    Exemple : MEDIALINKER_REQUEST_DELAY_MS=500

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIALINKER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Clés API (OPTIONNELLES)
    tmdb_api_key: Optional[str] = Field(default=None)
    omdb_api_key: Optional[str] = Field(default=None)
    language: str = Field(default="en-US")

    # Répertoires par défaut de chaque variante
    movies_source_dir: Path = Field(default=Path("/mnt/torrents/movies"))
    movies_dest_dir: Path = Field(default=Path("/media/movies"))
    series_source_dir: Path = Field(default=Path("/mnt/torrents/shows"))
    series_dest_dir: Path = Field(default=Path("/media/tvshows"))
    anime_source_dir: Path = Field(default=Path("/mnt/torrents/shows"))
    anime_dest_dir: Path = Field(default=Path("/media/anime"))

    # Rate limiting
    request_delay_ms: int = Field(default=1000, ge=0)
    jitter_ms: int = Field(default=2000, ge=0)
    rate_limit_max_attempts: int = Field(default=5, ge=1)
    rate_limit_backoff_seconds: float = Field(default=2.0, gt=0)

    # Caches JSON (un fichier de métadonnées et un fichier de liens par variante)
    cache_dir: Path = Field(default=Path(".cache"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/medialinker.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator(
        "movies_source_dir",
        "movies_dest_dir",
        "series_source_dir",
        "series_dest_dir",
        "anime_source_dir",
        "anime_dest_dir",
        "cache_dir",
        "log_file",
        mode="before",
    )
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)

    def source_dir_for(self, variant: str) -> Path:
        """Répertoire source par défaut d'une variante (movies, series, anime)."""
        return getattr(self, f"{variant}_source_dir")

    def dest_dir_for(self, variant: str) -> Path:
        """Répertoire de destination par défaut d'une variante."""
        return getattr(self, f"{variant}_dest_dir")

    def metadata_cache_path(self, variant: str) -> Path:
        return self.cache_dir / f"{variant}-metadata.json"

    def link_cache_path(self, variant: str) -> Path:
        return self.cache_dir / f"{variant}-links.json"
