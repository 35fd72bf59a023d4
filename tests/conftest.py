"""
Fixtures pytest partagees pour les tests MediaLinker.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de IFileSystem
- Contexte d'execution avec caches JSON temporaires
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from medialinker.config import Settings
from medialinker.core.ports.file_system import IFileSystem
from medialinker.core.value_objects import MOVIE_POLICY, ProviderRecord
from medialinker.infrastructure.persistence.json_cache import JsonFileCache
from medialinker.services.context import RunContext


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut aucun chemin n'existe. Les valeurs de retour doivent etre
    configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.list_entries.return_value = []
    return mock


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    path = tmp_path / "dest"
    path.mkdir()
    return path


@pytest.fixture
def run_context(tmp_path: Path, source_dir: Path, dest_dir: Path) -> RunContext:
    """RunContext films avec caches JSON dans tmp_path et sans delai."""
    return RunContext(
        policy=MOVIE_POLICY,
        source_root=source_dir,
        dest_root=dest_dir,
        metadata_cache=JsonFileCache(tmp_path / "cache" / "movies-metadata.json"),
        link_cache=JsonFileCache(tmp_path / "cache" / "movies-links.json"),
        base_delay=0.0,
        jitter=0.0,
    )


@pytest.fixture
def some_movie_record() -> ProviderRecord:
    return ProviderRecord(title="Some Movie", year="2020", provider_id="100200", source="tmdb")


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler caches et logs de chaque test.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        movies_source_dir=tmp_path / "src",
        movies_dest_dir=tmp_path / "dest",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )
