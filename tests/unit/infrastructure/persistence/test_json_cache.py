"""
Tests unitaires pour JsonFileCache.

Verifie:
- La persistance immediate apres chaque ecriture
- Le rechargement depuis le disque
- La tolerance aux fichiers absents, corrompus ou invalides
- La suppression du fichier par clear()
"""

import json
from pathlib import Path

from medialinker.core.ports.cache import IKeyValueCache
from medialinker.infrastructure.persistence.json_cache import JsonFileCache


class TestJsonFileCache:
    def test_implements_interface(self, tmp_path: Path) -> None:
        assert isinstance(JsonFileCache(tmp_path / "cache.json"), IKeyValueCache)

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        cache = JsonFileCache(tmp_path / "missing.json")

        assert len(cache) == 0
        assert cache.get("anything") is None

    def test_set_flushes_immediately(self, tmp_path: Path) -> None:
        path = tmp_path / "sub" / "cache.json"
        cache = JsonFileCache(path)

        cache.set("dune|2021", {"title": "Dune", "year": "2021"})

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "dune|2021": {"title": "Dune", "year": "2021"}
        }

    def test_reload_from_disk(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        JsonFileCache(path).set("Movie.mkv", "/dest/Movie (2020)/Movie (2020).mkv")

        reloaded = JsonFileCache(path)

        assert reloaded.get("Movie.mkv") == "/dest/Movie (2020)/Movie (2020).mkv"
        assert "Movie.mkv" in reloaded
        assert list(reloaded) == ["Movie.mkv"]

    def test_no_temp_file_left_behind(self, tmp_path: Path) -> None:
        cache = JsonFileCache(tmp_path / "cache.json")
        cache.set("a", 1)
        cache.set("b", 2)

        assert [p.name for p in tmp_path.iterdir()] == ["cache.json"]

    def test_unicode_is_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        JsonFileCache(path).set("amélie|2001", {"title": "Amélie"})

        assert "Amélie" in path.read_text(encoding="utf-8")

    def test_corrupt_file_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        path.write_text("{not json", encoding="utf-8")

        cache = JsonFileCache(path)

        assert len(cache) == 0
        cache.set("key", "value")
        assert JsonFileCache(path).get("key") == "value"

    def test_non_object_file_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        assert len(JsonFileCache(path)) == 0

    def test_clear_removes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        cache = JsonFileCache(path)
        cache.set("key", "value")

        cache.clear()

        assert not path.exists()
        assert len(cache) == 0

    def test_clear_without_file(self, tmp_path: Path) -> None:
        cache = JsonFileCache(tmp_path / "never-written.json")
        cache.clear()
        assert len(cache) == 0
