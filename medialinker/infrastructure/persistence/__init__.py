"""
Module de persistance des caches de MediaLinker.

- json_cache.py : Cache cle/valeur JSON, ecrit de maniere atomique apres
  chaque modification

Usage:
    from medialinker.infrastructure.persistence import JsonFileCache

    links = JsonFileCache(Path(".cache/movies-links.json"))
    links.set("Dune.2021.mkv", "/media/movies/Dune (2021)/Dune (2021).mkv")
"""

from medialinker.infrastructure.persistence.json_cache import JsonFileCache

__all__ = ["JsonFileCache"]
