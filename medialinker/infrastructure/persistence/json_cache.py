"""
Cache cle/valeur persistant en JSON.

Implementation de IKeyValueCache utilisee pour les deux caches de
l'application :
- cache de metadonnees : "titre|annee" -> ProviderRecord serialise
- cache de liens : nom du fichier source -> chemin du lien cree

Le fichier est charge une seule fois a la construction, puis reecrit
integralement apres chaque ecriture (fichier temporaire + os.replace) :
un arret brutal laisse toujours un fichier JSON complet.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterator, Optional

from loguru import logger

from medialinker.core.ports.cache import IKeyValueCache


class JsonFileCache(IKeyValueCache):
    """
    Cache JSON plat, sans expiration.

    Example:
        cache = JsonFileCache(Path(".cache/movies-links.json"))
        cache.set("Dune.2021.mkv", "/media/movies/Dune (2021)/Dune (2021).mkv")
        cache.get("Dune.2021.mkv")
    """

    def __init__(self, path: Path) -> None:
        """
        Charge le cache depuis le disque.

        Un fichier absent ou illisible donne un cache vide.

        Args:
            path: Chemin du fichier JSON
        """
        self._path = Path(path)
        self._data: dict[str, Any] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Cache illisible, ignore: {self._path} ({e})")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Cache invalide (objet JSON attendu), ignore: {self._path}")
            return {}
        return data

    def _flush(self) -> None:
        """Ecrit le cache de maniere atomique."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._data, handle, ensure_ascii=False, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_name, self._path)
        except BaseException:
            # Nettoyer le fichier temporaire en cas d'erreur
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def clear(self) -> None:
        self._data = {}
        try:
            self._path.unlink()
            logger.info(f"Cache supprime: {self._path}")
        except FileNotFoundError:
            logger.info(f"Cache inexistant ou deja supprime: {self._path}")

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)
