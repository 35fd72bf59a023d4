"""
Client OMDb, fournisseur de repli.

Implemente ISecondaryProvider : OMDb retourne au plus une correspondance
pour un titre libre. Son titre canonique sert a reinterroger TMDB quand la
recherche principale echoue (titres alternatifs ou localises).

Reference API: https://www.omdbapi.com/
"""

from typing import Any, Optional

import httpx
from loguru import logger

from medialinker.adapters.api.retry import request_with_retry
from medialinker.core.ports.api_clients import ISecondaryProvider, SecondaryMatch
from medialinker.core.value_objects.provider_record import year_from_date


class OMDbClient(ISecondaryProvider):
    """
    Client OMDb pour la recherche "meilleure correspondance" (?t=).

    Example:
        client = OMDbClient(api_key="xxx")
        match = await client.lookup("La La Land", year=2016)
        await client.close()
    """

    BASE_URL = "https://www.omdbapi.com"

    def __init__(
        self,
        api_key: Optional[str],
        max_attempts: int = 5,
        backoff: float = 2.0,
    ) -> None:
        self._api_key = api_key or ""
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={"Accept": "application/json"},
                timeout=httpx.Timeout(30.0, connect=10.0),
            )
        return self._client

    @property
    def enabled(self) -> bool:
        """OMDb exige une cle API : sans cle, le repli est desactive."""
        return bool(self._api_key)

    async def lookup(
        self,
        title: str,
        year: Optional[int] = None,
        kind: str = "movie",
    ) -> Optional[SecondaryMatch]:
        """
        Recherche la meilleure correspondance OMDb pour un titre.

        Args:
            title: Titre libre
            year: Annee optionnelle
            kind: "movie" ou "tv" (converti en type OMDb "series")

        Returns:
            SecondaryMatch ou None si OMDb ne trouve rien
        """
        if not self.enabled:
            return None

        params: dict[str, Any] = {
            "t": title,
            "type": "movie" if kind == "movie" else "series",
            "apikey": self._api_key,
        }
        if year:
            params["y"] = year

        response = await request_with_retry(
            self._get_client(),
            "GET",
            "/",
            max_attempts=self._max_attempts,
            backoff=self._backoff,
            params=params,
        )
        data = response.json()

        if data.get("Response") != "True":
            logger.debug(f"OMDb: aucun resultat pour {title!r} ({data.get('Error')})")
            return None

        # "Year" vaut "2016" pour un film, "2008–2013" pour une serie
        return SecondaryMatch(
            title=data.get("Title", title),
            year=year_from_date(data.get("Year")),
            external_id=data.get("imdbID"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
