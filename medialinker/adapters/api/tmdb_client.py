"""
Client TMDB, fournisseur principal de metadonnees films et series.

Implemente l'interface IMetadataProvider pour TMDB (The Movie Database).
Utilise le mecanisme de retry borne pour gerer le rate limiting.
Le cache des resolutions est gere par le resolver, pas par le client.

Usage:
    client = TMDBClient(api_key="your_key", language="en-US")
    records = await client.search("Dune", year=2021, kind="movie")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from medialinker.adapters.api.retry import request_with_retry
from medialinker.core.ports.api_clients import IMetadataProvider
from medialinker.core.value_objects.provider_record import ProviderRecord, year_from_date
from medialinker.utils.constants import UNKNOWN_YEAR


class TMDBClient(IMetadataProvider):
    """
    Client API TMDB pour les recherches de films et de series.

    Implemente IMetadataProvider avec:
    - Recherche de films (/search/movie, filtre "year")
    - Recherche de series (/search/tv, filtre "first_air_date_year")
    - Retry borne avec backoff exponentiel sur rate limiting (429)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3

    Example:
        client = TMDBClient(api_key="xxx", language="fr-FR")

        records = await client.search("Inception", year=2010)
        if records:
            print(f"{records[0].title} ({records[0].year})")

        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "en-US",
        max_attempts: int = 5,
        backoff: float = 2.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (cle v3 ou Read Access Token v4)
            language: Code langue des titres retournes (ex: "en-US")
            max_attempts: Nombre maximum de tentatives sur 429
            backoff: Delai de base du backoff exponentiel en secondes
        """
        self._api_key = api_key or ""
        self._language = language
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Returns:
            httpx.AsyncClient configure pour l'API TMDB
        """
        if self._client is None or self._client.is_closed:
            # Detecter le type de cle : v3 (32 hex) vs v4 (long JWT)
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                # API Key v3 : passer en parametre de requete
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=30.0,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    @property
    def language(self) -> str:
        return self._language

    async def search(
        self,
        query: str,
        year: Optional[int] = None,
        kind: str = "movie",
    ) -> list[ProviderRecord]:
        """
        Recherche des films ou des series par titre.

        Args:
            query: Titre a rechercher
            year: Annee optionnelle (sortie pour un film, premiere diffusion
                  pour une serie)
            kind: "movie" ou "tv"

        Returns:
            Liste de ProviderRecord dans l'ordre de pertinence TMDB
        """
        params: dict[str, Any] = {
            "query": query,
            "language": self._language,
            "include_adult": "false",
        }
        if year:
            params["year" if kind == "movie" else "first_air_date_year"] = year

        logger.debug(f"TMDB /search/{kind}: {query!r} ({year})")
        response = await request_with_retry(
            self._get_client(),
            "GET",
            f"/search/{kind}",
            max_attempts=self._max_attempts,
            backoff=self._backoff,
            params=params,
        )
        data = response.json()

        return [self._to_record(item, kind) for item in data.get("results", [])]

    def _to_record(self, item: dict[str, Any], kind: str) -> ProviderRecord:
        """Convertit un resultat TMDB en ProviderRecord."""
        if kind == "movie":
            title = item.get("title") or item.get("original_title", "")
            date = item.get("release_date")
        else:
            title = item.get("name") or item.get("original_name", "")
            date = item.get("first_air_date")

        item_year = year_from_date(date)
        return ProviderRecord(
            title=title,
            year=str(item_year) if item_year else UNKNOWN_YEAR,
            provider_id=str(item["id"]),
            source=self.source,
            payload=item,
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
