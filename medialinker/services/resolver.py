"""
Service de resolution des titres vers un enregistrement canonique.

MetadataResolver transforme un titre extrait d'un nom de fichier en
ProviderRecord, avec un cache persistant et une chaine de fournisseurs:

1. Cache "titre|annee" : un hit ne fait aucun appel reseau
2. Fournisseur principal (TMDB) : annee exacte privilegiee, sinon le
   premier resultat dans l'ordre de pertinence
3. Repli (OMDb) : son titre canonique sert a reinterroger TMDB
4. Echec des deux : NotFound, jamais mis en cache (une panne passagere
   ne doit pas empoisonner le cache)

Le delai de rate limiting entre deux resolutions est du par l'appelant :
le resolver expose seulement le nombre d'appels reseau effectues.
"""

from typing import Optional, Union

import httpx
from loguru import logger

from medialinker.core.ports.api_clients import IMetadataProvider, ISecondaryProvider
from medialinker.core.value_objects.naming_policy import NamingPolicy
from medialinker.core.value_objects.provider_record import NotFound, ProviderRecord
from medialinker.services.context import RunContext


def cache_key(title: str, year: Optional[int]) -> str:
    """Cle du cache de metadonnees : "titre en minuscules|annee"."""
    return f"{title.lower()}|{year or ''}"


def select_record(
    records: list[ProviderRecord],
    year_hint: Optional[int],
    policy: NamingPolicy,
) -> Optional[ProviderRecord]:
    """
    Choisit le meilleur candidat parmi les resultats du fournisseur.

    Les candidats preferes par la politique (animes : genre Animation et
    origine JP) sont consideres en premier s'il y en a. Parmi eux, le
    resultat dont l'annee egale l'indice est retenu, sinon le premier.

    Args:
        records: Resultats dans l'ordre du fournisseur.
        year_hint: Annee extraite du nom de fichier.
        policy: Politique de nommage de l'execution.

    Returns:
        Le candidat retenu, ou None si la liste est vide.
    """
    if not records:
        return None

    candidates = [r for r in records if _is_preferred(r, policy)] or records

    if year_hint:
        for record in candidates:
            if record.year == str(year_hint):
                return record
    return candidates[0]


def _is_preferred(record: ProviderRecord, policy: NamingPolicy) -> bool:
    if policy.preferred_genre_id is None and policy.preferred_origin_country is None:
        return False
    payload = record.payload
    if policy.preferred_genre_id is not None:
        if policy.preferred_genre_id not in payload.get("genre_ids", []):
            return False
    if policy.preferred_origin_country is not None:
        if policy.preferred_origin_country not in payload.get("origin_country", []):
            return False
    return True


class MetadataResolver:
    """
    Resolution cache-first avec repli entre fournisseurs.

    Attributes:
        network_calls: Nombre total d'appels aux fournisseurs depuis la creation

    Example:
        resolver = MetadataResolver(context, tmdb_client, omdb_client)
        result = await resolver.resolve("Dune", 2021)
        if isinstance(result, ProviderRecord):
            print(f"{result.title} ({result.year})")
    """

    def __init__(
        self,
        context: RunContext,
        primary: IMetadataProvider,
        secondary: Optional[ISecondaryProvider] = None,
    ) -> None:
        """
        Initialise le resolver.

        Args:
            context: Contexte d'execution (politique, cache de metadonnees)
            primary: Fournisseur principal (TMDB)
            secondary: Fournisseur de repli (OMDb), optionnel
        """
        self._context = context
        self._primary = primary
        self._secondary = secondary
        self.network_calls = 0

    async def resolve(
        self, title: str, year_hint: Optional[int] = None
    ) -> Union[ProviderRecord, NotFound]:
        """
        Resout un titre en enregistrement canonique.

        Args:
            title: Titre nettoye extrait du nom de fichier
            year_hint: Annee extraite du nom de fichier (optionnelle)

        Returns:
            ProviderRecord en cas de succes, NotFound sinon

        Raises:
            RateLimitExceeded: Si le fournisseur principal reste en rate limiting
        """
        key = cache_key(title, year_hint)
        cached = self._context.metadata_cache.get(key)
        if cached is not None:
            logger.debug(f"[Cache] {title!r} -> {cached.get('title')}")
            return ProviderRecord.from_dict(cached)

        record = await self._search_primary(title, year_hint)

        if record is None:
            record = await self._search_with_fallback(title, year_hint)

        if record is None:
            return NotFound(title, year_hint)

        # La simulation ne persiste rien, pas meme les resolutions
        if not self._context.dry_run:
            try:
                self._context.metadata_cache.set(key, record.to_dict())
            except OSError as e:
                logger.warning(f"Ecriture du cache de metadonnees impossible ({title!r}): {e}")
        logger.info(f"Resolu: {title!r} -> {record.title} ({record.year}) [{record.source}]")
        return record

    async def _search_primary(
        self, title: str, year_hint: Optional[int]
    ) -> Optional[ProviderRecord]:
        """Recherche principale ; une erreur HTTP ou une reponse illisible est un echec."""
        policy = self._context.policy
        self.network_calls += 1
        try:
            records = await self._primary.search(title, year_hint, kind=policy.search_kind)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Erreur {self._primary.source} pour {title!r}: {e}")
            return None
        return select_record(records, year_hint, policy)

    async def _search_with_fallback(
        self, title: str, year_hint: Optional[int]
    ) -> Optional[ProviderRecord]:
        """
        Interroge le repli puis reinterroge le principal avec son titre.

        L'annee du repli remplace l'indice si elle est connue.
        """
        if self._secondary is None:
            return None

        policy = self._context.policy
        logger.info(f"Recherche de repli: {title!r}")
        self.network_calls += 1
        try:
            match = await self._secondary.lookup(title, year_hint, kind=policy.search_kind)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Erreur du fournisseur de repli pour {title!r}: {e}")
            return None

        if match is None:
            logger.debug(f"Repli: aucun resultat pour {title!r}")
            return None

        logger.info(f"Repli: {title!r} -> {match.title} ({match.year})")
        record = await self._search_primary(match.title, match.year or year_hint)
        if record is None:
            logger.warning(f"{self._primary.source} ne trouve toujours pas: {match.title!r}")
        return record
