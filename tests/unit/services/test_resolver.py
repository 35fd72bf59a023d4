"""
Tests unitaires pour MetadataResolver.

Verifie:
- Cache-first : un hit ne fait aucun appel reseau
- Selection : annee exacte, sinon premier resultat ; preferences anime
- Repli OMDb puis nouvelle recherche TMDB avec le titre canonique
- NotFound jamais mis en cache
- RateLimitExceeded propagee a l'appelant
"""

from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from medialinker.adapters.api.retry import RateLimitExceeded
from medialinker.core.ports.cache import IKeyValueCache
from medialinker.core.ports.api_clients import (
    IMetadataProvider,
    ISecondaryProvider,
    SecondaryMatch,
)
from medialinker.core.value_objects import (
    ANIME_POLICY,
    MOVIE_POLICY,
    NotFound,
    ProviderRecord,
)
from medialinker.services.context import RunContext
from medialinker.services.resolver import MetadataResolver, cache_key, select_record

DUNE_2021 = ProviderRecord(title="Dune", year="2021", provider_id="438631", source="tmdb")
DUNE_1984 = ProviderRecord(title="Dune", year="1984", provider_id="841", source="tmdb")


@pytest.fixture
def mock_primary() -> MagicMock:
    """Mock du fournisseur principal (aucun resultat par defaut)."""
    primary = MagicMock(spec=IMetadataProvider)
    primary.source = "tmdb"
    primary.search = AsyncMock(return_value=[])
    return primary


@pytest.fixture
def mock_secondary() -> MagicMock:
    """Mock du fournisseur de repli (aucun resultat par defaut)."""
    secondary = MagicMock(spec=ISecondaryProvider)
    secondary.lookup = AsyncMock(return_value=None)
    return secondary


@pytest.fixture
def resolver(
    run_context: RunContext, mock_primary: MagicMock, mock_secondary: MagicMock
) -> MetadataResolver:
    return MetadataResolver(run_context, mock_primary, mock_secondary)


class TestSelectRecord:
    """Tests de la selection du meilleur candidat."""

    def test_exact_year_preferred(self) -> None:
        assert select_record([DUNE_1984, DUNE_2021], 2021, MOVIE_POLICY) is DUNE_2021

    def test_first_result_without_year_match(self) -> None:
        assert select_record([DUNE_1984, DUNE_2021], 1999, MOVIE_POLICY) is DUNE_1984

    def test_first_result_without_year_hint(self) -> None:
        assert select_record([DUNE_2021, DUNE_1984], None, MOVIE_POLICY) is DUNE_2021

    def test_empty(self) -> None:
        assert select_record([], 2021, MOVIE_POLICY) is None

    def test_anime_prefers_japanese_animation(self) -> None:
        drama = ProviderRecord(
            title="Frieren Documentary",
            year="2023",
            payload={"genre_ids": [18], "origin_country": ["US"]},
        )
        anime = ProviderRecord(
            title="Frieren: Beyond Journey's End",
            year="2023",
            payload={"genre_ids": [16, 10759], "origin_country": ["JP"]},
        )

        assert select_record([drama, anime], 2023, ANIME_POLICY) is anime

    def test_anime_without_preferred_candidate_uses_all(self) -> None:
        drama = ProviderRecord(title="Show", year="2020", payload={"genre_ids": [18]})
        assert select_record([drama], None, ANIME_POLICY) is drama


class TestCacheKey:
    def test_lowercase_title_and_year(self) -> None:
        assert cache_key("Dune", 2021) == "dune|2021"

    def test_without_year(self) -> None:
        assert cache_key("Dune", None) == "dune|"


class TestResolve:
    """Tests de MetadataResolver.resolve()."""

    @pytest.mark.asyncio
    async def test_second_resolve_uses_cache(
        self, resolver: MetadataResolver, mock_primary: MagicMock
    ) -> None:
        """Resoudre Dune/2021 deux fois ne fait aucun appel supplementaire."""
        mock_primary.search.return_value = [DUNE_1984, DUNE_2021]

        first = await resolver.resolve("Dune", 2021)
        calls_after_first = resolver.network_calls
        second = await resolver.resolve("Dune", 2021)

        assert first == DUNE_2021
        assert second == DUNE_2021
        assert mock_primary.search.await_count == 1
        assert resolver.network_calls == calls_after_first == 1

    @pytest.mark.asyncio
    async def test_success_is_written_to_cache(
        self, resolver: MetadataResolver, run_context: RunContext, mock_primary: MagicMock
    ) -> None:
        mock_primary.search.return_value = [DUNE_2021]

        await resolver.resolve("Dune", 2021)

        assert run_context.metadata_cache.get("dune|2021")["title"] == "Dune"

    @pytest.mark.asyncio
    async def test_search_uses_policy_kind(
        self, run_context: RunContext, mock_primary: MagicMock
    ) -> None:
        context = replace(run_context, policy=ANIME_POLICY)
        resolver = MetadataResolver(context, mock_primary)

        await resolver.resolve("Frieren", None)

        mock_primary.search.assert_awaited_once_with("Frieren", None, kind="tv")

    @pytest.mark.asyncio
    async def test_fallback_requeries_primary_with_canonical_title(
        self,
        resolver: MetadataResolver,
        mock_primary: MagicMock,
        mock_secondary: MagicMock,
    ) -> None:
        amelie = ProviderRecord(title="Amélie", year="2001", provider_id="194", source="tmdb")
        mock_primary.search.side_effect = [[], [amelie]]
        mock_secondary.lookup.return_value = SecondaryMatch(
            title="Amélie", year=2001, external_id="tt0211915"
        )

        result = await resolver.resolve("Le Fabuleux Destin", None)

        assert result == amelie
        mock_secondary.lookup.assert_awaited_once_with("Le Fabuleux Destin", None, kind="movie")
        assert mock_primary.search.await_args_list[1].args == ("Amélie", 2001)
        assert resolver.network_calls == 3

    @pytest.mark.asyncio
    async def test_fallback_keeps_original_year_hint(
        self,
        resolver: MetadataResolver,
        mock_primary: MagicMock,
        mock_secondary: MagicMock,
    ) -> None:
        mock_primary.search.side_effect = [[], [DUNE_2021]]
        mock_secondary.lookup.return_value = SecondaryMatch(title="Dune")

        await resolver.resolve("Dune Part One", 2021)

        assert mock_primary.search.await_args_list[1].args == ("Dune", 2021)

    @pytest.mark.asyncio
    async def test_http_error_triggers_fallback(
        self,
        resolver: MetadataResolver,
        mock_primary: MagicMock,
        mock_secondary: MagicMock,
    ) -> None:
        mock_primary.search.side_effect = [httpx.ConnectError("boom"), [DUNE_2021]]
        mock_secondary.lookup.return_value = SecondaryMatch(title="Dune", year=2021)

        result = await resolver.resolve("Dune", 2021)

        assert result == DUNE_2021

    @pytest.mark.asyncio
    async def test_unreadable_body_triggers_fallback(
        self,
        resolver: MetadataResolver,
        mock_primary: MagicMock,
        mock_secondary: MagicMock,
    ) -> None:
        """Un corps non JSON (ValueError) est traite comme une erreur HTTP."""
        mock_primary.search.side_effect = [ValueError("Expecting value"), [DUNE_2021]]
        mock_secondary.lookup.return_value = SecondaryMatch(title="Dune", year=2021)

        result = await resolver.resolve("Dune", 2021)

        assert result == DUNE_2021

    @pytest.mark.asyncio
    async def test_unreadable_secondary_body_gives_not_found(
        self, resolver: MetadataResolver, mock_secondary: MagicMock
    ) -> None:
        mock_secondary.lookup.side_effect = ValueError("Expecting value")

        result = await resolver.resolve("Dune", 2021)

        assert isinstance(result, NotFound)

    @pytest.mark.asyncio
    async def test_dry_run_does_not_write_cache(
        self, run_context: RunContext, mock_primary: MagicMock, tmp_path
    ) -> None:
        context = replace(run_context, dry_run=True)
        mock_primary.search.return_value = [DUNE_2021]

        result = await MetadataResolver(context, mock_primary).resolve("Dune", 2021)

        assert result == DUNE_2021
        assert len(context.metadata_cache) == 0
        assert not (tmp_path / "cache" / "movies-metadata.json").exists()

    @pytest.mark.asyncio
    async def test_cache_write_error_keeps_resolution(
        self, run_context: RunContext, mock_primary: MagicMock
    ) -> None:
        broken_cache = MagicMock(spec=IKeyValueCache)
        broken_cache.get.return_value = None
        broken_cache.set.side_effect = OSError("No space left on device")
        context = replace(run_context, metadata_cache=broken_cache)
        mock_primary.search.return_value = [DUNE_2021]

        result = await MetadataResolver(context, mock_primary).resolve("Dune", 2021)

        assert result == DUNE_2021

    @pytest.mark.asyncio
    async def test_not_found_is_never_cached(
        self,
        resolver: MetadataResolver,
        run_context: RunContext,
        mock_primary: MagicMock,
    ) -> None:
        result = await resolver.resolve("Nothing Here", 2020)

        assert result == NotFound("Nothing Here", 2020)
        assert len(run_context.metadata_cache) == 0

        # Une nouvelle tentative interroge de nouveau le fournisseur
        await resolver.resolve("Nothing Here", 2020)
        assert mock_primary.search.await_count == 2

    @pytest.mark.asyncio
    async def test_secondary_error_gives_not_found(
        self, resolver: MetadataResolver, mock_secondary: MagicMock
    ) -> None:
        mock_secondary.lookup.side_effect = httpx.ReadTimeout("timeout")

        result = await resolver.resolve("Dune", 2021)

        assert isinstance(result, NotFound)

    @pytest.mark.asyncio
    async def test_without_secondary(self, run_context: RunContext, mock_primary: MagicMock) -> None:
        resolver = MetadataResolver(run_context, mock_primary, None)

        result = await resolver.resolve("Dune", 2021)

        assert isinstance(result, NotFound)
        assert resolver.network_calls == 1

    @pytest.mark.asyncio
    async def test_rate_limit_exceeded_propagates(
        self, resolver: MetadataResolver, mock_primary: MagicMock
    ) -> None:
        mock_primary.search.side_effect = RateLimitExceeded(attempts=5)

        with pytest.raises(RateLimitExceeded):
            await resolver.resolve("Dune", 2021)
