"""
Tests unitaires pour les objets valeur du domaine.
"""

import pytest

from medialinker.core.value_objects import (
    ANIME_POLICY,
    MOVIE_POLICY,
    SERIES_POLICY,
    MediaType,
    ParsedRelease,
    ProviderRecord,
    policy_for,
)
from medialinker.core.value_objects.provider_record import year_from_date


class TestProviderRecord:
    def test_dict_roundtrip_keeps_payload(self) -> None:
        record = ProviderRecord(
            title="Dune",
            year="2021",
            provider_id="438631",
            source="tmdb",
            payload={"genre_ids": [878]},
        )

        restored = ProviderRecord.from_dict(record.to_dict())

        assert restored == record
        assert restored.payload == {"genre_ids": [878]}

    def test_from_dict_defaults(self) -> None:
        record = ProviderRecord.from_dict({"title": "Untitled", "year": None})

        assert record.year == "0000"
        assert record.provider_id == ""

    def test_payload_ignored_in_equality(self) -> None:
        assert ProviderRecord("A", "2000", payload={"x": 1}) == ProviderRecord("A", "2000")

    def test_immutable(self) -> None:
        record = ProviderRecord(title="Dune")
        with pytest.raises(AttributeError):
            record.title = "Other"  # type: ignore[misc]


class TestYearFromDate:
    @pytest.mark.parametrize(
        "date,expected",
        [("2021-09-15", 2021), ("1984", 1984), ("", None), (None, None), ("n/a", None)],
    )
    def test_year_from_date(self, date, expected) -> None:
        assert year_from_date(date) == expected


class TestNamingPolicy:
    def test_policy_for(self) -> None:
        assert policy_for(MediaType.MOVIE) is MOVIE_POLICY
        assert policy_for(MediaType.SERIES) is SERIES_POLICY
        assert policy_for(MediaType.ANIME) is ANIME_POLICY

    def test_names(self) -> None:
        assert [p.name for p in (MOVIE_POLICY, SERIES_POLICY, ANIME_POLICY)] == [
            "movies",
            "series",
            "anime",
        ]

    def test_anime_preferences(self) -> None:
        assert ANIME_POLICY.episode_width == 3
        assert ANIME_POLICY.preferred_genre_id == 16
        assert ANIME_POLICY.preferred_origin_country == "JP"
        assert MOVIE_POLICY.preferred_genre_id is None


class TestParsedRelease:
    def test_descriptor_label(self) -> None:
        parsed = ParsedRelease(raw_title="Dune", descriptors=("2160P", "HDR"))
        assert parsed.descriptor_label == "2160P HDR"
        assert not parsed.is_episodic

    def test_episodic(self) -> None:
        assert ParsedRelease(raw_title="Show", season=1, episodes=(1,)).is_episodic

    def test_episodes_without_season_are_not_episodic(self) -> None:
        assert not ParsedRelease(raw_title="Show", episodes=(1,)).is_episodic
