"""
Tests unitaires pour ReleaseFilenameParser.

Verifie le parsing des films, series et animes, les rejets types
(SkippedSpecial, Unparsable) et les replis sur le dossier parent.
"""

from pathlib import Path

import pytest

from medialinker.adapters.parsing.release_parser import (
    ReleaseFilenameParser,
    clean_title,
    strip_noise,
)
from medialinker.core.ports.parser import IFilenameParser
from medialinker.core.value_objects import (
    ANIME_POLICY,
    MOVIE_POLICY,
    SERIES_POLICY,
    MediaType,
    ParsedRelease,
    SkippedSpecial,
    Unparsable,
)


@pytest.fixture
def movie_parser() -> ReleaseFilenameParser:
    return ReleaseFilenameParser(MOVIE_POLICY)


@pytest.fixture
def series_parser() -> ReleaseFilenameParser:
    return ReleaseFilenameParser(SERIES_POLICY)


@pytest.fixture
def anime_parser() -> ReleaseFilenameParser:
    return ReleaseFilenameParser(ANIME_POLICY)


class TestHelpers:
    """Tests des fonctions de nettoyage."""

    def test_strip_site_prefix(self) -> None:
        assert strip_noise("www.Torrent9.org - Some.Movie.2020") == "Some.Movie.2020"

    def test_strip_domain_prefix_without_www(self) -> None:
        assert strip_noise("yts.tv - Some.Movie.2020") == "Some.Movie.2020"

    def test_title_with_dash_is_not_a_site_prefix(self) -> None:
        assert strip_noise("Star.Trek - Picard") == "Star.Trek - Picard"

    def test_bracket_tags_are_blanked(self) -> None:
        assert strip_noise("Show [EZTV]").strip() == "Show"

    def test_clean_title_removes_labels(self) -> None:
        assert clean_title("Some Movie REPACK PROPER ") == "Some Movie"

    def test_clean_title_trims_dangling_dashes(self) -> None:
        assert clean_title(" - Some Movie - ") == "Some Movie"


class TestMovieParsing:
    """Tests de la politique films."""

    def test_implements_interface(self, movie_parser: ReleaseFilenameParser) -> None:
        assert isinstance(movie_parser, IFilenameParser)

    def test_title_year_and_descriptors(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/src/Some.Movie.2020.1080p.WEB-DL.x264.mkv"))

        assert result == ParsedRelease(
            raw_title="Some Movie",
            year=2020,
            descriptors=("1080P", "WEB-DL", "X264"),
            media_type=MediaType.MOVIE,
        )
        assert result.descriptor_label == "1080P WEB-DL X264"
        assert result.episodes == ()
        assert not result.is_episodic

    def test_without_year_cuts_at_first_descriptor(
        self, movie_parser: ReleaseFilenameParser
    ) -> None:
        result = movie_parser.parse(Path("/src/Some.Movie.1080p.BluRay.x264.mkv"))

        assert result.raw_title == "Some Movie"
        assert result.year is None

    def test_without_year_or_descriptor(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/src/Some_Movie.mkv"))
        assert result.raw_title == "Some Movie"
        assert result.descriptors == ()

    def test_site_prefix_removed(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/src/www.Torrent9.org - Dune.2021.MULTi.2160p.mkv"))
        assert result.raw_title == "Dune"
        assert result.year == 2021

    def test_first_plausible_year_ends_title(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/src/Blade.Runner.2049.2017.720p.mkv"))
        # 2049 est la premiere annee plausible : le titre s'arrete avant
        assert result.raw_title == "Blade Runner"
        assert result.year == 2049

    def test_empty_title_falls_back_to_folder(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/src/Some.Movie.2020.1080p/2020.mkv"))

        assert result.raw_title == "Some Movie"
        assert result.year == 2020

    def test_unparsable_without_title(self, movie_parser: ReleaseFilenameParser) -> None:
        result = movie_parser.parse(Path("/2020.1080p.mkv"))

        assert isinstance(result, Unparsable)
        assert result.filename == "2020.1080p.mkv"


class TestSeriesParsing:
    """Tests de la politique series."""

    def test_season_episode_and_descriptors(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Title.Name.S01E02.1080p.x264.mkv"))

        assert isinstance(result, ParsedRelease)
        assert result.raw_title == "Title Name"
        assert result.season == 1
        assert result.episodes == (2,)
        assert "1080P" in result.descriptors
        assert "X264" in result.descriptors
        assert result.media_type is MediaType.SERIES

    def test_episode_range(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Show.S01E01-E03.mkv"))
        assert result.episodes == (1, 2, 3)

    def test_chained_episodes(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Show.S02E05E06.720p.mkv"))
        assert result.season == 2
        assert result.episodes == (5, 6)

    def test_season_zero_is_skipped(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Show.S00E01.mkv"))

        assert result == SkippedSpecial("Show.S00E01.mkv")

    def test_cross_notation(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/The.Office.3x07.HDTV.avi"))
        assert result.raw_title == "The Office"
        assert (result.season, result.episodes) == (3, (7,))

    def test_three_digits_notation(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Some.Show.204.HDTV.mkv"))
        assert (result.season, result.episodes) == (2, (4,))

    def test_resolution_is_not_an_episode(self, series_parser: ReleaseFilenameParser) -> None:
        """720p et x264 ne sont jamais lus comme saison/episode."""
        result = series_parser.parse(Path("/src/Some.Show.720p.x264.mkv"))
        assert isinstance(result, Unparsable)

    def test_year_in_title_becomes_hint(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Doctor.Who.2005.S01E01.mkv"))
        assert result.raw_title == "Doctor Who"
        assert result.year == 2005

    def test_bracket_tag_removed(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Show.Name.S01E02.[EZTV].mkv"))
        assert result.raw_title == "Show Name"

    def test_title_from_folder_when_missing(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Breaking Bad Season 1/S01E05.mkv"))
        assert result.raw_title == "Breaking Bad"
        assert result.episodes == (5,)

    def test_no_episode_is_unparsable(self, series_parser: ReleaseFilenameParser) -> None:
        result = series_parser.parse(Path("/src/Just.A.Title.mkv"))
        assert isinstance(result, Unparsable)


class TestAnimeParsing:
    """Tests de la politique animes (numerotation absolue, titre du dossier)."""

    def test_absolute_episode_with_folder_title(self, anime_parser: ReleaseFilenameParser) -> None:
        source = Path("/src/Frieren (2023) [1080p]/[SubsPlease] Frieren - 012 (1080p) [A1B2].mkv")

        result = anime_parser.parse(source)

        assert result.raw_title == "Frieren"
        assert result.year == 2023
        assert result.season == 1
        assert result.episodes == (12,)
        assert result.descriptors == ("1080P",)
        assert result.media_type is MediaType.ANIME

    def test_folder_episode_range_is_not_title(self, anime_parser: ReleaseFilenameParser) -> None:
        source = Path("/src/One Punch Man 001-012/One.Punch.Man.005.mkv")

        result = anime_parser.parse(source)

        assert result.raw_title == "One Punch Man"
        assert result.episodes == (5,)

    def test_season_episode_notation_still_wins(self, anime_parser: ReleaseFilenameParser) -> None:
        result = anime_parser.parse(Path("/src/Show/Show.S02E03.mkv"))
        assert (result.season, result.episodes) == (2, (3,))
