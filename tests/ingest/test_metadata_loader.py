import pytest

from fantasy_league_hq.domain.franchise import TeamMetadata
from fantasy_league_hq.domain.league import League
from fantasy_league_hq.ingest.metadata_loader import load_team_metadata, parse_team_metadata
from tests.fakes.fetcher import FakeFetcher

_PATH = "/data/epsilon/ref/team_metadata.json"


class TestParseTeamMetadata:
    def test_rekeys_by_franchise_name(self) -> None:
        metadata = parse_team_metadata(
            '{"f1": {"franchise_name": "Alpha", "primary": "#112233", "abbrev": "ALP"},'
            ' "f2": {"franchise_name": "Bravo", "primary": "#445566", "season": 2024}}'
        )

        assert metadata == {
            "Alpha": TeamMetadata(franchise_name="Alpha", primary="#112233", abbrev="ALP"),
            "Bravo": TeamMetadata(franchise_name="Bravo", primary="#445566", season=2024),
        }

    def test_entry_without_name_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        metadata = parse_team_metadata(
            '{"f1": {"primary": "#112233"}, "f2": {"franchise_name": "Bravo", "primary": "#445566"}}'
        )

        assert list(metadata) == ["Bravo"]
        assert "'f1'" in caplog.text

    def test_entry_with_bad_season_is_skipped(self) -> None:
        metadata = parse_team_metadata(
            '{"f1": {"franchise_name": "Alpha", "season": "last year"},'
            ' "f2": {"franchise_name": "Bravo", "primary": "#445566", "season": "2024"}}'
        )

        assert metadata == {"Bravo": TeamMetadata(franchise_name="Bravo", primary="#445566", season=2024)}

    def test_non_object_root_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_team_metadata("[1, 2]")


class TestLoadTeamMetadata:
    async def test_loads_published_metadata(self) -> None:
        fetcher = FakeFetcher({_PATH: '{"f1": {"franchise_name": "Alpha", "primary": "#112233"}}'})

        metadata = await load_team_metadata(fetcher, League.EPSILON)

        assert metadata["Alpha"].primary == "#112233"

    async def test_missing_file_yields_empty_map(self) -> None:
        assert await load_team_metadata(FakeFetcher(), League.EPSILON) == {}

    async def test_malformed_json_yields_empty_map(self, caplog: pytest.LogCaptureFixture) -> None:
        fetcher = FakeFetcher({_PATH: "{not json"})

        assert await load_team_metadata(fetcher, League.EPSILON) == {}
        assert "malformed team metadata" in caplog.text

    async def test_undecodable_file_yields_empty_map(self, caplog: pytest.LogCaptureFixture) -> None:
        fetcher = FakeFetcher({_PATH: b"\xff\xfe"})

        assert await load_team_metadata(fetcher, League.EPSILON) == {}
        assert "malformed team metadata" in caplog.text

    async def test_one_bad_entry_keeps_the_rest(self) -> None:
        fetcher = FakeFetcher(
            {_PATH: '{"f1": {"franchise_name": "Alpha", "primary": "#112233"}, "f2": ["not", "an", "entry"]}'}
        )

        metadata = await load_team_metadata(fetcher, League.EPSILON)

        assert set(metadata) == {"Alpha"}
