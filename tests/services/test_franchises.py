from fantasy_league_hq.domain.franchise import FranchiseSnapshot
from fantasy_league_hq.services.franchises import (
    current_season_franchises,
    find_franchise,
    franchise_color_sets,
    franchise_directory,
    latest_by,
    team_metadata_from_snapshots,
)


def _snapshot(
    season: int,
    *,
    franchise_id: str = "1",
    name: str = "Alpha",
    abbrev: str = "ALP",
    owner: str = "Ann",
    primary: str = "#111111",
    conference: str = "SCC",
    font: str = "",
) -> FranchiseSnapshot:
    return FranchiseSnapshot(
        franchise_id=franchise_id,
        franchise_name=name,
        abbrev=abbrev,
        owner_name=owner,
        primary=primary,
        secondary="#222222",
        tertiary="#333333",
        season=season,
        conference=conference,
        font=font,
    )


class TestFranchiseColorSets:
    def test_keeps_earliest_season_per_identity(self) -> None:
        colors = franchise_color_sets([_snapshot(2022), _snapshot(2020), _snapshot(2021)])

        assert len(colors) == 1
        assert colors[0].season == 2020
        assert colors[0].team_select == "ALP (2020)"

    def test_rebrand_is_a_separate_entry(self) -> None:
        colors = franchise_color_sets([_snapshot(2020), _snapshot(2021), _snapshot(2022, primary="#999999")])

        assert [(c.primary, c.season) for c in colors] == [("#111111", 2020), ("#999999", 2022)]

    def test_sorted_by_abbrev_ignoring_case(self) -> None:
        colors = franchise_color_sets(
            [
                _snapshot(2020, franchise_id="2", abbrev="zed"),
                _snapshot(2020, franchise_id="3", abbrev="Bee"),
                _snapshot(2020, franchise_id="4", abbrev="ace"),
            ]
        )

        assert [c.abbrev for c in colors] == ["ace", "Bee", "zed"]


class TestLatestBy:
    def test_picks_maximum_season(self) -> None:
        latest = latest_by([_snapshot(2019), _snapshot(2021), _snapshot(2020)], lambda s: s.franchise_name)

        assert latest["Alpha"].season == 2021

    def test_ties_keep_first_encountered(self) -> None:
        first = _snapshot(2021, owner="First")
        second = _snapshot(2021, owner="Second")

        latest = latest_by([first, second], lambda s: (s.franchise_id, s.abbrev))

        assert latest[("1", "ALP")] is first


class TestFindFranchise:
    def test_case_insensitive_most_recent(self) -> None:
        found = find_franchise([_snapshot(2021, owner="Old"), _snapshot(2023, owner="New")], "alp")

        assert found is not None
        assert found.owner_name == "New"

    def test_missing_abbrev_is_none(self) -> None:
        assert find_franchise([_snapshot(2021)], "XYZ") is None

    def test_empty_abbrev_is_none(self) -> None:
        assert find_franchise([_snapshot(2021)], "") is None
        assert find_franchise([_snapshot(2021)], None) is None


class TestDirectory:
    def test_current_season_only(self) -> None:
        current = current_season_franchises([_snapshot(2022), _snapshot(2023, franchise_id="2", abbrev="BRV")])

        assert [f.abbrev for f in current] == ["BRV"]

    def test_empty_input(self) -> None:
        assert current_season_franchises([]) == []
        assert franchise_directory([]) is None

    def test_groups_by_conference_sorted(self) -> None:
        directory = franchise_directory(
            [
                _snapshot(2023, franchise_id="1", abbrev="ZZZ", conference="SCC"),
                _snapshot(2023, franchise_id="2", abbrev="AAA", conference="SCC"),
                _snapshot(2023, franchise_id="3", abbrev="MMM", conference="HCC"),
                _snapshot(2022, franchise_id="4", abbrev="OLD", conference="HCC"),
            ]
        )

        assert directory is not None
        assert directory.season == 2023
        assert [f.abbrev for f in directory.conferences["SCC"]] == ["AAA", "ZZZ"]
        assert [f.abbrev for f in directory.conferences["HCC"]] == ["MMM"]


class TestTeamMetadataFromSnapshots:
    def test_uses_most_recent_season_colors(self) -> None:
        metadata = team_metadata_from_snapshots([_snapshot(2020, primary="#000001"), _snapshot(2022, primary="#000002")])

        assert metadata["Alpha"].primary == "#000002"
        assert metadata["Alpha"].season == 2022

    def test_contrasts_with_color_lookup_policy(self) -> None:
        snapshots = [_snapshot(2020), _snapshot(2022)]

        assert franchise_color_sets(snapshots)[0].season == 2020
        assert team_metadata_from_snapshots(snapshots)["Alpha"].season == 2022
