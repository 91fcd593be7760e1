import pytest

from fantasy_league_hq.domain.franchise import FranchiseSnapshot
from fantasy_league_hq.domain.schedule import AggregationKey, ScheduleGame
from fantasy_league_hq.services.franchise_stats import franchise_stats, parse_game_types, record_through_week


def _franchise(franchise_id: str = "7", owner: str = "Ann") -> FranchiseSnapshot:
    return FranchiseSnapshot(
        franchise_id=franchise_id,
        franchise_name="Alpha",
        abbrev="ALP",
        owner_name=owner,
        primary="#111111",
        secondary="#222222",
        tertiary="#333333",
        season=2023,
    )


def _game(
    result_char: str,
    *,
    franchise_id: str = "7",
    owner: str = "Ann",
    season: int = 2023,
    week: int = 1,
    game_type: int = 0,
    score: float = 100.0,
    against: float = 90.0,
    conference: bool = False,
) -> ScheduleGame:
    return ScheduleGame(
        franchise_id=franchise_id,
        opponent_id="99",
        season=season,
        week=week,
        game_type=game_type,
        result=1 if result_char == "W" else 0,
        result_char=result_char,
        franchise_score=score,
        opponent_score=against,
        is_intra_conf=conference,
        owner_name=owner,
    )


class TestParseGameTypes:
    def test_single(self) -> None:
        assert parse_game_types("0") == frozenset({0})

    def test_brackets(self) -> None:
        assert parse_game_types("-1,-2") == frozenset({-1, -2})


class TestFranchiseStats:
    def test_no_matching_games_is_none(self) -> None:
        assert franchise_stats(_franchise(), []) is None
        assert franchise_stats(_franchise(), [_game("W", franchise_id="8")]) is None

    def test_record_and_percentages(self) -> None:
        games = [_game("W"), _game("W"), _game("L"), _game("W")]

        stats = franchise_stats(_franchise(), games)

        assert stats is not None
        assert str(stats.record) == "3-1"
        assert stats.win_pct == 0.75
        assert stats.loss_pct == 0.25

    def test_percentages_sum_to_one(self) -> None:
        stats = franchise_stats(_franchise(), [_game("W"), _game("L"), _game("L")])

        assert stats is not None
        assert stats.win_pct == 0.333
        assert stats.loss_pct == 0.667
        assert stats.win_pct + stats.loss_pct == 1.0

    @pytest.mark.parametrize(("wins", "losses"), [(2, 1), (5, 9), (10, 4), (7, 11), (3, 0), (0, 4), (13, 17), (19, 23)])
    def test_percentages_sum_to_exactly_one(self, wins: int, losses: int) -> None:
        games = [_game("W")] * wins + [_game("L")] * losses

        stats = franchise_stats(_franchise(), games)

        assert stats is not None
        assert stats.win_pct + stats.loss_pct == 1.0

    def test_tie_counts_as_half(self) -> None:
        stats = franchise_stats(_franchise(), [_game("W"), _game("T")])

        assert stats is not None
        assert str(stats.record) == "1-0-1"
        assert stats.win_pct == 0.75

    def test_score_summaries(self) -> None:
        games = [_game("W", score=120.5, against=99.0), _game("L", score=88.0, against=101.5)]

        stats = franchise_stats(_franchise(), games)

        assert stats is not None
        assert stats.points_for.average == pytest.approx(104.25)
        assert stats.points_for.minimum == 88.0
        assert stats.points_for.maximum == 120.5
        assert stats.points_against.maximum == 101.5

    def test_conference_record(self) -> None:
        games = [_game("W", conference=True), _game("L", conference=True), _game("W")]

        stats = franchise_stats(_franchise(), games)

        assert stats is not None
        assert str(stats.conference_record) == "1-1"
        assert stats.conference_win_pct == 0.5

    def test_default_is_regular_season_only(self) -> None:
        games = [_game("W"), _game("L", game_type=-1), _game("L", game_type=-2)]

        stats = franchise_stats(_franchise(), games)

        assert stats is not None
        assert str(stats.record) == "1-0"

    def test_playoff_selection(self) -> None:
        games = [_game("W"), _game("L", game_type=-1), _game("W", game_type=-2)]

        stats = franchise_stats(_franchise(), games, game_types={-1, -2})

        assert stats is not None
        assert str(stats.record) == "1-1"

    def test_all_game_types(self) -> None:
        games = [_game("W"), _game("L", game_type=-1)]

        stats = franchise_stats(_franchise(), games, game_types=None)

        assert stats is not None
        assert stats.record.games == 2

    def test_owner_aggregation_merges_franchise_ids(self) -> None:
        games = [_game("W", franchise_id="7"), _game("W", franchise_id="12"), _game("L", franchise_id="3", owner="Ben")]

        by_id = franchise_stats(_franchise(), games)
        by_owner = franchise_stats(_franchise(), games, key=AggregationKey.OWNER_NAME)

        assert by_id is not None and by_owner is not None
        assert by_id.record.games == 1
        assert str(by_owner.record) == "2-0"


class TestRecordThroughWeek:
    def test_counts_games_up_to_week(self) -> None:
        games = [
            _game("W", week=1),
            _game("L", week=2),
            _game("W", week=3),
            _game("W", week=4),
            _game("W", week=2, season=2022),
            _game("W", week=1, franchise_id="8"),
        ]

        record = record_through_week(games, "7", 2023, 3)

        assert (record.wins, record.losses) == (2, 1)

    def test_ties_are_losses(self) -> None:
        record = record_through_week([_game("T", week=1)], "7", 2023, 1)

        assert str(record) == "0-1"

    def test_no_games(self) -> None:
        assert str(record_through_week([], "7", 2023, 5)) == "0-0"
