from collections.abc import Collection, Iterable, Sequence
from typing import assert_never

from fantasy_league_hq.domain.franchise import FranchiseSnapshot
from fantasy_league_hq.domain.schedule import (
    REGULAR_SEASON,
    AggregationKey,
    FranchiseStats,
    ScheduleGame,
    ScoreSummary,
    WinLossRecord,
)


def parse_game_types(value: str) -> frozenset[int]:
    """Parse a game type selection such as ``"0"`` or ``"-1,-2"`` (either bracket)."""
    return frozenset(int(part) for part in value.split(",") if part.strip())


def _matches(game: ScheduleGame, franchise: FranchiseSnapshot, key: AggregationKey) -> bool:
    match key:
        case AggregationKey.FRANCHISE_ID:
            return game.franchise_id == franchise.franchise_id
        case AggregationKey.OWNER_NAME:
            return game.owner_name == franchise.owner_name
        case _:
            assert_never(key)


def _record(games: Sequence[ScheduleGame]) -> WinLossRecord:
    wins = sum(1 for g in games if g.result == 1)
    ties = sum(1 for g in games if g.result != 1 and g.result_char == "T")
    return WinLossRecord(wins=wins, losses=len(games) - wins - ties, ties=ties)


def _pct(record: WinLossRecord) -> float:
    if record.games == 0:
        return 0.0
    return round((record.wins + record.ties / 2) / record.games, 3)


def _summary(scores: Sequence[float]) -> ScoreSummary:
    return ScoreSummary(average=sum(scores) / len(scores), minimum=min(scores), maximum=max(scores))


def franchise_stats(
    franchise: FranchiseSnapshot,
    games: Iterable[ScheduleGame],
    *,
    key: AggregationKey = AggregationKey.FRANCHISE_ID,
    game_types: Collection[int] | None = frozenset({REGULAR_SEASON}),
) -> FranchiseStats | None:
    """Career results for a franchise, or ``None`` when no game matches.

    Aggregating by owner name merges every franchise id the owner has run.
    ``game_types=None`` includes every game type. Ties count as half a win.
    """
    selected = [
        g
        for g in games
        if _matches(g, franchise, key) and (game_types is None or g.game_type in game_types)
    ]
    if not selected:
        return None

    record = _record(selected)
    overall_pct = _pct(record)
    conference_record = _record([g for g in selected if g.is_intra_conf])
    return FranchiseStats(
        record=record,
        win_pct=overall_pct,
        loss_pct=round(1.0 - overall_pct, 3),
        conference_record=conference_record,
        conference_win_pct=_pct(conference_record),
        points_for=_summary([g.franchise_score for g in selected]),
        points_against=_summary([g.opponent_score for g in selected]),
    )


def record_through_week(
    games: Iterable[ScheduleGame],
    franchise_id: str,
    season: int,
    through_week: int,
) -> WinLossRecord:
    """Win/loss record for one franchise-season up to and including a week.

    Every game that is not a win counts as a loss.
    """
    played = [g for g in games if g.franchise_id == franchise_id and g.season == season and g.week <= through_week]
    wins = sum(g.result for g in played)
    return WinLossRecord(wins=wins, losses=len(played) - wins)
