from fantasy_league_hq.domain.franchise import FranchiseSnapshot
from fantasy_league_hq.domain.schedule import ScheduleGame
from fantasy_league_hq.domain.standings import StandingsEntry, SurvivorEntry
from fantasy_league_hq.ingest.table_loader import Record


def _to_int(value: str | None) -> int:
    if not value:
        return 0
    try:
        return int(float(value))
    except ValueError:
        return 0


def _to_float(value: str | None) -> float:
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError:
        return 0.0


def franchise_row_to_snapshot(row: Record) -> FranchiseSnapshot:
    return FranchiseSnapshot(
        franchise_id=row.get("franchise_id", ""),
        franchise_name=row.get("franchise_name", ""),
        abbrev=row.get("abbrev", ""),
        owner_name=row.get("owner_name", ""),
        primary=row.get("primary", ""),
        secondary=row.get("secondary", ""),
        tertiary=row.get("tertiary", ""),
        season=_to_int(row.get("season")),
        conference=row.get("conference", ""),
        font=row.get("font", ""),
        description=row.get("description", ""),
    )


def standings_row_to_entry(row: Record) -> StandingsEntry:
    return StandingsEntry(
        franchise_name=row.get("franchise_name", ""),
        season=_to_int(row.get("season")),
        h2h_wins=_to_float(row.get("h2h_wins")),
        h2h_losses=_to_float(row.get("h2h_losses")),
        points_for=_to_float(row.get("points_for")),
        points_against=_to_float(row.get("points_against")),
        potential_points=_to_float(row.get("potential_points")),
        franchise_id=row.get("franchise_id", ""),
    )


def survivor_row_to_entry(row: Record) -> SurvivorEntry:
    return SurvivorEntry(
        owner_name=row.get("owner_name", ""),
        season=_to_int(row.get("season")),
        weeks_alive=_to_int(row.get("weeks_alive")),
    )


def schedule_row_to_game(row: Record) -> ScheduleGame:
    return ScheduleGame(
        franchise_id=row.get("franchise_id", ""),
        opponent_id=row.get("opponent_id", ""),
        season=_to_int(row.get("season")),
        week=_to_int(row.get("week")),
        game_type=_to_int(row.get("game_type")),
        result=_to_int(row.get("result")),
        result_char=row.get("result_char", "").upper(),
        franchise_score=_to_float(row.get("franchise_score")),
        opponent_score=_to_float(row.get("opponent_score")),
        is_intra_conf=_to_int(row.get("is_intra_conf")) == 1,
        owner_name=row.get("owner_name", ""),
    )
