import functools
from collections.abc import Collection, Iterable

from fantasy_league_hq.domain.standings import (
    RollupEntry,
    StandingsEntry,
    SurvivorEntry,
    SurvivorPlacement,
    SurvivorSeason,
)

WIN_PCT_EPSILON = 0.001

ROLLUP_COLUMNS: tuple[str, ...] = (
    "franchise_name",
    "h2h_wins",
    "h2h_losses",
    "h2h_winpct",
    "points_for",
    "potential_points",
    "points_against",
)


def win_pct(wins: float, losses: float) -> float:
    games = wins + losses
    return wins / games if games > 0 else 0.0


def _compare_rollup(a: RollupEntry, b: RollupEntry) -> int:
    if abs(a.h2h_winpct - b.h2h_winpct) > WIN_PCT_EPSILON:
        return -1 if a.h2h_winpct > b.h2h_winpct else 1
    if a.points_for == b.points_for:
        return 0
    return -1 if a.points_for > b.points_for else 1


def rollup_standings(entries: Iterable[StandingsEntry], seasons: Collection[int]) -> list[RollupEntry]:
    """Sum each franchise's standings across the selected seasons.

    Ordered by win percentage descending; win percentages within 0.001 of each
    other are ordered by points for, descending.
    """
    if not seasons:
        return []

    totals: dict[str, list[float]] = {}
    for entry in entries:
        if entry.season not in seasons:
            continue
        sums = totals.setdefault(entry.franchise_name, [0.0, 0.0, 0.0, 0.0, 0.0])
        sums[0] += entry.h2h_wins
        sums[1] += entry.h2h_losses
        sums[2] += entry.points_for
        sums[3] += entry.points_against
        sums[4] += entry.potential_points

    rollup = [
        RollupEntry(
            franchise_name=name,
            h2h_wins=wins,
            h2h_losses=losses,
            points_for=points_for,
            points_against=points_against,
            potential_points=potential,
            h2h_winpct=win_pct(wins, losses),
        )
        for name, (wins, losses, points_for, points_against, potential) in totals.items()
    ]
    rollup.sort(key=functools.cmp_to_key(_compare_rollup))
    return rollup


def sort_rollup(rollup: Iterable[RollupEntry], column: str, *, descending: bool = True) -> list[RollupEntry]:
    """Re-order a rollup by one column; text columns compare case-insensitively."""
    if column not in ROLLUP_COLUMNS:
        raise ValueError(f"Unknown standings column '{column}'")
    if column == "franchise_name":
        return sorted(rollup, key=lambda r: r.franchise_name.casefold(), reverse=descending)
    return sorted(rollup, key=lambda r: getattr(r, column), reverse=descending)


def available_seasons(entries: Iterable[StandingsEntry | SurvivorEntry]) -> list[int]:
    return sorted({entry.season for entry in entries}, reverse=True)


def season_label(selected: Collection[int], total: int) -> str:
    """Summary text for a season multi-select."""
    count = len(selected)
    if count == 0:
        return "Select Seasons"
    if count == total:
        return "All Seasons"
    newest = sorted(selected, reverse=True)
    if count == 1:
        return str(newest[0])
    suffix = ", ..." if count > 2 else ""
    return f"{newest[0]}, {newest[1]}{suffix}"


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def survivor_season(entries: Iterable[SurvivorEntry], season: int) -> SurvivorSeason:
    """Final elimination order for one season, longest survivor first."""
    ranked = sorted((e for e in entries if e.season == season), key=lambda e: e.weeks_alive, reverse=True)
    placements = [
        SurvivorPlacement(place=i, label=ordinal(i), owner_name=e.owner_name, weeks_alive=e.weeks_alive)
        for i, e in enumerate(ranked, start=1)
    ]
    return SurvivorSeason(season=season, placements=placements)
