from collections.abc import Callable, Hashable, Iterable

from fantasy_league_hq.domain.franchise import (
    FranchiseColors,
    FranchiseDirectory,
    FranchiseSnapshot,
    TeamMetadata,
)


def franchise_color_sets(snapshots: Iterable[FranchiseSnapshot]) -> list[FranchiseColors]:
    """One entry per distinct color identity, dated to the season it first appeared.

    Sorted by abbreviation, case-insensitively.
    """
    earliest: dict[tuple[str, ...], FranchiseSnapshot] = {}
    for snapshot in snapshots:
        key = snapshot.identity
        existing = earliest.get(key)
        if existing is None or snapshot.season < existing.season:
            earliest[key] = snapshot

    colors = [
        FranchiseColors(
            franchise_id=s.franchise_id,
            franchise_name=s.franchise_name,
            abbrev=s.abbrev,
            owner_name=s.owner_name,
            primary=s.primary,
            secondary=s.secondary,
            tertiary=s.tertiary,
            season=s.season,
        )
        for s in earliest.values()
    ]
    colors.sort(key=lambda c: c.abbrev.casefold())
    return colors


def latest_by[K: Hashable](
    snapshots: Iterable[FranchiseSnapshot],
    key: Callable[[FranchiseSnapshot], K],
) -> dict[K, FranchiseSnapshot]:
    """Most recent season per key; on equal seasons the first snapshot seen is kept."""
    latest: dict[K, FranchiseSnapshot] = {}
    for snapshot in snapshots:
        k = key(snapshot)
        existing = latest.get(k)
        if existing is None or snapshot.season > existing.season:
            latest[k] = snapshot
    return latest


def find_franchise(snapshots: Iterable[FranchiseSnapshot], abbrev: str | None) -> FranchiseSnapshot | None:
    if not abbrev:
        return None
    wanted = abbrev.upper()
    return latest_by((s for s in snapshots if s.abbrev == wanted), lambda s: s.abbrev).get(wanted)


def current_season_franchises(snapshots: Iterable[FranchiseSnapshot]) -> list[FranchiseSnapshot]:
    items = list(snapshots)
    if not items:
        return []
    newest = max(s.season for s in items)
    return [s for s in items if s.season == newest]


def franchise_directory(snapshots: Iterable[FranchiseSnapshot]) -> FranchiseDirectory | None:
    """Current-season franchises grouped by conference, each group sorted by abbreviation."""
    current = current_season_franchises(snapshots)
    if not current:
        return None
    conferences: dict[str, list[FranchiseSnapshot]] = {}
    for franchise in current:
        conferences.setdefault(franchise.conference, []).append(franchise)
    for members in conferences.values():
        members.sort(key=lambda f: f.abbrev.casefold())
    return FranchiseDirectory(season=current[0].season, conferences=conferences)


def team_metadata_from_snapshots(snapshots: Iterable[FranchiseSnapshot]) -> dict[str, TeamMetadata]:
    """Name-keyed identity and colors from each franchise name's most recent season."""
    return {
        name: TeamMetadata(
            franchise_name=s.franchise_name,
            primary=s.primary,
            secondary=s.secondary,
            tertiary=s.tertiary,
            abbrev=s.abbrev,
            conference=s.conference,
            font=s.font,
            season=s.season,
        )
        for name, s in latest_by(snapshots, lambda s: s.franchise_name).items()
    }
