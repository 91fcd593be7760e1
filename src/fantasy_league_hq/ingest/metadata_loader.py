import json
import logging
from collections.abc import Mapping
from typing import Any

from fantasy_league_hq.domain.errors import FetchError
from fantasy_league_hq.domain.franchise import TeamMetadata
from fantasy_league_hq.domain.league import League, team_metadata_path
from fantasy_league_hq.ingest.fetcher import Fetcher

logger = logging.getLogger(__name__)


def _metadata_from_entry(info: Mapping[str, Any]) -> TeamMetadata:
    season = info.get("season")
    return TeamMetadata(
        franchise_name=str(info["franchise_name"]),
        primary=str(info.get("primary") or ""),
        secondary=str(info.get("secondary") or ""),
        tertiary=str(info.get("tertiary") or ""),
        abbrev=str(info.get("abbrev") or ""),
        conference=str(info.get("conference") or ""),
        font=str(info.get("font") or ""),
        season=int(season) if season not in (None, "") else None,
    )


def parse_team_metadata(source: str | bytes) -> dict[str, TeamMetadata]:
    """Re-key a franchise-id keyed metadata document by franchise name.

    Entries without a franchise name or with an unreadable season are skipped.

    Raises:
        ValueError: The document is not UTF-8 JSON with an object at the root.
    """
    data = json.loads(source.decode("utf-8") if isinstance(source, bytes) else source)
    if not isinstance(data, Mapping):
        raise ValueError("team metadata root must be an object")
    by_name: dict[str, TeamMetadata] = {}
    for franchise_id, info in data.items():
        if not isinstance(info, Mapping) or "franchise_name" not in info:
            logger.warning("Skipping team metadata entry %r: no franchise_name", franchise_id)
            continue
        try:
            metadata = _metadata_from_entry(info)
        except (TypeError, ValueError) as e:
            logger.warning("Skipping team metadata entry %r: %s", franchise_id, e)
            continue
        by_name[metadata.franchise_name] = metadata
    return by_name


async def load_team_metadata(fetcher: Fetcher, league: League) -> dict[str, TeamMetadata]:
    """Load a league's published team metadata, or an empty map when there is none."""
    path = team_metadata_path(league)
    try:
        raw = await fetcher.fetch_bytes(path)
    except FetchError as e:
        logger.info("No team metadata found for %s, using defaults (%s)", league.value, e)
        return {}
    try:
        metadata = parse_team_metadata(raw)
    except ValueError as e:
        logger.warning("Ignoring malformed team metadata %s: %s", path, e)
        return {}
    logger.debug("Loaded metadata for %d %s teams", len(metadata), league.value)
    return metadata
