"""Per-page state: loaded tables, metadata maps and fonts for one session.

A session starts empty and keeps each table after its first load; callers needing
fresh data start a new session. Independent loads are issued together.
"""

import asyncio
import logging
from collections.abc import Collection, Iterable
from enum import Enum
from typing import assert_never

from fantasy_league_hq.config import SiteSettings
from fantasy_league_hq.domain.errors import DocumentError
from fantasy_league_hq.domain.franchise import (
    FranchiseColors,
    FranchiseDirectory,
    FranchisePage,
    FranchiseSnapshot,
    TeamMetadata,
)
from fantasy_league_hq.domain.league import League, TableResource, weekly_content_path
from fantasy_league_hq.domain.schedule import REGULAR_SEASON, AggregationKey, FranchiseStats, ScheduleGame, WinLossRecord
from fantasy_league_hq.domain.standings import RecordBook, StandingsEntry, SurvivorEntry, SurvivorSeason
from fantasy_league_hq.domain.weekly import LeagueWeek, WeeklyContent
from fantasy_league_hq.ingest.column_maps import (
    franchise_row_to_snapshot,
    schedule_row_to_game,
    standings_row_to_entry,
    survivor_row_to_entry,
)
from fantasy_league_hq.ingest.document_loader import load_weekly_document
from fantasy_league_hq.ingest.fetcher import Fetcher
from fantasy_league_hq.ingest.font_loader import FontLoader
from fantasy_league_hq.ingest.metadata_loader import load_team_metadata
from fantasy_league_hq.ingest.table_loader import TableLoader
from fantasy_league_hq.result import Ok, Result
from fantasy_league_hq.services import franchise_stats as stats_service
from fantasy_league_hq.services.franchises import (
    find_franchise,
    franchise_color_sets,
    franchise_directory,
    team_metadata_from_snapshots,
)
from fantasy_league_hq.services.rankings import ranking_cards
from fantasy_league_hq.services.standings import available_seasons, rollup_standings, season_label, survivor_season

logger = logging.getLogger(__name__)


class MetadataSource(Enum):
    FRANCHISE_TABLE = "franchise_table"
    PUBLISHED = "published"


class LeagueSession:
    def __init__(self, fetcher: Fetcher, settings: SiteSettings | None = None) -> None:
        self._fetcher = fetcher
        self._settings = settings or SiteSettings()
        self._tables = TableLoader(fetcher)
        self._fonts = FontLoader(fetcher)
        self._metadata: dict[League, dict[str, TeamMetadata]] = {}

    @property
    def settings(self) -> SiteSettings:
        return self._settings

    # -- Tables ----------------------------------------------------------------

    async def franchises(self, league: League) -> list[FranchiseSnapshot]:
        rows = await self._tables.load(league, TableResource.FRANCHISES)
        return [franchise_row_to_snapshot(row) for row in rows]

    async def schedule(self, league: League) -> list[ScheduleGame]:
        rows = await self._tables.load(league, TableResource.SCHEDULE)
        return [schedule_row_to_game(row) for row in rows]

    async def standings(self, league: League) -> list[StandingsEntry]:
        rows = await self._tables.load(league, TableResource.STANDINGS)
        return [standings_row_to_entry(row) for row in rows]

    async def survivor_standings(self) -> list[SurvivorEntry]:
        rows = await self._tables.load(League.SURVIVOR, TableResource.SURVIVOR_STANDINGS)
        return [survivor_row_to_entry(row) for row in rows]

    # -- Franchise pages -------------------------------------------------------

    async def franchise_colors(self, league: League) -> list[FranchiseColors]:
        return franchise_color_sets(await self.franchises(league))

    async def franchise_directory(self, league: League) -> FranchiseDirectory | None:
        return franchise_directory(await self.franchises(league))

    async def franchise_page(self, league: League, abbrev: str) -> FranchisePage:
        franchise = find_franchise(await self.franchises(league), abbrev)
        if franchise is None:
            logger.info("No %s franchise with abbreviation %r", league.value, abbrev)
            return FranchisePage(abbrev=abbrev, franchise=None)
        font = await self._fonts.load(franchise.font) if franchise.font else None
        return FranchisePage(abbrev=abbrev, franchise=franchise, font=font)

    async def franchise_stats(
        self,
        league: League,
        abbrev: str,
        *,
        key: AggregationKey = AggregationKey.FRANCHISE_ID,
        game_types: Collection[int] | None = frozenset({REGULAR_SEASON}),
    ) -> FranchiseStats | None:
        snapshots, games = await asyncio.gather(self.franchises(league), self.schedule(league))
        franchise = find_franchise(snapshots, abbrev)
        if franchise is None:
            return None
        return stats_service.franchise_stats(franchise, games, key=key, game_types=game_types)

    async def record_through_week(self, league: League, franchise_id: str, season: int, week: int) -> WinLossRecord:
        return stats_service.record_through_week(await self.schedule(league), franchise_id, season, week)

    # -- Standings ---------------------------------------------------------------

    async def record_book(self, league: League, seasons: Iterable[int] | None = None) -> RecordBook:
        """Cross-season standings; every season is selected when ``seasons`` is None."""
        entries = await self.standings(league)
        all_seasons = available_seasons(entries)
        selected = frozenset(all_seasons if seasons is None else seasons)
        return RecordBook(
            seasons=all_seasons,
            selected=selected,
            label=season_label(selected, len(all_seasons)),
            rows=rollup_standings(entries, selected),
        )

    async def survivor_archive(self, season: int | None = None) -> SurvivorSeason | None:
        """One season's elimination order; defaults to the newest season."""
        entries = await self.survivor_standings()
        seasons = available_seasons(entries)
        if not seasons:
            return None
        return survivor_season(entries, seasons[0] if season is None else season)

    # -- Metadata ------------------------------------------------------------------

    async def team_metadata(
        self,
        league: League,
        source: MetadataSource = MetadataSource.FRANCHISE_TABLE,
    ) -> dict[str, TeamMetadata]:
        """Rebuild a league's name-keyed team metadata, replacing any earlier map."""
        match source:
            case MetadataSource.FRANCHISE_TABLE:
                metadata = team_metadata_from_snapshots(await self.franchises(league))
            case MetadataSource.PUBLISHED:
                metadata = await load_team_metadata(self._fetcher, league)
            case _:
                assert_never(source)
        self._metadata[league] = metadata
        return metadata

    def cached_metadata(self, league: League) -> dict[str, TeamMetadata]:
        return self._metadata.get(league, {})

    # -- Weekly content ------------------------------------------------------------

    async def weekly_content(self, league: League, week: int) -> Result[WeeklyContent, DocumentError]:
        return await load_weekly_document(self._fetcher, weekly_content_path(league, week))

    async def _week_pair(self, league: League, week: int) -> tuple[WeeklyContent | None, WeeklyContent | None]:
        if week <= 1:
            current = await self.weekly_content(league, week)
            return _content_or_none(current), None
        current, previous = await asyncio.gather(
            self.weekly_content(league, week),
            self.weekly_content(league, week - 1),
        )
        return _content_or_none(current), _content_or_none(previous)

    async def weekly_hub(self, week: int, leagues: Iterable[League] = tuple(League)) -> list[LeagueWeek]:
        """Power rankings for every league in one week, with movement since the week before."""
        leagues = tuple(leagues)
        metadata_maps = await asyncio.gather(
            *(self.team_metadata(league, MetadataSource.PUBLISHED) for league in leagues)
        )
        pairs = await asyncio.gather(*(self._week_pair(league, week) for league in leagues))

        hub: list[LeagueWeek] = []
        for league, metadata, (current, previous) in zip(leagues, metadata_maps, pairs, strict=True):
            cards = ranking_cards(current, previous, metadata) if current is not None else []
            hub.append(LeagueWeek(league=league, week=week, content=current, cards=cards, metadata=metadata))
        return hub

    async def latest_week(self, league: League) -> int | None:
        """Highest published week, or None when nothing is published yet."""
        weeks = range(1, self._settings.max_week + 1)
        outcomes = await asyncio.gather(*(self.weekly_content(league, week) for week in weeks))
        published = [week for week, outcome in zip(weeks, outcomes, strict=True) if outcome.is_ok()]
        if not published:
            logger.info("No published weeks for %s", league.value)
            return None
        return max(published)


def _content_or_none(outcome: Result[WeeklyContent, DocumentError]) -> WeeklyContent | None:
    match outcome:
        case Ok(content):
            return content
        case _:
            return None
