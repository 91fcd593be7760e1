import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Annotated

import typer

from fantasy_league_hq.cli._logging import configure_logging
from fantasy_league_hq.cli._output import (
    print_error,
    print_franchise_colors,
    print_franchise_directory,
    print_franchise_page,
    print_record,
    print_record_book,
    print_survivor_season,
    print_weekly_hub,
)
from fantasy_league_hq.config import SiteSettings, create_config, load_site_settings
from fantasy_league_hq.domain.errors import HqError
from fantasy_league_hq.domain.league import League
from fantasy_league_hq.domain.schedule import AggregationKey
from fantasy_league_hq.ingest.fetcher import DirectoryFetcher, HttpFetcher
from fantasy_league_hq.services.franchise_stats import parse_game_types
from fantasy_league_hq.services.standings import ROLLUP_COLUMNS, sort_rollup
from fantasy_league_hq.session import LeagueSession

app = typer.Typer(name="hq", help="League HQ: standings, franchises and power rankings from the site's data files")

_state: dict[str, SiteSettings] = {}


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    base_url: Annotated[str | None, typer.Option("--base-url", help="Site URL the /data paths resolve against")] = None,
    data_dir: Annotated[str | None, typer.Option("--data-dir", help="Read data from a local site checkout")] = None,
    config: Annotated[str, typer.Option("--config", help="YAML settings file")] = "hq.yaml",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
) -> None:
    """League HQ: standings, franchises and power rankings from the site's data files."""
    configure_logging(verbose=verbose, quiet=quiet)
    site: dict[str, object] = {}
    if base_url is not None:
        site["base_url"] = base_url
    if data_dir is not None:
        site["data_dir"] = data_dir
    _state["settings"] = load_site_settings(create_config(yaml_path=config, overrides={"site": site} if site else None))
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _settings() -> SiteSettings:
    return _state.get("settings") or load_site_settings()


@asynccontextmanager
async def _open_session(settings: SiteSettings) -> AsyncIterator[LeagueSession]:
    fetcher: HttpFetcher | DirectoryFetcher
    if settings.data_dir:
        fetcher = DirectoryFetcher(settings.data_dir)
    else:
        fetcher = HttpFetcher(settings.base_url, timeout=settings.timeout_seconds)
    try:
        yield LeagueSession(fetcher, settings)
    finally:
        await fetcher.aclose()


def _run(flow: Callable[[LeagueSession], Awaitable[None]]) -> None:
    settings = _settings()

    async def _main() -> None:
        async with _open_session(settings) as session:
            await flow(session)

    try:
        asyncio.run(_main())
    except HqError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _league(name: str) -> League:
    try:
        return League.parse(name)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


_LeagueArg = Annotated[str, typer.Argument(help="League: epsilon, sixth-city or survivor")]


@app.command()
def colors(league: _LeagueArg = "sixth-city") -> None:
    """Show each franchise's introductory color set."""
    selected = _league(league)

    async def flow(session: LeagueSession) -> None:
        print_franchise_colors(await session.franchise_colors(selected), session.settings)

    _run(flow)


@app.command()
def franchises(league: _LeagueArg = "sixth-city") -> None:
    """List current-season franchises by conference."""
    selected = _league(league)

    async def flow(session: LeagueSession) -> None:
        print_franchise_directory(await session.franchise_directory(selected))

    _run(flow)


@app.command()
def franchise(
    abbrev: Annotated[str, typer.Argument(help="Franchise abbreviation")],
    league: Annotated[str, typer.Option("--league", help="League name")] = "sixth-city",
    by_owner: Annotated[bool, typer.Option("--by-owner", help="Aggregate across every franchise the owner ran")] = False,
    game_type: Annotated[str, typer.Option("--game-type", help="Game type codes, e.g. 0 or -1,-2")] = "0",
) -> None:
    """Show a franchise's identity and career statistics."""
    selected = _league(league)
    key = AggregationKey.OWNER_NAME if by_owner else AggregationKey.FRANCHISE_ID
    try:
        game_types = parse_game_types(game_type)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid game type selection '{game_type}'") from e

    async def flow(session: LeagueSession) -> None:
        page = await session.franchise_page(selected, abbrev)
        stats = None
        if page.found:
            stats = await session.franchise_stats(selected, abbrev, key=key, game_types=game_types)
        print_franchise_page(page, stats)

    _run(flow)


@app.command("record-book")
def record_book(
    league: _LeagueArg = "sixth-city",
    season: Annotated[list[int] | None, typer.Option("--season", help="Season(s) to include; default all")] = None,
    sort: Annotated[str | None, typer.Option("--sort", help="Column to sort by")] = None,
    ascending: Annotated[bool, typer.Option("--ascending", help="Sort ascending")] = False,
) -> None:
    """Show standings summed across the selected seasons."""
    selected = _league(league)
    if sort is not None and sort not in ROLLUP_COLUMNS:
        raise typer.BadParameter(f"Unknown column '{sort}'; choose from {', '.join(ROLLUP_COLUMNS)}")

    async def flow(session: LeagueSession) -> None:
        book = await session.record_book(selected, season)
        if sort is not None:
            book = replace(book, rows=sort_rollup(book.rows, sort, descending=not ascending))
        print_record_book(book)

    _run(flow)


@app.command()
def survivor(
    season: Annotated[int | None, typer.Option("--season", help="Season; default newest")] = None,
) -> None:
    """Show the survivor elimination order for a season."""

    async def flow(session: LeagueSession) -> None:
        print_survivor_season(await session.survivor_archive(season))

    _run(flow)


@app.command()
def weekly(
    week: Annotated[int | None, typer.Argument(help="Week number; default latest published")] = None,
) -> None:
    """Show every league's power rankings for a week."""

    async def flow(session: LeagueSession) -> None:
        target = week
        if target is None:
            latest = await asyncio.gather(*(session.latest_week(league) for league in League))
            published = [w for w in latest if w is not None]
            target = max(published) if published else 1
        print_weekly_hub(await session.weekly_hub(target), session.settings)

    _run(flow)


@app.command()
def record(
    franchise_id: Annotated[str, typer.Argument(help="Franchise id")],
    season: Annotated[int, typer.Argument(help="Season")],
    week: Annotated[int, typer.Argument(help="Count games through this week")],
    league: Annotated[str, typer.Option("--league", help="League name")] = "sixth-city",
) -> None:
    """Show a franchise's record through a given week."""
    selected = _league(league)

    async def flow(session: LeagueSession) -> None:
        print_record(franchise_id, season, week, await session.record_through_week(selected, franchise_id, season, week))

    _run(flow)
