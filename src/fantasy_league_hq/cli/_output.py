from rich.console import Console
from rich.table import Table

from fantasy_league_hq.config import SiteSettings
from fantasy_league_hq.domain.franchise import FranchiseColors, FranchiseDirectory, FranchisePage
from fantasy_league_hq.domain.schedule import FranchiseStats, WinLossRecord
from fantasy_league_hq.domain.standings import RecordBook, SurvivorSeason
from fantasy_league_hq.domain.weekly import LeagueWeek
from fantasy_league_hq.services.colors import color_swatch

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_PODIUM_STYLES = {1: "bold yellow", 2: "bold white", 3: "bold dark_orange3"}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _swatch_cell(hex_color: str, settings: SiteSettings) -> str:
    swatch = color_swatch(hex_color, settings.plain_text, settings.placeholder_color)
    return f"[{swatch.text_color} on {swatch.background}] {swatch.label} [/]"


def print_franchise_colors(colors: list[FranchiseColors], settings: SiteSettings) -> None:
    table = Table(title="Team Colors")
    table.add_column("Team")
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Primary")
    table.add_column("Secondary")
    table.add_column("Tertiary")
    for c in colors:
        table.add_row(
            c.team_select,
            c.franchise_name,
            c.owner_name,
            _swatch_cell(c.primary, settings),
            _swatch_cell(c.secondary, settings),
            _swatch_cell(c.tertiary, settings),
        )
    console.print(table)


def print_franchise_directory(directory: FranchiseDirectory | None) -> None:
    if directory is None:
        console.print("No franchises found.")
        return
    for conference, members in sorted(directory.conferences.items()):
        table = Table(title=f"{conference or 'Unaffiliated'} ({directory.season})")
        table.add_column("Abbrev")
        table.add_column("Franchise")
        table.add_column("Owner")
        for f in members:
            table.add_row(f.abbrev, f.franchise_name, f.owner_name)
        console.print(table)


def print_franchise_page(page: FranchisePage, stats: FranchiseStats | None) -> None:
    franchise = page.franchise
    if franchise is None:
        console.print(f"[bold]Franchise not found:[/bold] {page.abbrev}")
        console.print("Return to franchises: [underline]hq franchises[/underline]")
        return
    font = page.font.name if page.font else f"{franchise.display_font} (fallback)"
    console.print(f"[bold]{franchise.franchise_name}[/bold] ({franchise.abbrev}, {franchise.season})")
    console.print(f"  Owner: {franchise.owner_name}")
    console.print(f"  Font: {font}")
    if stats is None:
        console.print("  No games for the selected game types.")
        return
    console.print(f"  Record: {stats.record} ({stats.win_pct:.3f})")
    console.print(f"  Conference: {stats.conference_record} ({stats.conference_win_pct:.3f})")
    pf, pa = stats.points_for, stats.points_against
    console.print(f"  Points for: avg {pf.average:.2f}, min {pf.minimum:.2f}, max {pf.maximum:.2f}")
    console.print(f"  Points against: avg {pa.average:.2f}, min {pa.minimum:.2f}, max {pa.maximum:.2f}")


def print_record_book(book: RecordBook) -> None:
    if not book.rows:
        console.print("No data for selected seasons")
        return
    table = Table(title=f"Record Book: {book.label}")
    table.add_column("#", justify="right")
    table.add_column("Franchise")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("Win %", justify="right")
    table.add_column("PF", justify="right")
    table.add_column("Max PF", justify="right")
    table.add_column("PA", justify="right")
    for i, row in enumerate(book.rows, start=1):
        table.add_row(
            str(i),
            row.franchise_name,
            str(round(row.h2h_wins)),
            str(round(row.h2h_losses)),
            f"{row.h2h_winpct:.3f}",
            f"{row.points_for:.2f}",
            f"{row.potential_points:.2f}",
            f"{row.points_against:.2f}",
        )
    console.print(table)


def print_survivor_season(season: SurvivorSeason | None) -> None:
    if season is None or not season.placements:
        console.print("No data available")
        return
    table = Table(title=f"Elimination Archive {season.season}")
    table.add_column("Place")
    table.add_column("Owner")
    table.add_column("Weeks Alive", justify="right")
    for p in season.placements:
        table.add_row(p.label, p.owner_name, str(p.weeks_alive), style=_PODIUM_STYLES.get(p.place))
    console.print(table)


def _movement_text(movement: int | None) -> str:
    if movement is None:
        return ""
    if movement > 0:
        return f"[green]+{movement}[/green]"
    if movement < 0:
        return f"[red]{movement}[/red]"
    return "="


def print_weekly_hub(hub: list[LeagueWeek], settings: SiteSettings) -> None:
    for league_week in hub:
        content = league_week.content
        if content is None:
            console.print(f"[bold]{league_week.league.value}[/bold]: no data for week {league_week.week}")
            continue
        title = content.intro.title if content.intro and content.intro.title else league_week.league.value
        table = Table(title=title, caption=content.intro.subtitle if content.intro else None)
        table.add_column("#", justify="right")
        table.add_column("Team")
        table.add_column("Move", justify="right")
        table.add_column("Blurb")
        for card in league_week.cards:
            team = card.team
            if card.color:
                swatch = color_swatch(card.color, settings.branded_text, settings.placeholder_color)
                team = f"[{swatch.text_color} on {swatch.background}]{card.team}[/]"
            table.add_row(str(card.rank), team, _movement_text(card.movement), card.blurb)
        console.print(table)


def print_record(franchise_id: str, season: int, week: int, record: WinLossRecord) -> None:
    console.print(f"{franchise_id} {season} through week {week}: {record}")
