from __future__ import annotations

from enum import Enum, StrEnum
from typing import assert_never

from fantasy_league_hq.domain.errors import UnknownLeagueError


class League(StrEnum):
    EPSILON = "epsilon"
    SIXTH_CITY = "sixth-city"
    SURVIVOR = "survivor"

    @classmethod
    def parse(cls, name: str) -> League:
        """Accept the path segment, the member name, or the legacy camel-case key ("sixthCity")."""
        normalized = name.strip().replace("_", "-").lower()
        for league in cls:
            if normalized in (league.value, league.value.replace("-", "")):
                return league
        raise UnknownLeagueError(name)


def path_segment(league: League) -> str:
    match league:
        case League.EPSILON:
            return "epsilon"
        case League.SIXTH_CITY:
            return "sixth-city"
        case League.SURVIVOR:
            return "survivor"
        case _:
            assert_never(league)


class QuoteMode(Enum):
    SIMPLE = "simple"
    ESCAPED = "escaped"


class TableResource(Enum):
    FRANCHISES = ("fact_franchises.csv", QuoteMode.ESCAPED)
    SCHEDULE = ("v_fact_schedule.csv", QuoteMode.ESCAPED)
    STANDINGS = ("standings.csv", QuoteMode.SIMPLE)
    SURVIVOR_STANDINGS = ("v_fact_standings.csv", QuoteMode.ESCAPED)

    def __init__(self, filename: str, quote_mode: QuoteMode) -> None:
        self.filename = filename
        self.quote_mode = quote_mode


FONT_EXTENSIONS: tuple[str, ...] = ("ttf", "otf", "woff", "woff2")


def table_path(league: League, table: TableResource) -> str:
    return f"/data/{path_segment(league)}/api/{table.filename}"


def weekly_content_path(league: League, week: int) -> str:
    return f"/data/{path_segment(league)}/content/week{week:02d}.yml"


def team_metadata_path(league: League) -> str:
    return f"/data/{path_segment(league)}/ref/team_metadata.json"


def font_path(file_stem: str, extension: str) -> str:
    return f"/assets/fonts/{file_stem}.{extension}"
