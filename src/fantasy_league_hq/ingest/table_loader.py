import logging

from fantasy_league_hq.domain.errors import EmptyResourceError, MalformedResourceError
from fantasy_league_hq.domain.league import League, QuoteMode, TableResource, table_path
from fantasy_league_hq.ingest.delimited import parse_line, split_lines, zip_record
from fantasy_league_hq.ingest.fetcher import Fetcher

logger = logging.getLogger(__name__)

type Record = dict[str, str]


def strip_bom(text: str) -> str:
    return text.removeprefix("\ufeff")


def parse_table(text: str, path: str, *, quote_mode: QuoteMode = QuoteMode.ESCAPED) -> list[Record]:
    lines = split_lines(strip_bom(text))
    if not lines:
        raise EmptyResourceError(path)
    headers = parse_line(lines[0], quote_mode=quote_mode)
    return [zip_record(headers, parse_line(line, quote_mode=quote_mode)) for line in lines[1:]]


async def load_table(fetcher: Fetcher, path: str, *, quote_mode: QuoteMode = QuoteMode.ESCAPED) -> list[Record]:
    """Fetch and parse one delimited resource.

    Raises:
        FetchError: The fetch did not succeed.
        EmptyResourceError: The resource has no header line.
        MalformedResourceError: The resource is not UTF-8 text.
    """
    raw = await fetcher.fetch_bytes(path)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedResourceError(path, str(e)) from e
    records = parse_table(text, path, quote_mode=quote_mode)
    logger.info("Parsed %d records from %s", len(records), path)
    return records


class TableLoader:
    """Loads league tables once and serves them from memory afterwards.

    Two loads of the same table issued before the first completes both reach
    the network; the later result replaces the earlier one.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self._fetcher = fetcher
        self._tables: dict[tuple[League, TableResource], list[Record]] = {}

    def is_loaded(self, league: League, table: TableResource) -> bool:
        return (league, table) in self._tables

    async def load(self, league: League, table: TableResource) -> list[Record]:
        key = (league, table)
        if key in self._tables:
            logger.debug("Table %s/%s served from cache", league.value, table.filename)
            return self._tables[key]
        records = await load_table(self._fetcher, table_path(league, table), quote_mode=table.quote_mode)
        self._tables[key] = records
        return records
