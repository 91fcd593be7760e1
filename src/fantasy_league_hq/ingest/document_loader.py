import logging
from collections.abc import Mapping
from typing import Any

import yaml

from fantasy_league_hq.domain.errors import DocumentError, DocumentMalformed, DocumentMissing, FetchError
from fantasy_league_hq.domain.weekly import WeeklyContent, WeeklyIntro
from fantasy_league_hq.ingest.fetcher import Fetcher
from fantasy_league_hq.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class _ShapeError(ValueError):
    pass


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise _ShapeError(f"expected an integer, got {value!r}") from None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _string_sequence(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise _ShapeError(f"'{key}' must be a sequence")
    return tuple(_text(item) for item in value)


def _parse_intro(value: Any) -> WeeklyIntro | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise _ShapeError("'intro' must be a mapping")
    return WeeklyIntro(
        title=_text(value.get("title")),
        subtitle=_text(value.get("subtitle")),
        description=_text(value.get("description")),
        season=_optional_int(value.get("season")),
        week=_optional_int(value.get("week")),
    )


def parse_weekly_content(source: str | bytes) -> WeeklyContent:
    """Decode a weekly YAML document; bytes are read as UTF-8.

    Raises:
        yaml.YAMLError: The text is not valid YAML.
        ValueError: The bytes are not UTF-8, or the YAML does not have the
            weekly document shape.
    """
    text = source.decode("utf-8") if isinstance(source, bytes) else source
    data = yaml.safe_load(text)
    if not isinstance(data, Mapping):
        raise _ShapeError("document root must be a mapping")
    return WeeklyContent(
        intro=_parse_intro(data.get("intro")),
        ranks=_string_sequence(data, "ranks"),
        blurbs=_string_sequence(data, "blurbs"),
    )


async def load_weekly_document(fetcher: Fetcher, path: str) -> Result[WeeklyContent, DocumentError]:
    """Load one week's content without raising.

    An unpublished week is ``Err(DocumentMissing)``; a document that cannot be
    decoded is ``Err(DocumentMalformed)``.
    """
    try:
        raw = await fetcher.fetch_bytes(path)
    except FetchError as e:
        logger.info("Weekly content %s not available: %s", path, e)
        return Err(DocumentMissing(path, e.status))

    try:
        content = parse_weekly_content(raw)
    except (yaml.YAMLError, ValueError) as e:
        logger.warning("Could not decode weekly content %s: %s", path, e)
        return Err(DocumentMalformed(path, str(e)))

    logger.debug("Loaded %d ranked teams from %s", content.entry_count, path)
    return Ok(content)
