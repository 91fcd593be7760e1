"""Comma-separated line parsing for the site's flat data files.

Only the quoting the published tables use is supported: a double quote toggles
quoted mode, and in escaped mode a doubled quote inside a quoted field is a
literal quote. Fields are whitespace-trimmed.
"""

from fantasy_league_hq.domain.league import QuoteMode


def parse_line(line: str, *, quote_mode: QuoteMode = QuoteMode.ESCAPED) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = quote_mode is QuoteMode.ESCAPED

    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if escaped and in_quotes and line[i + 1 : i + 2] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def split_lines(text: str) -> list[str]:
    """Split a resource into lines, dropping surrounding blank space."""
    stripped = text.strip()
    if not stripped:
        return []
    return stripped.split("\n")


def zip_record(headers: list[str], values: list[str]) -> dict[str, str]:
    """Pair values with headers by position; missing trailing values become ""."""
    return {header: values[i] if i < len(values) else "" for i, header in enumerate(headers)}
