import logging
import re

from fantasy_league_hq.domain.errors import FetchError
from fantasy_league_hq.domain.franchise import FontFace
from fantasy_league_hq.domain.league import FONT_EXTENSIONS, font_path
from fantasy_league_hq.ingest.fetcher import Fetcher

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def font_file_stem(font_name: str) -> str:
    return _WHITESPACE_RE.sub("_", font_name.lower())


class FontLoader:
    """Finds a team's custom font file, remembering fonts already loaded."""

    def __init__(self, fetcher: Fetcher, extensions: tuple[str, ...] = FONT_EXTENSIONS) -> None:
        self._fetcher = fetcher
        self._extensions = extensions
        self._loaded: dict[str, FontFace] = {}

    def is_loaded(self, font_name: str) -> bool:
        return font_name in self._loaded

    async def load(self, font_name: str) -> FontFace | None:
        if not font_name:
            return None
        if font_name in self._loaded:
            return self._loaded[font_name]

        stem = font_file_stem(font_name)
        for extension in self._extensions:
            path = font_path(stem, extension)
            try:
                data = await self._fetcher.fetch_bytes(path)
            except FetchError:
                continue
            face = FontFace(name=font_name, path=path, data=data)
            self._loaded[font_name] = face
            logger.debug("Loaded font %s from %s", font_name, path)
            return face

        logger.info("No font file found for %s, using fallback", font_name)
        return None
