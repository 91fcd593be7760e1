import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import httpx

from fantasy_league_hq.domain.errors import FetchError

logger = logging.getLogger(__name__)


@runtime_checkable
class Fetcher(Protocol):
    async def fetch_text(self, path: str) -> str: ...

    async def fetch_bytes(self, path: str) -> bytes: ...


class HttpFetcher:
    """Fetch site resources over HTTP relative to a deployment base URL."""

    def __init__(
        self,
        base_url: str = "",
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    def resolve(self, path: str) -> str:
        if path.startswith("/") and not path.startswith("//"):
            return f"{self._base_url}{path}"
        return path

    async def _get(self, path: str) -> httpx.Response:
        url = self.resolve(path)
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            raise FetchError(path, cause=e) from e
        if not response.is_success:
            raise FetchError(path, status=response.status_code)
        return response

    async def fetch_text(self, path: str) -> str:
        response = await self._get(path)
        return response.text

    async def fetch_bytes(self, path: str) -> bytes:
        response = await self._get(path)
        return response.content

    async def aclose(self) -> None:
        await self._client.aclose()


class DirectoryFetcher:
    """Read site resources from a local checkout of the static site."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def _file(self, path: str) -> Path:
        return self._root / path.lstrip("/")

    async def fetch_text(self, path: str) -> str:
        return (await self.fetch_bytes(path)).decode("utf-8")

    async def fetch_bytes(self, path: str) -> bytes:
        file = self._file(path)
        logger.debug("Reading %s", file)
        try:
            return file.read_bytes()
        except FileNotFoundError as e:
            raise FetchError(path, status=404, cause=e) from e
        except OSError as e:
            raise FetchError(path, cause=e) from e

    async def aclose(self) -> None:
        return None
