from dataclasses import dataclass


class HqError(Exception):
    """Base error for hard failures while loading league data."""


class FetchError(HqError):
    """A resource could not be fetched (non-OK status or transport failure)."""

    def __init__(self, path: str, status: int | None = None, cause: Exception | None = None) -> None:
        self.path = path
        self.status = status
        self.cause = cause
        detail = f"status {status}" if status is not None else str(cause or "request failed")
        super().__init__(f"Failed to fetch {path}: {detail}")

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class EmptyResourceError(HqError):
    """A tabular resource has no header line."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Resource {path} has no header line")


class MalformedResourceError(HqError):
    """A tabular resource was fetched but is not UTF-8 text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Resource {path} could not be decoded: {reason}")


class UnknownLeagueError(HqError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown league '{name}'")


@dataclass(frozen=True)
class DocumentMissing:
    """The document is not published (yet) or could not be reached."""

    path: str
    status: int | None = None

    def __str__(self) -> str:
        return f"{self.path} unavailable (status {self.status})"


@dataclass(frozen=True)
class DocumentMalformed:
    """The document was fetched but does not decode to the expected shape."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path} malformed: {self.reason}"


type DocumentError = DocumentMissing | DocumentMalformed
