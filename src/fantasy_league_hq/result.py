"""Result type for outcomes that may legitimately be absent.

Soft-fail loaders return ``Ok(value)`` or ``Err(error)`` instead of raising so
callers can tell an expected absence from a malformed resource.

Usage:
    match await load_weekly_document(fetcher, path):
        case Ok(content):
            render(content)
        case Err(DocumentMissing()):
            show_no_data()
        case Err(error):
            logger.warning("Bad document: %s", error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from collections.abc import Callable


class UnwrapError(Exception):
    """Raised when unwrap() is called on an Err or unwrap_err() on an Ok."""


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        """Returns the contained value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> object:
        """Raises UnwrapError since this is not an Err."""
        raise UnwrapError("Called unwrap_err on Ok value")

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Applies fn to the contained value, returning Ok(fn(value))."""
        return Ok(fn(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> object:
        """Raises UnwrapError with the contained error."""
        raise UnwrapError(f"Called unwrap on Err value: {self.error}")

    def unwrap_or[D](self, default: D) -> D:
        """Returns the default value."""
        return default

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def map(self, fn: Callable[..., object]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self


type Result[T, E] = Ok[T] | Err[E]
