"""Payload-carrying counterpart that an Outcome converts into.

Outcome.or_err attaches a value to each side of an Outcome, producing an
Ok or an Err:

    result = Outcome.from_bool(saved).or_err(path, "disk full")
    if result.is_ok():
        path = result.unwrap()
    else:
        reason = result.unwrap_err()

Outcome.from_result goes the other way and forgets the payload. The error
side holds whatever the caller passed to or_err, not only exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, final

from unit_outcome.exceptions import UnwrapError

T = TypeVar("T")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """The Success side of an Outcome, carrying a value."""

    value: T

    def is_ok(self) -> bool:
        """Always True for Ok."""
        return True

    def is_err(self) -> bool:
        """Always False for Ok."""
        return False

    def unwrap(self) -> T:
        """Returns the carried value."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        """Returns the carried value; default is never used."""
        return self.value

    def unwrap_err(self) -> object:
        """Raises UnwrapError, since an Ok carries no error."""
        raise UnwrapError(f"Called unwrap_err on Ok({self.value!r})")


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """The Failure side of an Outcome, carrying an error value."""

    error: E

    def is_ok(self) -> bool:
        """Always False for Err."""
        return False

    def is_err(self) -> bool:
        """Always True for Err."""
        return True

    def unwrap(self) -> object:
        """Raises UnwrapError, since an Err carries no value."""
        raise UnwrapError(f"Called unwrap on Err({self.error!r})")

    def unwrap_or[D](self, default: D) -> D:
        """Returns default in place of the missing value."""
        return default

    def unwrap_err(self) -> E:
        """Returns the carried error."""
        return self.error


Result = Ok[T] | Err[E]
