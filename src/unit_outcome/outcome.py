"""Binary success/failure outcome with no payload.

An Outcome is either Success or Failure. It carries nothing else, which makes
it a good fit for steps that either worked or didn't, where the caller only
needs to know which.

Usage:
    def save_snapshot() -> Outcome:
        return Outcome.from_bool(store.write(snapshot))

    result = save_snapshot().and_then(notify_watchers)
    if result.is_failure():
        ...

    match result:
        case Outcome.SUCCESS:
            print("Well done!")
        case Outcome.FAILURE:
            print("Oh well :(")
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from unit_outcome.exceptions import OutcomeFailureError
from unit_outcome.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from unit_outcome.result import Result

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """A success or failure signal. Every Outcome is exactly one of the two."""

    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def from_bool(cls, good: bool) -> Outcome:
        """Returns SUCCESS if good is true, otherwise FAILURE."""
        return cls.SUCCESS if good else cls.FAILURE

    @classmethod
    def from_result(cls, result: Result[object, object]) -> Outcome:
        """Drops the payload of an Ok or Err, keeping only which side it was."""
        return cls.from_bool(result.is_ok())

    def is_success(self) -> bool:
        """Returns True for SUCCESS."""
        return self is Outcome.SUCCESS

    def is_failure(self) -> bool:
        """Returns True for FAILURE."""
        return not self.is_success()

    def or_none[T](self, value: T) -> T | None:
        """Returns value on SUCCESS and None on FAILURE.

        The value is an ordinary argument, so the caller has already built it
        by the time the variant is inspected.
        """
        return value if self.is_success() else None

    def or_err[T, E](self, good: T, err: E) -> Result[T, E]:
        """Maps SUCCESS to Ok(good) and FAILURE to Err(err)."""
        if self.is_success():
            return Ok(good)
        return Err(err)

    def or_raise[T](self, good: T, message: str | None = None) -> T:
        """Returns good on SUCCESS, raises OutcomeFailureError on FAILURE."""
        if self.is_success():
            return good
        logger.debug("or_raise called on FAILURE")
        if message is None:
            raise OutcomeFailureError()
        raise OutcomeFailureError(message)

    def and_(self, other: Outcome) -> Outcome:
        """Returns FAILURE if this is FAILURE, otherwise other."""
        return other if self.is_success() else Outcome.FAILURE

    def or_(self, other: Outcome) -> Outcome:
        """Returns SUCCESS if this is SUCCESS, otherwise other."""
        return Outcome.SUCCESS if self.is_success() else other

    def and_then(self, fn: Callable[[], Outcome]) -> Outcome:
        """Calls fn and returns its result if this is SUCCESS.

        FAILURE short-circuits: fn is not called and FAILURE is returned.
        """
        if self.is_failure():
            logger.debug("and_then short-circuited on FAILURE, skipping %r", fn)
            return Outcome.FAILURE
        return fn()

    def or_else(self, fn: Callable[[], Outcome]) -> Outcome:
        """Calls fn and returns its result if this is FAILURE.

        SUCCESS short-circuits: fn is not called and SUCCESS is returned.
        """
        if self.is_success():
            logger.debug("or_else short-circuited on SUCCESS, skipping %r", fn)
            return Outcome.SUCCESS
        return fn()

    # Alternate spelling of or_else.
    or_then = or_else

    def __str__(self) -> str:
        return self.name.capitalize()

    def __repr__(self) -> str:
        return f"Outcome.{self.name}"


Success = Outcome.SUCCESS
Failure = Outcome.FAILURE
