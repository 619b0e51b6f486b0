class OutcomeException(Exception):
    """Base class for errors raised by unit_outcome."""


class UnwrapError(OutcomeException):
    """Raised when unwrap() is called on an Err or unwrap_err() on an Ok."""


class OutcomeFailureError(OutcomeException):
    """Raised by Outcome.or_raise() when the outcome is a failure."""

    def __init__(self, message: str = "Called `Outcome.or_raise(...)` on a `Failure` value") -> None:
        super().__init__(message)


class OutcomeConfigError(OutcomeException):
    """Raised when configuration holds a value that cannot be used."""
