"""Binary Success/Failure outcome type."""

from unit_outcome.config import OutcomeSettings, configure_logging, create_config, load_settings
from unit_outcome.exceptions import OutcomeConfigError, OutcomeException, OutcomeFailureError, UnwrapError
from unit_outcome.outcome import Failure, Outcome, Success
from unit_outcome.result import Err, Ok, Result

__all__ = [
    "Err",
    "Failure",
    "Ok",
    "Outcome",
    "OutcomeConfigError",
    "OutcomeException",
    "OutcomeFailureError",
    "OutcomeSettings",
    "Result",
    "Success",
    "UnwrapError",
    "configure_logging",
    "create_config",
    "load_settings",
]
