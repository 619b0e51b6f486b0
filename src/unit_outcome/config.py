from __future__ import annotations

import logging
from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from unit_outcome.exceptions import OutcomeConfigError

PACKAGE_LOGGER = "unit_outcome"

_DEFAULTS: dict[str, object] = {
    "logging": {
        "level": "WARNING",
    },
}


@dataclass(frozen=True)
class OutcomeSettings:
    log_level: int


def create_config(
    yaml_path: str = "outcome.yaml",
    env_prefix: str = "OUTCOME",
    defaults: dict[str, object] | None = None,
    *,
    log_level: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. OUTCOME__LOGGING__LEVEL.
        defaults: Default configuration values.
        log_level: Override the logging level name.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if log_level is not None:
        layers.insert(0, config_from_dict({"logging": {"level": log_level}}))

    return ConfigurationSet(*layers)


def _parse_level(raw: object) -> int:
    if isinstance(raw, bool):
        raise OutcomeConfigError(f"Unknown logging level: {raw!r}")
    if isinstance(raw, int):
        return raw
    name = str(raw).strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise OutcomeConfigError(f"Unknown logging level: {raw!r}")
    return level


def load_settings(cfg: ConfigurationSet | None = None) -> OutcomeSettings:
    if cfg is None:
        cfg = create_config()
    return OutcomeSettings(log_level=_parse_level(cfg["logging.level"]))


def configure_logging(cfg: ConfigurationSet | None = None) -> OutcomeSettings:
    """Apply the configured level to the unit_outcome logger.

    Handlers are left alone; attaching them is up to the application.
    """
    settings = load_settings(cfg)
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)
    return settings
