"""
Runtime configuration.

The runtime has exactly two knobs:
    - fatal_policy: what a fatal contract violation does
    - log_level: verbosity of the ``oruntime`` logger

Configuration is explicit. Nothing is read from the environment; a host
either builds a RuntimeConfig in code or loads one from a YAML document
and passes it to ``configure``.

Example YAML:

    fatal_policy: abort
    log_level: WARNING
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from oruntime.logging_config import LOGGER_NAMESPACE, get_logger


logger = get_logger("config")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration document cannot be interpreted."""


class FatalPolicy(Enum):
    """
    What happens when the runtime hits a fatal condition.

    ABORT terminates the process with SIGABRT. This is the only behaviour
    generated O code may rely on.

    RAISE raises RuntimeAbort instead. It exists for embedding hosts and
    test harnesses that need to observe the failure in-process.
    """

    ABORT = "abort"
    RAISE = "raise"


@dataclass(frozen=True)
class RuntimeConfig:
    fatal_policy: FatalPolicy = FatalPolicy.ABORT
    log_level: str = "WARNING"


def config_to_dict(config: RuntimeConfig) -> Dict[str, Any]:
    return {"fatal_policy": config.fatal_policy.value, "log_level": config.log_level}


def config_from_dict(d: Dict[str, Any] | None) -> RuntimeConfig:
    if d is None:
        return RuntimeConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    unknown = set(d) - {"fatal_policy", "log_level"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

    try:
        policy = FatalPolicy(d.get("fatal_policy", FatalPolicy.ABORT.value))
    except ValueError as e:
        raise ConfigError(f"Invalid fatal_policy: {d.get('fatal_policy')!r}") from e

    level = str(d.get("log_level", "WARNING")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log_level: {d.get('log_level')!r}")

    return RuntimeConfig(fatal_policy=policy, log_level=level)


def config_to_yaml(config: RuntimeConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(text: str) -> RuntimeConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed configuration YAML: {e}") from e
    return config_from_dict(data)


def load_config(filepath: Union[str, Path]) -> RuntimeConfig:
    """
    Load a RuntimeConfig from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the content is not a valid configuration
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")
    return config_from_yaml(path.read_text(encoding="utf-8"))


_active = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _active


def configure(config: RuntimeConfig) -> RuntimeConfig:
    """
    Install ``config`` as the active runtime configuration.

    Returns the previously active configuration so callers can restore it.
    """
    global _active
    previous = _active
    _active = config
    logging.getLogger(LOGGER_NAMESPACE).setLevel(config.log_level)
    logger.debug(
        "runtime configured: fatal_policy=%s log_level=%s",
        config.fatal_policy.value,
        config.log_level,
    )
    return previous
