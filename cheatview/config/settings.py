"""Configuration utilities for cheatview."""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import (
    CHEATSHEET_DIR_ENV,
    DEFAULT_CHEATSHEET_DIR,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_LEVEL,
    ENV_VAR_DEFINITIONS,
    LOG_DIR_ENV,
    LOG_LEVEL_ENV,
)

# Below DEBUG; logging has no built-in trace level
TRACE = 5

_LEVELS: Dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if value is None or valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all cheatview environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable, falling back to its declared default.

    Empty strings count as unset.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name) or None

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_cheatsheet_dir() -> Path:
    """Directory scanned for sheets when no --dir is given."""
    return Path(get_env_var(CHEATSHEET_DIR_ENV) or DEFAULT_CHEATSHEET_DIR)


def get_log_dir() -> Path:
    """Directory that receives the daily log files."""
    return Path(get_env_var(LOG_DIR_ENV) or DEFAULT_LOG_DIR)


def get_log_level_name() -> str:
    """Log level name from the environment, unvalidated.

    Unknown names are tolerated here; parse_log_level maps them to info.
    """
    return get_env_var(LOG_LEVEL_ENV, validate=False) or DEFAULT_LOG_LEVEL


def parse_log_level(name: Optional[str]) -> int:
    """Map a level name to a logging level, case-insensitively.

    Unknown or missing names fall back to INFO.
    """
    if not name:
        return logging.INFO
    return _LEVELS.get(name.strip().lower(), logging.INFO)
