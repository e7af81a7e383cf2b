"""
Configuration constants for ircline

This module contains the tunables used by the logging and CLI layers.
Each constant can be overridden by setting an environment variable with the same name.
The parser itself has no configuration: its behaviour is fixed by the line grammar.
"""

import os
import sys

_TRUTHY = ("true", "1", "yes")


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Same contract as :func:`_get_env_int` but for floats.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    """Return True when the DEBUG environment variable asks for verbose logs.

    Read on every call so tests and long-running callers can toggle it.
    """
    return _get_env_bool("DEBUG")


# Error aggregation
ERROR_AGGREGATOR_MAX_PER_TYPE = _get_env_int(
    "ERROR_AGGREGATOR_MAX_PER_TYPE", 1000
)  # Recent errors kept per error type
ERROR_RECENT_WINDOW_SECONDS = _get_env_int(
    "ERROR_RECENT_WINDOW_SECONDS", 3600
)  # Window used for the "recent" count in summaries
ERROR_ALERT_RATE_PER_HOUR = _get_env_float(
    "ERROR_ALERT_RATE_PER_HOUR", 10.0
)  # Errors/hour above which a critical alert is logged

# CLI output
CLI_JSON_INDENT = _get_env_int(
    "CLI_JSON_INDENT", 0
)  # 0 keeps one JSON object per output line
