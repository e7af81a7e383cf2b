"""Error types and handling helpers."""

from .internal import (  # noqa: F401
    EmptyInputError,
    InternalError,
    MissingCommandError,
    ParsingError,
)

__all__ = [
    "InternalError",
    "ParsingError",
    "EmptyInputError",
    "MissingCommandError",
]
