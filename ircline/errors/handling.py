from __future__ import annotations

from collections.abc import Mapping

from ..irc.models import Message
from ..irc.parser import parse_irc_message
from ..logging_config import log_structured_error
from .internal import (
    EmptyInputError,
    InternalError,
    MissingCommandError,
    ParsingError,
)


def error_type_for(error: BaseException) -> str:
    """Map an exception onto the category used by structured logging."""
    if isinstance(error, EmptyInputError):
        return "empty_input"
    if isinstance(error, MissingCommandError):
        return "missing_command"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, OSError):
        return "io"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str, error: Exception, context: Mapping[str, object] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    The exception's own ``data`` (for :class:`InternalError` subclasses) is
    merged under the caller's context so the log line carries both.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict[str, object] = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=error_type_for(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )


def parse_lenient(
    line: str, *, context: Mapping[str, object] | None = None
) -> Message | None:
    """Parse ``line``, logging and returning ``None`` if it is rejected.

    For ingestion loops that would rather drop a bad line than stop. Only
    :class:`ParsingError` is handled; anything else propagates.
    """
    try:
        return parse_irc_message(line)
    except ParsingError as e:
        log_error("Rejected IRC line", e, context=context)
        return None
