"""Centralized internal error hierarchy.

Every failure the parser can report is a :class:`ParsingError`. Only two
conditions are errors at all; every other malformed-but-non-empty line is
decoded leniently.

Classes:
  InternalError        – Base for all internal errors.
  ParsingError         – A raw line could not be decoded into a message.
  EmptyInputError      – The line was empty (or only whitespace).
  MissingCommandError  – A tag or prefix block had no command after it.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParsingError(InternalError):
    """Exception raised when a raw IRC line cannot be decoded.

    Parsing is a single deterministic pass, so these errors are never
    transient: retrying the same line yields the same error.
    """


class EmptyInputError(ParsingError):
    """Raised for a zero-length line."""

    def __init__(self, message: str = "Nothing found to parse") -> None:
        super().__init__(message)


class MissingCommandError(ParsingError):
    """Raised when a tag or prefix block is not followed by a space.

    Attributes:
        segment: Which block ran to end of input, ``"tags"`` or ``"prefix"``.
        line: The (trimmed) line that failed.
    """

    def __init__(self, segment: str, line: str) -> None:
        super().__init__(
            f"No command found after {segment} block",
            data={"segment": segment, "line": line},
        )
        self.segment = segment
        self.line = line


__all__ = [
    "InternalError",
    "ParsingError",
    "EmptyInputError",
    "MissingCommandError",
]
