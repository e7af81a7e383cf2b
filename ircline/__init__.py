"""Decode raw IRC / IRCv3 (Twitch chat) lines into structured messages."""

from .errors.internal import (  # noqa: F401
    EmptyInputError,
    InternalError,
    MissingCommandError,
    ParsingError,
)
from .irc.models import Message, Nick, Prefix, Servername  # noqa: F401
from .irc.parser import parse_irc_message  # noqa: F401

parse = parse_irc_message

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "InternalError",
    "Message",
    "MissingCommandError",
    "Nick",
    "ParsingError",
    "Prefix",
    "Servername",
    "parse",
    "parse_irc_message",
]
