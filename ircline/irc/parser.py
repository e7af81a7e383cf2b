"""IRC / IRCv3 line parser.

Grammar handled (RFC 1459 plus IRCv3 message tags):

    <message>  ::= ['@' <tags> <SPACE>] [':' <prefix> <SPACE>] <command> <params>
    <tags>     ::= <tag> [';' <tag>]*
    <tag>      ::= <key> ['=' <value>]
    <prefix>   ::= <servername> | <nick> '!' <user> '@' <host>
    <SPACE>    ::= ' ' { ' ' }
    <params>   ::= <SPACE> [':' <trailing> | <middle> <params>]

The input is one line with its CR LF already stripped. Each stage consumes a
prefix of the remaining text and hands the rest to the next one; nothing is
ever re-scanned.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from ..errors.internal import EmptyInputError, MissingCommandError
from ..logs.logger import logger
from .models import Message, Nick, Prefix, Servername

_PREFIX_DELIMITERS = re.compile(r"[!@]")
# WHATWG "ASCII whitespace"; vertical tab is not part of it.
_ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")
_TRAILING_MARKER = re.compile(r"(?:^|[ \t\n\f\r]):")


def parse_irc_message(line: str) -> Message:
    """Parse one raw IRC line into a :class:`Message`.

    Raises:
        EmptyInputError: ``line`` is empty or only whitespace.
        MissingCommandError: a tag or prefix block runs to end of line.
    """
    if not line:
        raise EmptyInputError()
    line = line.strip()
    if not line:
        raise EmptyInputError()

    tags = None
    prefix = None
    rest = line

    if rest.startswith("@"):
        block, rest = _take_segment(rest, "tags", line)
        tags = _parse_tags(block)

    if rest.startswith(":"):
        block, rest = _take_segment(rest, "prefix", line)
        prefix = _parse_prefix(block)

    command, params = _split_command_params(rest)
    return Message(tags=tags, prefix=prefix, command=command, params=params)


def _take_segment(rest: str, segment: str, line: str) -> tuple[str, str]:
    """Split off a leading ``@tags`` / ``:prefix`` block, marker excluded."""
    space = rest.find(" ")
    if space == -1:
        raise MissingCommandError(segment, line)
    return rest[1:space], rest[space + 1 :].lstrip(" ")


def _parse_tags(block: str) -> MappingProxyType[str, str | None]:
    tags: dict[str, str | None] = {}
    for entry in block.split(";"):
        key, _, value = entry.partition("=")
        if not key:
            continue
        if key in tags:
            # Last occurrence wins.
            logger.log_event("parser", "duplicate_tag", level=logging.DEBUG, key=key)
        tags[key] = value or None
    return MappingProxyType(tags)


def _parse_prefix(block: str) -> Prefix | None:
    """Map a prefix block onto one of the two origin shapes, else ``None``.

    One identity segment is a server name; three are a nick only when
    separated by ``!`` then ``@``. Every other shape is dropped without
    failing the line.
    """
    parts = _PREFIX_DELIMITERS.split(block)
    if len(parts) == 1 and block:
        return Servername(block)
    # Delimiter order is enforced so ``nick!user!extra`` is rejected; the
    # cost is that a swapped ``nick@user!host`` is rejected as well.
    if len(parts) == 3 and _PREFIX_DELIMITERS.findall(block) == ["!", "@"]:
        return Nick(*parts)
    logger.log_event(
        "parser",
        "prefix_dropped",
        level=logging.DEBUG,
        segments=len(parts) if block else 0,
        block=block,
    )
    return None


def _split_command_params(rest: str) -> tuple[str, tuple[str, ...] | None]:
    space = rest.find(" ")
    if space == -1:
        return rest, None

    command = rest[:space]
    params_string = rest[space + 1 :]

    marker = _TRAILING_MARKER.search(params_string)
    if marker is None:
        return command, _split_middle(params_string)

    colon = marker.end() - 1
    middle = _split_middle(params_string[:colon])
    return command, (*middle, params_string[colon + 1 :])


def _split_middle(text: str) -> tuple[str, ...]:
    return tuple(token for token in _ASCII_WHITESPACE.split(text) if token)
