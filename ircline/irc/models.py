"""Parsed IRC message data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Servername:
    """Origin made of a single identity segment, e.g. ``tmi.twitch.tv``."""

    name: str


@dataclass(frozen=True, slots=True)
class Nick:
    """Origin in ``nick!user@host`` form."""

    nick: str
    user: str
    host: str


Prefix = Servername | Nick


@dataclass(frozen=True, slots=True)
class Message:
    """One decoded IRC line.

    Every field is ``None`` when the line did not carry it. ``tags`` is a
    read-only mapping whose values are ``None`` for valueless tags, and
    ``params`` is a tuple whose last element may be the trailing parameter.
    Messages compare by value but are not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    tags: Mapping[str, str | None] | None = None
    prefix: Prefix | None = None
    command: str | None = None
    params: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.tags is not None and not isinstance(self.tags, MappingProxyType):
            object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        if self.params is not None and not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def parse(cls, line: str) -> Message:
        # Local import: parser depends on this module.
        from .parser import parse_irc_message

        return parse_irc_message(line)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tags": dict(self.tags) if self.tags is not None else None,
            "prefix": _prefix_to_dict(self.prefix),
            "command": self.command,
            "params": list(self.params) if self.params is not None else None,
        }


def _prefix_to_dict(prefix: Prefix | None) -> dict[str, str] | None:
    match prefix:
        case Servername(name=name):
            return {"kind": "servername", "name": name}
        case Nick(nick=nick, user=user, host=host):
            return {"kind": "nick", "nick": nick, "user": user, "host": host}
        case _:
            return None
