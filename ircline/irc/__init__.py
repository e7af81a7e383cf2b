"""IRC subsystem package.

Data model and the line parser. Framing, transport and command handling live
with the caller.
"""

from .models import Message, Nick, Prefix, Servername  # noqa: F401
from .parser import parse_irc_message  # noqa: F401

__all__ = [
    "Message",
    "Nick",
    "Prefix",
    "Servername",
    "parse_irc_message",
]
