"""IRC subsystem package.

Contains request parsing, response builders, the event/listener/dispatcher
machinery and the connection that drives the listen loop.
"""

from . import responses  # noqa: F401
from .connection import IRCConnection, classify  # noqa: F401
from .dispatcher import Dispatcher  # noqa: F401
from .event import BotContext, Event  # noqa: F401
from .listener import (  # noqa: F401
    Listener,
    PatternListener,
    UnconditionalListener,
    make_listener,
)
from .parser import Request, is_channel_name, parse_request  # noqa: F401

__all__ = [
    "BotContext",
    "Dispatcher",
    "Event",
    "IRCConnection",
    "Listener",
    "PatternListener",
    "Request",
    "UnconditionalListener",
    "classify",
    "is_channel_name",
    "make_listener",
    "parse_request",
    "responses",
]
