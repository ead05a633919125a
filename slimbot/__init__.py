"""slimbot: a small framework for pattern-dispatching IRC bots.

Listeners are registered on event names (``message.channel``,
``message.private`` or ``server.<command>``); each inbound line becomes an
Event that every matching listener may answer with protocol lines.
"""

from .bot import Bot, Plugin, function_plugin
from .config import BotConfig, load_config
from .errors import (
    BotError,
    ConfigurationError,
    ConnectFailure,
    PluginContractViolation,
    RegistryFrozenError,
    ResourceError,
)
from .irc import BotContext, Event, Request, parse_request, responses

__version__ = "0.1.0"

__all__ = [
    "Bot",
    "BotConfig",
    "BotContext",
    "BotError",
    "ConfigurationError",
    "ConnectFailure",
    "Event",
    "Plugin",
    "PluginContractViolation",
    "RegistryFrozenError",
    "Request",
    "ResourceError",
    "function_plugin",
    "load_config",
    "parse_request",
    "responses",
]
