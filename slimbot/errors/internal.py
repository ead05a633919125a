"""Centralized error hierarchy.

Classes:
  BotError                – Base for all bot errors.
  ConnectFailure          – The TCP connection to the server could not be opened.
  ConnectionLost          – The server dropped the link while the bot registered.
  ConfigurationError      – A required option is missing or invalid.
  ResourceError           – A log or pid file could not be opened for writing.
  PluginContractViolation – A plugin does not provide the required capabilities.
  RegistryFrozenError     – A listener was added after the listen loop started.

All of them are fatal during setup; none is raised from inside the listen loop.
"""

from __future__ import annotations

from collections.abc import Mapping


class BotError(Exception):
    """Base class for all bot errors with metadata support.

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


class ConnectFailure(BotError):
    """Raised when the socket to the IRC server could not be opened.

    No protocol bytes have been sent when this is raised.
    """


class ConnectionLost(BotError):
    """Raised when sending NICK, USER or JOIN fails after connecting."""


class ConfigurationError(BotError):
    """Raised at setup when a required option is missing or inconsistent."""


class ResourceError(BotError):
    """Raised at setup when the log or pid file cannot be opened for writing."""


class PluginContractViolation(BotError):
    """Raised at load time when a plugin lacks the required capability set."""


class RegistryFrozenError(BotError):
    """Raised when a listener is registered after the listen loop started."""


__all__ = [
    "BotError",
    "ConnectFailure",
    "ConnectionLost",
    "ConfigurationError",
    "ResourceError",
    "PluginContractViolation",
    "RegistryFrozenError",
]
