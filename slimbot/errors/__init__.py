"""Error hierarchy and logging helpers."""

from .handling import log_error  # noqa: F401
from .internal import (  # noqa: F401
    BotError,
    ConfigurationError,
    ConnectFailure,
    ConnectionLost,
    PluginContractViolation,
    RegistryFrozenError,
    ResourceError,
)

__all__ = [
    "BotError",
    "ConfigurationError",
    "ConnectFailure",
    "ConnectionLost",
    "PluginContractViolation",
    "RegistryFrozenError",
    "ResourceError",
    "log_error",
]
