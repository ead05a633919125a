"""
Configuration constants for slimbot

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    If the variable is not set or cannot be parsed, prints a warning and
    returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable (see `_get_env_int`)."""
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Default IRC port when the configuration omits one
DEFAULT_PORT = _get_env_int("SLIMBOT_DEFAULT_PORT", 6667)

# Upper bound for a single read from the socket (RFC 1459 message size)
READ_LIMIT = _get_env_int("SLIMBOT_READ_LIMIT", 512)

# Seconds to wait for the TCP handshake; the socket is blocking afterwards
CONNECT_TIMEOUT = _get_env_float("SLIMBOT_CONNECT_TIMEOUT", 30.0)

# Characters that mark a PRIVMSG target as a channel name
CHANNEL_PREFIXES = ("#", "&", "+", "!")

LINE_TERMINATOR = "\r\n"

# Event names produced by the listen loop
EVENT_CHANNEL_MESSAGE = "message.channel"
EVENT_PRIVATE_MESSAGE = "message.private"
SERVER_EVENT_PREFIX = "server."
