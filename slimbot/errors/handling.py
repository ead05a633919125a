from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import (
    BotError,
    ConfigurationError,
    ConnectFailure,
    ConnectionLost,
    PluginContractViolation,
    ResourceError,
)


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    The exception class decides the category used by the structured log
    line, so operators can grep for e.g. ``[CONFIG]`` or ``[NETWORK]``.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    error_type = "unknown"
    if isinstance(error, ConnectFailure | ConnectionLost | OSError):
        error_type = "network"
    elif isinstance(error, ConfigurationError):
        error_type = "config"
    elif isinstance(error, ResourceError):
        error_type = "resource"
    elif isinstance(error, PluginContractViolation):
        error_type = "plugin"
    elif isinstance(error, BotError):
        error_type = "internal"

    merged: dict = dict(getattr(error, "data", {}) or {})
    if context:
        merged.update(context)

    log_structured_error(
        error_type=error_type,
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
        level=logging.CRITICAL if isinstance(error, BotError) else logging.ERROR,
    )
