r"""
Logging configuration module for slimbot.

Provides the console logging setup (colorlog) used by the command line entry
point, and structured error logging with a per-category error tally.
"""

import logging
import os
import sys
import time
from collections import defaultdict
from typing import Any

import colorlog

CONSOLE_HANDLER_NAME = "slimbot.console"


class ErrorAggregator:
    """Counts logged errors per category for the shutdown summary."""

    def __init__(self):
        self.errors: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.start_time = time.time()

    def record_error(self, error_type: str, message: str, context: dict[str, Any] | None = None) -> None:
        self.errors[error_type].append(
            {"timestamp": time.time(), "message": message, "context": context or {}}
        )
        # Keep only recent errors (last 100 per type)
        if len(self.errors[error_type]) > 100:
            self.errors[error_type] = self.errors[error_type][-100:]

    def get_error_summary(self) -> dict[str, Any]:
        return {
            error_type: {
                "total_count": len(occurrences),
                "last_occurrence": occurrences[-1] if occurrences else None,
            }
            for error_type, occurrences in self.errors.items()
        }

    def log_summary_report(self) -> None:
        summary = self.get_error_summary()
        if not summary:
            return
        logging.warning("ERROR SUMMARY REPORT")
        for error_type, stats in summary.items():
            logging.warning(f"  {error_type}: {stats['total_count']} total")
            if stats["last_occurrence"]:
                logging.warning(f"    Last: {stats['last_occurrence']['message']}")

    def reset(self) -> None:
        self.errors.clear()
        self.start_time = time.time()


# Global error aggregator instance
error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context and record it in the aggregator.

    Args:
        error_type: Category of the error (e.g., 'network', 'config', 'plugin')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {exception}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)
    error_aggregator.record_error(error_type, message, context)


class LoggerConfigurator:
    """Configures console logging using colorlog.

    Supports environment variable configuration for log levels.
    """

    def configure(self, debug: bool | None = None):
        """Configure the root logger with colored console output.

        Uses environment variables when ``debug`` is not given:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        if debug is None:
            debug_env = os.environ.get("DEBUG", "").lower()
            debug = debug_env in ("true", "1", "yes")
        log_level = logging.DEBUG if debug else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(CONSOLE_HANDLER_NAME)
        handler.setFormatter(formatter)
        handler.setLevel(log_level)

        root_logger = logging.getLogger()
        # Replace the console handler from an earlier call instead of stacking
        for existing in list(root_logger.handlers):
            if existing.get_name() == CONSOLE_HANDLER_NAME:
                root_logger.removeHandler(existing)
                existing.close()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)
        return handler
