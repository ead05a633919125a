"""Logger implementation for bot events and the wire trace."""

from __future__ import annotations

import logging

from ..errors.internal import ConfigurationError, ResourceError
from .event_catalog import EVENT_TEMPLATES

WIRE_FORMAT = "[%(asctime)s - %(levelname)s]: %(message)s"


class BotLogger:
    """Event logger shared by the connection, the bot and its plugins.

    Records propagate to the root logger (configured by the command line
    entry point). ``configure_sink`` attaches the debug file destination that
    receives every raw inbound and outbound protocol line.
    """

    def __init__(self, name: str = "slimbot") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        self.logger.setLevel(logging.INFO)
        self.log_file: str | None = None

    def configure_sink(self, debug: bool, log_file: str | None = None) -> None:
        """Attach the debug destination, or a null handler when debug is off.

        Raises:
            ConfigurationError: debug is enabled but no log file was given.
            ResourceError: the log file cannot be opened for writing.
        """
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if not debug:
            self.logger.addHandler(logging.NullHandler())
            self.logger.setLevel(logging.INFO)
            self.log_file = None
            return

        if not log_file:
            raise ConfigurationError(
                "If debug is enabled, you must supply a log file location."
            )
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            raise ResourceError(
                f"Unable to open log file '{log_file}' for writing",
                data={"log": log_file},
            ) from e
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(WIRE_FORMAT))
        self.logger.addHandler(file_handler)
        self.logger.setLevel(logging.DEBUG)
        self.log_file = log_file

    def close(self) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, text: str) -> None:
        """Plain DEBUG line, used for the wire trace."""
        self.logger.debug(text)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        prefix = self._build_prefix(kw.pop("user", None), kw.pop("channel", None))
        if self.is_debug_enabled():
            msg = self._build_debug_message(event_name, prefix, human_text, kw)
        else:
            msg = f"{prefix} {human_text}"
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _build_prefix(user: object, channel: object) -> str:
        user_label = user if isinstance(user, str) and user else "system"
        core = f"{user_label}{channel}" if isinstance(channel, str) and channel else user_label
        padded = core.ljust(24)[:24]
        return f"[{padded}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "~"
        base = f"{ev} {prefix} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = BotLogger()
