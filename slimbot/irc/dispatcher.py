"""Event-name to listener registry and synchronous dispatch."""

from __future__ import annotations

import logging
from collections import defaultdict

from ..errors.internal import RegistryFrozenError
from ..logs.logger import BotLogger
from ..logs.logger import logger as default_logger
from .event import Event
from .listener import Listener


class Dispatcher:
    """Ordered listener lists keyed by event name.

    Listeners are added during setup only; ``freeze()`` is called before the
    listen loop starts and any later registration raises RegistryFrozenError.
    Dispatch runs every listener for the name in registration order and never
    stops early, so several plugins can answer the same message.
    """

    def __init__(self, logger: BotLogger | None = None) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._frozen = False
        self.logger = logger or default_logger

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def add_listener(self, event_name: str, listener: Listener) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register a listener for '{event_name}' after the bot started",
                data={"event": event_name},
            )
        self._listeners[event_name].append(listener)

    def listeners(self, event_name: str) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event_name, ()))

    def event_names(self) -> list[str]:
        return [name for name, items in self._listeners.items() if items]

    def dispatch(self, event_name: str, event: Event) -> int:
        """Run the listeners for ``event_name``; return how many callbacks fired."""
        fired = 0
        for listener in self._listeners.get(event_name, ()):
            try:
                if listener.test_and_execute(event):
                    fired += 1
            except Exception as e:  # noqa: BLE001
                self.logger.log_event(
                    "dispatch",
                    "listener_error",
                    level=logging.ERROR,
                    exc_info=True,
                    event=event_name,
                    listener=repr(listener),
                    error=str(e),
                    error_type=type(e).__name__,
                )
        if fired:
            self.logger.log_event(
                "dispatch",
                "dispatched",
                level=logging.DEBUG,
                event=event_name,
                fired=fired,
            )
        return fired
