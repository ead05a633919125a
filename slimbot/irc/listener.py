"""Listener variants bound to one event name by the dispatcher."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Protocol

from .event import Event

Callback = Callable[[Event], Any]


class Listener(Protocol):
    callback: Callback

    def test_and_execute(self, event: Event) -> bool:
        """Invoke the callback if this listener applies; return whether it ran."""
        ...


class UnconditionalListener:
    """Runs its callback for every event."""

    __slots__ = ("callback",)

    def __init__(self, callback: Callback) -> None:
        self.callback = callback

    def test_and_execute(self, event: Event) -> bool:
        self.callback(event)
        return True

    def __repr__(self) -> str:
        return f"UnconditionalListener({_callback_name(self.callback)})"


class PatternListener:
    """Runs its callback when the pattern is found anywhere in the message text."""

    __slots__ = ("callback", "pattern")

    def __init__(self, pattern: str | re.Pattern[str], callback: Callback) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.callback = callback

    def test_and_execute(self, event: Event) -> bool:
        match = self.pattern.search(event.request.message)
        if match is None:
            return False
        event.matches = (match.group(0), *match.groups())
        self.callback(event)
        return True

    def __repr__(self) -> str:
        return (
            f"PatternListener({self.pattern.pattern!r}, "
            f"{_callback_name(self.callback)})"
        )


def make_listener(
    pattern: str | re.Pattern[str] | None, callback: Callback
) -> UnconditionalListener | PatternListener:
    if not callable(callback):
        raise TypeError(f"listener callback must be callable, got {callback!r}")
    if pattern is None:
        return UnconditionalListener(callback)
    return PatternListener(pattern, callback)


def _callback_name(callback: Callback) -> str:
    return getattr(callback, "__qualname__", repr(callback))
