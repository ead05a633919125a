"""Per-message dispatch context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .parser import Request

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import BotConfig
    from ..logs.logger import BotLogger


@dataclass(frozen=True)
class BotContext:
    """Read-only view of the bot handed to every callback through the Event."""

    config: BotConfig
    logger: BotLogger
    is_admin: Callable[[str], bool]

    @property
    def nick(self) -> str:
        return self.config.nick


class Event:
    """Wraps one Request and collects the responses callbacks produce for it."""

    def __init__(self, request: Request, context: BotContext | None = None) -> None:
        self.request = request
        self.context = context
        self.matches: tuple[str | None, ...] = ()
        self._responses: list[str] = []

    def add_response(self, text: str) -> None:
        self._responses.append(text)

    def get_responses(self) -> list[str]:
        return list(self._responses)

    def __repr__(self) -> str:
        return (
            f"Event(command={self.request.command!r}, "
            f"responses={len(self._responses)})"
        )
