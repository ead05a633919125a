"""Socket ownership and the blocking listen loop."""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable, Iterable
from typing import Any, BinaryIO

from ..constants import (
    CONNECT_TIMEOUT,
    EVENT_CHANNEL_MESSAGE,
    EVENT_PRIVATE_MESSAGE,
    LINE_TERMINATOR,
    READ_LIMIT,
    SERVER_EVENT_PREFIX,
)
from ..logs.logger import BotLogger
from ..logs.logger import logger as default_logger
from .dispatcher import Dispatcher
from .event import BotContext, Event
from .parser import Request, parse_request

SocketFactory = Callable[..., Any]


def classify(request: Request) -> str:
    """Map a Request to the event name listeners are registered under."""
    if request.command == "PRIVMSG":
        if request.is_private_message:
            return EVENT_PRIVATE_MESSAGE
        return EVENT_CHANNEL_MESSAGE
    return SERVER_EVENT_PREFIX + request.command.lower()


class IRCConnection:
    """One blocking TCP stream to one IRC server."""

    def __init__(
        self,
        logger: BotLogger | None = None,
        *,
        socket_factory: SocketFactory = socket.create_connection,
        read_limit: int = READ_LIMIT,
        connect_timeout: float = CONNECT_TIMEOUT,
    ) -> None:
        self.logger = logger or default_logger
        self.socket_factory = socket_factory
        self.read_limit = read_limit
        self.connect_timeout = connect_timeout
        self.sock: Any = None
        self.reader: BinaryIO | None = None

    @property
    def connected(self) -> bool:
        return self.sock is not None

    def connect(self, host: str, port: int) -> bool:
        try:
            self.sock = self.socket_factory((host, port), self.connect_timeout)
            self.sock.settimeout(None)
            self.reader = self.sock.makefile("rb")
        except OSError as e:
            self.logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                host=host,
                port=port,
                error=str(e),
            )
            self.sock = None
            self.reader = None
            return False
        self.logger.log_event("irc", "connected", host=host, port=port)
        return True

    def send(self, responses: str | Iterable[str]) -> None:
        """Write one or more response lines, each CRLF-terminated, in order."""
        if isinstance(responses, str):
            responses = [responses]
        for response in responses:
            line = response + LINE_TERMINATOR
            self.sock.sendall(line.encode("utf-8"))
            self.logger.debug(f"<-- {response}")

    def read_line(self) -> str | None:
        """Read one bounded line; None once the peer closed the stream."""
        data = self.reader.readline(self.read_limit)
        if not data:
            return None
        return data.decode("utf-8", errors="replace")

    def listen(
        self, dispatcher: Dispatcher, nick: str, context: BotContext | None = None
    ) -> None:
        """Read, classify, dispatch and answer lines until end of stream.

        Transport errors end the loop; nothing is retried.
        """
        while True:
            try:
                data = self.read_line()
            except OSError as e:
                self.logger.log_event(
                    "irc", "read_failed", level=logging.ERROR, error=str(e)
                )
                break
            if data is None:
                self.logger.log_event("irc", "end_of_stream", level=logging.WARNING)
                break
            self.logger.debug(f"--> {data.rstrip(LINE_TERMINATOR)}")
            if not data.strip():
                continue

            request = self._parse(data)
            event_name = classify(request)

            # Skip processing if the incoming message is from the bot
            if request.sending_user == nick:
                continue

            event = Event(request, context)
            dispatcher.dispatch(event_name, event)
            responses = event.get_responses()
            if not responses:
                continue
            try:
                self.send(responses)
            except OSError as e:
                self.logger.log_event(
                    "irc", "send_failed", level=logging.ERROR, error=str(e)
                )
                break

    def _parse(self, raw: str) -> Request:
        request = parse_request(raw)
        if not request.is_well_formed:
            self.logger.log_event(
                "irc", "malformed_line", level=logging.DEBUG, raw=raw.strip()
            )
        return request

    def close(self) -> None:
        if self.reader is not None:
            self.reader.close()
            self.reader = None
        if self.sock is not None:
            try:
                self.sock.close()
            finally:
                self.sock = None
