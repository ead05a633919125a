"""In-memory socket doubles for connection and bot tests."""

from __future__ import annotations

import io
from collections.abc import Iterable

from slimbot.irc.connection import IRCConnection
from slimbot.logs.logger import BotLogger


class FakeSocket:
    """Stand-in for a connected TCP socket fed from a fixed transcript."""

    def __init__(self, incoming: Iterable[str] = ()) -> None:
        payload = "".join(incoming).encode("utf-8")
        self._reader = io.BytesIO(payload)
        self.sent: list[bytes] = []
        self.closed = False
        self.timeout: float | None = -1.0

    def settimeout(self, value: float | None) -> None:
        self.timeout = value

    def makefile(self, mode: str) -> io.BytesIO:
        assert mode == "rb"
        return self._reader

    def sendall(self, data: bytes) -> None:
        self.sent.append(data)

    def close(self) -> None:
        self.closed = True

    @property
    def wire(self) -> str:
        return b"".join(self.sent).decode("utf-8")

    @property
    def lines(self) -> list[str]:
        return [line for line in self.wire.split("\r\n") if line]


class HangupSocket(FakeSocket):
    """Accepts the connection, then fails every write."""

    def sendall(self, data: bytes) -> None:  # noqa: ARG002
        raise BrokenPipeError(32, "Broken pipe")


class BrokenReader:
    def readline(self, limit: int) -> bytes:  # noqa: ARG002
        raise ConnectionResetError("Connection reset by peer")

    def close(self) -> None:
        pass


def make_connection(
    incoming: Iterable[str] = (),
    logger: BotLogger | None = None,
    sock: FakeSocket | None = None,
) -> tuple[IRCConnection, FakeSocket, list[tuple]]:
    """Build an IRCConnection whose socket factory returns a FakeSocket."""
    sock = sock or FakeSocket(incoming)
    calls: list[tuple] = []

    def factory(address, timeout):  # type: ignore[no-untyped-def]
        calls.append((address, timeout))
        return sock

    conn = IRCConnection(logger or BotLogger("slimbot.test"), socket_factory=factory)
    return conn, sock, calls


def refusing_factory(address, timeout):  # type: ignore[no-untyped-def]
    raise ConnectionRefusedError(111, "Connection refused")
