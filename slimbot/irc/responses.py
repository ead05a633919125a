"""Outbound protocol lines.

Every builder returns exactly one line without the CRLF terminator; the
connection appends it when writing.
"""

from __future__ import annotations


def nick(name: str) -> str:
    return f"NICK {name}"


def user(nickname: str, host: str, server: str, realname: str) -> str:
    return f"USER {nickname} {host} {server} :{realname}"


def join(channel: str) -> str:
    return f"JOIN {channel}"


def part(channel: str, reason: str | None = None) -> str:
    if reason is None:
        return f"PART {channel}"
    return f"PART {channel} :{reason}"


def pong(payload: str) -> str:
    """Answer a PING, echoing its payload unchanged."""
    return f"PONG {payload}"


def quit(reason: str | None = None) -> str:  # noqa: A001
    if reason is None:
        return "QUIT"
    return f"QUIT :{reason}"


def message_send(command: str, target: str, text: str) -> str:
    """Build a ``<COMMAND> target :text`` line (PRIVMSG, NOTICE, ...)."""
    return f"{command.upper()} {target} :{text}"


def msg(target: str, text: str) -> str:
    return message_send("PRIVMSG", target, text)


def notice(target: str, text: str) -> str:
    return message_send("NOTICE", target, text)


__all__ = [
    "join",
    "message_send",
    "msg",
    "nick",
    "notice",
    "part",
    "pong",
    "quit",
    "user",
]
