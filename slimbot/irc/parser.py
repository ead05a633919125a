"""IRC message parsing: one raw protocol line into a Request."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import CHANNEL_PREFIXES


@dataclass(frozen=True)
class Request:
    raw: str
    prefix: str | None
    command: str
    params: tuple[str, ...] = ()
    message: str = ""

    @property
    def target(self) -> str:
        return self.params[0] if self.params else ""

    @property
    def sending_user(self) -> str:
        """Nick portion of the prefix (everything before '!')."""
        if not self.prefix:
            return ""
        return self.prefix.split("!", 1)[0]

    @property
    def host(self) -> str:
        if not self.prefix or "@" not in self.prefix:
            return ""
        return self.prefix.split("@", 1)[1]

    @property
    def is_private_message(self) -> bool:
        """True for a PRIVMSG addressed to a nick rather than a channel."""
        if self.command != "PRIVMSG" or not self.target:
            return False
        return not is_channel_name(self.target)

    @property
    def is_well_formed(self) -> bool:
        return bool(self.command)


def is_channel_name(name: str) -> bool:
    return name.startswith(CHANNEL_PREFIXES)


def parse_request(raw_line: str) -> Request:
    """Decode ``raw_line`` into a Request.

    Never raises: a line that cannot be fully decoded yields a Request with
    whatever fields could be recovered (an empty command at worst).
    """
    original = raw_line
    line = raw_line.rstrip("\r\n")
    prefix: str | None = None

    if line.startswith(":"):
        # Malformed lines may omit the space after the prefix
        if " " in line:
            prefix, line = line[1:].split(" ", 1)
        else:
            prefix, line = line[1:], ""

    trailing: str | None = None
    line = line.lstrip(" ")
    if line.startswith(":"):
        head, trailing = "", line[1:]
    elif " :" in line:
        head, trailing = line.split(" :", 1)
    else:
        head = line

    tokens = head.split()
    command = tokens[0].upper() if tokens else ""
    params = tokens[1:]
    if trailing is not None:
        params.append(trailing)

    return Request(
        raw=original,
        prefix=prefix or None,
        command=command,
        params=tuple(params),
        message=trailing if trailing is not None else "",
    )
