"""Pid file helpers used when ``write_pidfile`` is enabled."""

from __future__ import annotations

import os
from typing import TextIO

from ..errors.internal import ResourceError


def write_pidfile(path: str) -> int:
    """Write the current process id to ``path`` and return it."""
    pid = os.getpid()
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(pid))
    except OSError as e:
        raise ResourceError(
            f"Unable to open pidfile '{path}' for writing", data={"pidfile": path}
        ) from e
    return pid


def remove_pidfile(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def open_pidfile(path: str | None) -> TextIO | None:
    """Return a read-only handle on the pid file, or None when unreadable."""
    if not path or not os.access(path, os.R_OK):
        return None
    try:
        return open(path, encoding="utf-8")
    except OSError:
        return None
