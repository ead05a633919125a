from __future__ import annotations

import json
import os
from typing import Any

from ..errors.internal import ConfigurationError


class ConfigRepository:
    """Reads the bot configuration from a JSON file.

    The file holds a single object, optionally nested under a ``"bot"`` key::

        {"bot": {"hostname": "irc.libera.chat", "nick": "slimbot", "channels": "#slimbot"}}
    """

    def __init__(self, path: str | os.PathLike[str]):
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = str(path)

    def load_raw(self) -> dict[str, Any]:
        """Load the raw configuration mapping.

        Raises:
            ConfigurationError: the file is missing, unreadable or not a JSON object.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {self.path}", data={"path": self.path}
            ) from e
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Configuration load error: {e}", data={"path": self.path}
            ) from e

        if isinstance(data, dict) and isinstance(data.get("bot"), dict):
            data = data["bot"]
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be a JSON object", data={"path": self.path}
            )
        return data
