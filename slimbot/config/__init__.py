"""Configuration package exports."""

from __future__ import annotations

import os

from .model import BotConfig
from .repository import ConfigRepository


def load_config(path: str | os.PathLike[str]) -> BotConfig:
    """Read and validate the configuration file at ``path``."""
    return BotConfig.from_dict(ConfigRepository(path).load_raw())


__all__ = ["BotConfig", "ConfigRepository", "load_config"]
