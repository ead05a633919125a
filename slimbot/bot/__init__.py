"""Bot package: composition root, plugin contract and pid file helpers."""

from .core import Bot  # noqa: F401
from .plugins import FunctionPlugin, Plugin, function_plugin, load_plugin  # noqa: F401

__all__ = ["Bot", "FunctionPlugin", "Plugin", "function_plugin", "load_plugin"]
