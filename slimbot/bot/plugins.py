"""Plugin contract.

A plugin is constructed with the bot, then ``init()`` is called exactly once
before the listen loop starts. That is where it registers its listeners::

    class Greeter(Plugin):
        name = "greeter"

        def init(self) -> None:
            self.bot.on_channel(r"^hello", self.greet)

        def greet(self, event: Event) -> None:
            event.add_response(msg(event.request.target, "hi!"))

The host program passes the class (or any callable returning a Plugin) to
``Bot.load_plugin``; nothing is looked up by name.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..errors.internal import PluginContractViolation

if TYPE_CHECKING:  # pragma: no cover
    from .core import Bot


class Plugin(ABC):
    name: str = ""

    def __init__(self, bot: Bot) -> None:
        self.bot = bot

    @property
    def display_name(self) -> str:
        return self.name or type(self).__name__

    @abstractmethod
    def init(self) -> None:
        """Register listeners on ``self.bot``."""


class FunctionPlugin(Plugin):
    """Adapts a plain ``init(bot)`` function to the Plugin contract."""

    def __init__(self, bot: Bot, init_hook: Callable[[Bot], Any]) -> None:
        super().__init__(bot)
        self._init_hook = init_hook
        self.name = getattr(init_hook, "__name__", "")

    def init(self) -> None:
        self._init_hook(self.bot)


PluginFactory = Callable[["Bot"], Plugin]


def function_plugin(init_hook: Callable[[Bot], Any]) -> PluginFactory:
    """Wrap an ``init(bot)`` function so it can be passed to ``load_plugin``."""

    def factory(bot: Bot) -> Plugin:
        return FunctionPlugin(bot, init_hook)

    factory.__name__ = getattr(init_hook, "__name__", "function_plugin")
    return factory


def load_plugin(bot: Bot, factory: PluginFactory) -> Plugin:
    """Instantiate a plugin, check its contract and run its init hook.

    Raises:
        PluginContractViolation: the factory is not callable, or it did not
            produce a Plugin instance.
    """
    factory_name = getattr(factory, "__name__", repr(factory))
    if not callable(factory):
        raise PluginContractViolation(
            f"Plugin factory {factory_name} is not callable",
            data={"plugin": factory_name},
        )
    plugin = factory(bot)
    if not isinstance(plugin, Plugin):
        raise PluginContractViolation(
            f"{factory_name} must produce an instance of slimbot.Plugin",
            data={"plugin": factory_name, "type": type(plugin).__name__},
        )
    plugin.init()
    bot.logger.log_event(
        "plugin", "loaded", level=logging.DEBUG, plugin=plugin.display_name
    )
    return plugin
