"""Bot composition root and the registration API used by plugins."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TextIO

from ..config.model import BotConfig
from ..constants import EVENT_CHANNEL_MESSAGE, EVENT_PRIVATE_MESSAGE, SERVER_EVENT_PREFIX
from ..errors.internal import ConnectFailure, ConnectionLost
from ..irc import responses
from ..irc.connection import IRCConnection
from ..irc.dispatcher import Dispatcher
from ..irc.event import BotContext, Event
from ..irc.listener import Callback, make_listener
from ..logs.logger import BotLogger
from ..logs.logger import logger as default_logger
from .pidfile import open_pidfile, remove_pidfile, write_pidfile
from .plugins import Plugin, PluginFactory, load_plugin

Pattern = str | re.Pattern[str] | None


class Bot:  # pylint: disable=too-many-instance-attributes
    """An IRC bot: configuration, listener registry and one connection.

    Construction performs all setup that can fail (log sink, pid file) so a
    misconfigured bot never opens a socket. Plugins register listeners next,
    then ``run()`` connects, logs in, joins and listens until the server
    closes the stream.
    """

    def __init__(
        self,
        config: BotConfig,
        *,
        logger: BotLogger | None = None,
        connection: IRCConnection | None = None,
    ) -> None:
        self.config = config
        self.logger = logger or default_logger
        self.logger.configure_sink(config.debug, config.log)
        self.dispatcher = Dispatcher(self.logger)
        self.connection = connection or IRCConnection(self.logger)
        self.context = BotContext(config=config, logger=self.logger, is_admin=self.is_admin)
        self.plugins: list[Plugin] = []
        self.pidfile: str | None = None
        if config.write_pidfile and config.pidfile:
            write_pidfile(config.pidfile)
            self.pidfile = config.pidfile
        self._add_default_handlers()

    def __enter__(self) -> Bot:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Registration -------------------------------------------------------

    def on(self, event_name: str, callback: Callback, pattern: Pattern = None) -> None:
        """Register ``callback`` for any event name (e.g. ``server.kick``)."""
        self.dispatcher.add_listener(event_name, make_listener(pattern, callback))

    def on_channel(self, pattern: Pattern, callback: Callback) -> None:
        self.on(EVENT_CHANNEL_MESSAGE, callback, pattern)

    def on_private_message(self, pattern: Pattern, callback: Callback) -> None:
        self.on(EVENT_PRIVATE_MESSAGE, callback, pattern)

    def on_messages(self, pattern: Pattern, callback: Callback) -> None:
        """Listen on both channel and private messages (two listeners)."""
        self.on_channel(pattern, callback)
        self.on_private_message(pattern, callback)

    def on_join(self, callback: Callback) -> None:
        self.on(SERVER_EVENT_PREFIX + "join", callback)

    def on_part(self, callback: Callback) -> None:
        self.on(SERVER_EVENT_PREFIX + "part", callback)

    def on_error(self, callback: Callback) -> None:
        self.on(SERVER_EVENT_PREFIX + "error", callback)

    def on_notice(self, callback: Callback) -> None:
        self.on(SERVER_EVENT_PREFIX + "notice", callback)

    def is_admin(self, user: str) -> bool:
        return user in self.config.admins

    def load_plugin(self, factory: PluginFactory) -> Plugin:
        plugin = load_plugin(self, factory)
        self.plugins.append(plugin)
        return plugin

    def load_plugins(self, factories: Iterable[PluginFactory]) -> list[Plugin]:
        return [self.load_plugin(factory) for factory in factories]

    def get_pidfile(self) -> TextIO | None:
        return open_pidfile(self.pidfile)

    # Lifecycle ----------------------------------------------------------

    def run(self) -> None:
        """Connect, log in, join the configured channels and listen.

        Raises:
            ConnectFailure: the server could not be reached; nothing was sent.
            ConnectionLost: the link failed while sending NICK, USER or JOIN.
        """
        if not self.connect():
            self.close()
            raise ConnectFailure(
                "Unable to connect to IRC server.",
                data={"hostname": self.config.hostname, "port": self.config.port},
            )
        try:
            try:
                self.login()
                self.join()
            except OSError as e:
                self.logger.log_event(
                    "irc", "send_failed", level=logging.ERROR, error=str(e)
                )
                raise ConnectionLost(
                    "Connection lost during registration.",
                    data={"hostname": self.config.hostname, "port": self.config.port},
                ) from e
            self.dispatcher.freeze()
            self.logger.log_event(
                "bot",
                "listening",
                user=self.config.nick,
                events=len(self.dispatcher.event_names()),
            )
            self.connection.listen(self.dispatcher, self.config.nick, self.context)
        finally:
            self.close()

    def connect(self) -> bool:
        return self.connection.connect(self.config.hostname, self.config.port)

    def login(self) -> None:
        cfg = self.config
        self.connection.send(responses.nick(cfg.nick))
        self.connection.send(
            responses.user(cfg.nick, cfg.hostname, cfg.servername, cfg.realname)
        )

    def join(self, channels: str | Iterable[str] | None = None) -> None:
        if channels is None:
            channels = self.config.channels
        if isinstance(channels, str):
            channels = [channels]
        for channel in channels:
            self.connection.send(responses.join(channel))
            self.logger.log_event(
                "bot", "join_sent", level=logging.DEBUG, user=self.config.nick, channel=channel
            )

    def close(self) -> None:
        self.connection.close()
        if self.pidfile:
            remove_pidfile(self.pidfile)
            self.pidfile = None

    # Defaults -----------------------------------------------------------

    def _add_default_handlers(self) -> None:
        self.on(SERVER_EVENT_PREFIX + "ping", _answer_ping)
        self.on(SERVER_EVENT_PREFIX + "error", _log_server_error)


def _answer_ping(event: Event) -> None:
    # Some servers send the token as a middle param instead of trailing text
    payload = event.request.message or event.request.target
    event.add_response(responses.pong(payload))


def _log_server_error(event: Event) -> None:
    sink = event.context.logger if event.context else default_logger
    sink.log_event(
        "irc", "server_error", level=logging.WARNING, message=event.request.message
    )
