from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest

from slimbot import main as main_module
from slimbot.bot.core import Bot
from slimbot.errors import ConnectFailure, ConnectionLost
from slimbot.logs.logger import BotLogger
from tests.fixtures.fake_socket import HangupSocket, make_connection


@pytest.fixture
def config_file(tmp_path):  # type: ignore[no-untyped-def]
    path = tmp_path / "bot.json"
    path.write_text(json.dumps({"hostname": "irc.example.net", "nick": "slimbot"}))
    return str(path)


def test_parser_requires_config_path():
    with pytest.raises(SystemExit):
        main_module.build_parser().parse_args([])


def test_main_builds_bot_loads_plugins_and_runs(config_file):
    loaded: list[str] = []

    with patch.object(main_module, "LoggerConfigurator"), patch.object(
        main_module, "Bot"
    ) as bot_cls:
        bot = bot_cls.return_value.__enter__.return_value
        bot.load_plugins.side_effect = lambda factories: loaded.extend(
            f.__name__ for f in factories
        )

        def my_plugin(b):  # type: ignore[no-untyped-def]
            return None

        main_module.main([config_file], plugins=[my_plugin])

    config = bot_cls.call_args.args[0]
    assert config.hostname == "irc.example.net"
    assert loaded == ["my_plugin"]
    bot.run.assert_called_once()


def test_run_exits_with_status_1_on_bot_error(config_file):
    with patch.object(main_module, "main", side_effect=ConnectFailure("Unable to connect")), patch.object(
        main_module, "log_error"
    ) as log_error:
        with pytest.raises(SystemExit) as exc_info:
            main_module.run([config_file])
    assert exc_info.value.code == 1
    log_error.assert_called_once()


def test_run_exits_cleanly_on_interrupt(config_file):
    with patch.object(main_module, "main", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            main_module.run([config_file])
    assert exc_info.value.code == 0


def test_missing_config_file_is_fatal(tmp_path):
    with patch.object(main_module, "LoggerConfigurator"):
        with pytest.raises(SystemExit) as exc_info:
            main_module.run([str(tmp_path / "absent.json")])
    assert exc_info.value.code == 1


def _scripted_bot_factory(built: list[Bot], sock=None):  # type: ignore[no-untyped-def]
    def factory(config):  # type: ignore[no-untyped-def]
        conn, _, _ = make_connection(logger=BotLogger("slimbot.test.cli"), sock=sock)
        bot = Bot(config, logger=conn.logger, connection=conn)
        built.append(bot)
        return bot

    return factory


@pytest.mark.parametrize("flags, shown", [(["--verbose"], True), ([], False)])
def test_verbose_flag_shows_wire_trace(config_file, caplog, flags, shown):
    built: list[Bot] = []
    caplog.set_level(logging.DEBUG)
    with patch.object(main_module, "LoggerConfigurator"), patch.object(
        main_module, "Bot", side_effect=_scripted_bot_factory(built)
    ):
        main_module.main([config_file, *flags])

    assert built[0].logger.is_debug_enabled() is shown
    messages = [r.getMessage() for r in caplog.records]
    assert ("<-- NICK slimbot" in messages) is shown


def test_hangup_during_registration_exits_with_status_1(config_file):
    built: list[Bot] = []
    with patch.object(main_module, "LoggerConfigurator"), patch.object(
        main_module, "Bot", side_effect=_scripted_bot_factory(built, HangupSocket())
    ), patch.object(main_module, "log_error") as log_error:
        with pytest.raises(SystemExit) as exc_info:
            main_module.run([config_file])

    assert exc_info.value.code == 1
    assert isinstance(log_error.call_args.args[1], ConnectionLost)
