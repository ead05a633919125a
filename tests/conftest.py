from __future__ import annotations

import pytest

from slimbot.config.model import BotConfig
from slimbot.logs.logger import BotLogger


@pytest.fixture
def bot_logger():  # type: ignore[no-untyped-def]
    log = BotLogger("slimbot.test")
    yield log
    log.close()


@pytest.fixture
def config() -> BotConfig:
    return BotConfig.from_dict(
        {
            "hostname": "irc.example.net",
            "port": 6667,
            "nick": "slimbot",
            "servername": "example",
            "realname": "Slim Bot",
            "channels": ["#one", "#two"],
            "admins": ["alice"],
        }
    )
