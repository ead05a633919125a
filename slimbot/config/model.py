from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..constants import DEFAULT_PORT
from ..errors.internal import ConfigurationError


def _normalize_channels(channels: Any) -> list[str]:
    """Accept a single channel name or a sequence of names.

    Whitespace is stripped, blanks are dropped and duplicates removed while
    keeping the configured join order.
    """
    if isinstance(channels, str):
        channels = [channels]
    if not isinstance(channels, list | tuple):
        raise ValueError("channels must be a string or a list of strings")
    cleaned = (c.strip() for c in channels if isinstance(c, str))
    return list(dict.fromkeys(c for c in cleaned if c))


class BotConfig(BaseModel):
    """Connection identity and process options for one bot.

    Attributes:
        hostname: IRC server host name.
        port: IRC server port.
        nick: Nick the bot registers with; lines sent by this nick are ignored.
        servername: Server name field of the USER command.
        realname: Real name field of the USER command (defaults to the nick).
        channels: Channels joined after login, in order.
        admins: Nicks for which ``Bot.is_admin`` answers True.
        debug: Write the wire trace to ``log``.
        log: Debug log destination; required when ``debug`` is set.
        write_pidfile: Write the process id to ``pidfile`` at startup.
        pidfile: Pid file location; required when ``write_pidfile`` is set.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    hostname: str = Field(min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    nick: str = Field(min_length=1)
    servername: str = "localhost"
    realname: str = ""
    channels: list[str] = Field(default_factory=list)
    admins: list[str] = Field(default_factory=list)
    debug: bool = False
    log: str | None = None
    write_pidfile: bool = False
    pidfile: str | None = None

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        if v is None:
            return []
        return _normalize_channels(v)

    @field_validator("admins", mode="before")
    @classmethod
    def validate_admins(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @model_validator(mode="before")
    @classmethod
    def default_realname(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not data.get("realname"):
            data = dict(data)
            data["realname"] = data.get("nick", "")
        return data

    @model_validator(mode="after")
    def validate_required_paths(self) -> BotConfig:
        if self.debug and not self.log:
            raise ValueError("If debug is enabled, you must supply a log file location")
        if self.write_pidfile and not self.pidfile:
            raise ValueError("Please supply a pidfile location")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        """Create a BotConfig from a dictionary.

        Raises:
            ConfigurationError: a required option is missing or invalid.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid configuration: {problems}", data={"errors": e.error_count()}
            ) from e

    def with_overrides(self, **changes: Any) -> BotConfig:
        """Return a validated copy with ``changes`` applied."""
        merged = self.model_dump()
        merged.update(changes)
        return BotConfig.from_dict(merged)
