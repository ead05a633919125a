from __future__ import annotations

import pytest

from slimbot.irc.parser import is_channel_name, parse_request


def test_parse_full_privmsg():
    req = parse_request(":nick!user@host PRIVMSG #chan :hello bot\r\n")
    assert req.prefix == "nick!user@host"
    assert req.command == "PRIVMSG"
    assert req.params == ("#chan", "hello bot")
    assert req.message == "hello bot"
    assert req.target == "#chan"
    assert req.sending_user == "nick"
    assert req.host == "host"
    assert req.raw == ":nick!user@host PRIVMSG #chan :hello bot\r\n"


def test_trailing_consumes_rest_of_line_verbatim():
    req = parse_request(":n!u@h PRIVMSG #c :a  b :c  ")
    assert req.message == "a  b :c  "
    assert req.params == ("#c", "a  b :c  ")


def test_trailing_may_start_with_colon():
    req = parse_request(":n!u@h PRIVMSG #c ::)")
    assert req.message == ":)"


def test_server_line_without_prefix():
    req = parse_request("PING :irc.example.net")
    assert req.prefix is None
    assert req.sending_user == ""
    assert req.command == "PING"
    assert req.message == "irc.example.net"


def test_prefix_without_bang_is_whole_sending_user():
    req = parse_request(":irc.example.net NOTICE * :*** Looking up your hostname")
    assert req.sending_user == "irc.example.net"
    assert req.host == ""
    assert req.target == "*"


def test_missing_trailing_defaults_to_empty_message():
    req = parse_request(":n!u@h JOIN #chan")
    assert req.command == "JOIN"
    assert req.message == ""
    assert req.params == ("#chan",)
    assert req.target == "#chan"


def test_command_is_upper_cased():
    assert parse_request(":n!u@h privmsg #c :x").command == "PRIVMSG"


def test_extra_whitespace_is_tolerated():
    req = parse_request(":n!u@h   PRIVMSG   #chan    :hi there")
    assert req.command == "PRIVMSG"
    assert req.target == "#chan"
    assert req.message == "hi there"


def test_numeric_reply_params():
    req = parse_request(":srv 353 slimbot = #chan :alice bob")
    assert req.command == "353"
    assert req.params == ("slimbot", "=", "#chan", "alice bob")


@pytest.mark.parametrize("raw", ["", "\r\n", ":", ":prefixonly", "   "])
def test_malformed_lines_degrade_without_error(raw):
    req = parse_request(raw)
    assert req.command == ""
    assert not req.is_well_formed
    assert req.message == ""
    assert req.target == ""


def test_private_message_targets_nick():
    req = parse_request(":alice!a@h PRIVMSG slimbot :psst")
    assert req.is_private_message


@pytest.mark.parametrize("target", ["#chan", "&local", "+modeless", "!12345chan"])
def test_channel_targets_are_not_private(target):
    req = parse_request(f":alice!a@h PRIVMSG {target} :hi")
    assert not req.is_private_message
    assert is_channel_name(target)


def test_non_privmsg_is_never_private():
    assert not parse_request(":alice!a@h NOTICE slimbot :hi").is_private_message


def test_request_is_immutable():
    req = parse_request("PING :x")
    with pytest.raises(AttributeError):
        req.command = "PONG"  # type: ignore[misc]
