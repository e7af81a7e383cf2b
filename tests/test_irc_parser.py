from __future__ import annotations

import pytest

from ircline.errors.internal import EmptyInputError, MissingCommandError
from ircline.irc.models import Message, Nick, Servername
from ircline.irc.parser import parse_irc_message


def test_empty_input_rejected():
    with pytest.raises(EmptyInputError):
        parse_irc_message("")


def test_only_command():
    msg = parse_irc_message("PRIVMSG")
    assert msg.tags is None
    assert msg.prefix is None
    assert msg.command == "PRIVMSG"
    assert msg.params is None


def test_ping():
    msg = parse_irc_message("PING :tmi.twitch.tv")
    assert msg.tags is None
    assert msg.prefix is None
    assert msg.command == "PING"
    assert msg.params == ("tmi.twitch.tv",)


def test_nick_prefix_with_trailing():
    msg = parse_irc_message(":nick!user@host PRIVMSG #chan :hello")
    assert msg.tags is None
    assert msg.prefix == Nick("nick", "user", "host")
    assert msg.command == "PRIVMSG"
    assert msg.params == ("#chan", "hello")


def test_tags_and_servername_without_params():
    msg = parse_irc_message("@flag=;id=abc :server.example COMMAND")
    assert msg.tags == {"flag": None, "id": "abc"}
    assert msg.prefix == Servername("server.example")
    assert msg.command == "COMMAND"
    assert msg.params is None


def test_tags_without_command():
    with pytest.raises(MissingCommandError) as exc:
        parse_irc_message("@id=abc")
    assert exc.value.segment == "tags"


def test_prefix_without_command():
    with pytest.raises(MissingCommandError) as exc:
        parse_irc_message(":tmi.twitch.tv")
    assert exc.value.segment == "prefix"


def test_tags_then_prefix_without_command():
    with pytest.raises(MissingCommandError) as exc:
        parse_irc_message("@id=abc :tmi.twitch.tv")
    assert exc.value.segment == "prefix"
    assert exc.value.data["line"] == "@id=abc :tmi.twitch.tv"


def test_twitch_privmsg(twitch_privmsg):
    msg = parse_irc_message(twitch_privmsg)
    assert msg.tags is not None
    assert msg.tags["badges"] == "broadcaster/1"
    assert msg.tags["color"] == "#008000"
    assert msg.tags["badge-info"] is None
    assert msg.tags["user-type"] is None
    assert msg.prefix == Nick("715209", "715209", "715209.tmi.twitch.tv")
    assert msg.command == "PRIVMSG"
    assert msg.params == ("#715209", "hello")


def test_twitch_privmsg_without_tags():
    msg = parse_irc_message(":715209!715209@715209.tmi.twitch.tv PRIVMSG #715209 :hello")
    assert msg.tags is None
    assert msg.prefix == Nick("715209", "715209", "715209.tmi.twitch.tv")
    assert msg.params == ("#715209", "hello")


def test_twitch_globaluserstate(twitch_globaluserstate):
    msg = parse_irc_message(twitch_globaluserstate)
    assert msg.tags["emote-sets"] == "0,33563,231890,300206296,300242181"
    assert msg.prefix == Servername("tmi.twitch.tv")
    assert msg.command == "GLOBALUSERSTATE"
    assert msg.params is None


def test_tags_without_prefix():
    msg = parse_irc_message("@badge-info=;badges=;color=#008000 GLOBALUSERSTATE")
    assert msg.tags == {"badge-info": None, "badges": None, "color": "#008000"}
    assert msg.prefix is None
    assert msg.command == "GLOBALUSERSTATE"
    assert msg.params is None


def test_tags_and_params_without_prefix():
    msg = parse_irc_message("@color=#008000;user-type= PRIVMSG #715209 :hello")
    assert msg.prefix is None
    assert msg.command == "PRIVMSG"
    assert msg.params == ("#715209", "hello")


def test_numeric_reply_with_middles_and_trailing():
    msg = parse_irc_message(":tmi.twitch.tv 001 justinfan :Welcome, GLHF!")
    assert msg.prefix == Servername("tmi.twitch.tv")
    assert msg.command == "001"
    assert msg.params == ("justinfan", "Welcome, GLHF!")


def test_middles_only():
    msg = parse_irc_message(":op MODE #chan +o user")
    assert msg.command == "MODE"
    assert msg.params == ("#chan", "+o", "user")


def test_message_parse_classmethod_matches_function():
    line = ":nick!user@host JOIN #chan"
    assert Message.parse(line) == parse_irc_message(line)


def test_package_level_parse_alias():
    import ircline

    assert ircline.parse("PING :x") == ircline.parse_irc_message("PING :x")


def test_parse_is_deterministic(twitch_privmsg):
    first = parse_irc_message(twitch_privmsg)
    for _ in range(5):
        again = parse_irc_message(twitch_privmsg)
        assert again == first
        assert list(again.tags.items()) == list(first.tags.items())
