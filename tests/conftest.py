import pytest

from ircline.logging_config import error_aggregator

TWITCH_PRIVMSG = (
    "@badge-info=;badges=broadcaster/1;color=#008000;display-name=715209;emotes=;"
    "flags=;id=8a90aa05-eea3-4699-84eb-1d4c65b85f94;mod=0;room-id=21621987;"
    "subscriber=0;tmi-sent-ts=1559891010190;turbo=0;user-id=21621987;user-type= "
    ":715209!715209@715209.tmi.twitch.tv PRIVMSG #715209 :hello"
)

TWITCH_GLOBALUSERSTATE = (
    "@badge-info=;badges=;color=#008000;display-name=715209;"
    "emote-sets=0,33563,231890,300206296,300242181;user-id=21621987;user-type= "
    ":tmi.twitch.tv GLOBALUSERSTATE"
)


@pytest.fixture(autouse=True)
def _reset_error_aggregator():
    """Keep aggregated error counts from leaking between tests."""
    error_aggregator.reset()
    yield
    error_aggregator.reset()


@pytest.fixture
def twitch_privmsg() -> str:
    return TWITCH_PRIVMSG


@pytest.fixture
def twitch_globaluserstate() -> str:
    return TWITCH_GLOBALUSERSTATE
