"""Unit tests for notesnav.channel."""

import pytest

from notesnav.channel import Channel, NoReplyError, Radio


class TestChannel:
    def test_request_calls_handler(self):
        channel = Channel("utils/Url")
        channel.reply("getHashOnStart", lambda: "#/p/default/")
        assert channel.request("getHashOnStart") == "#/p/default/"

    def test_request_passes_arguments(self):
        channel = Channel("math")
        channel.reply("add", lambda a, b=0: a + b)
        assert channel.request("add", 1, b=2) == 3

    def test_unknown_request_raises(self):
        channel = Channel("utils/Url")
        with pytest.raises(NoReplyError, match="getHashOnStart"):
            channel.request("getHashOnStart")

    def test_no_reply_error_is_lookup_error(self):
        assert issubclass(NoReplyError, LookupError)

    def test_same_handler_twice_is_silent(self, capsys):
        channel = Channel("c")

        def handler():
            return 1

        channel.reply("x", handler)
        channel.reply("x", handler)
        assert capsys.readouterr().err == ""

    def test_overwrite_warns_and_replaces(self, capsys):
        channel = Channel("c")
        channel.reply("x", lambda: 1)
        channel.reply("x", lambda: 2)
        assert "[warn]" in capsys.readouterr().err
        assert channel.request("x") == 2


class TestStopReplying:
    def test_single_name(self):
        channel = Channel("c")
        channel.reply("a", lambda: 1)
        channel.reply("b", lambda: 2)
        channel.stop_replying("a")
        assert not channel.has_reply("a")
        assert channel.has_reply("b")

    def test_everything(self):
        channel = Channel("c")
        channel.reply("a", lambda: 1)
        channel.reply("b", lambda: 2)
        channel.stop_replying()
        with pytest.raises(NoReplyError):
            channel.request("b")

    def test_only_owner(self):
        channel = Channel("c")
        mine, theirs = object(), object()
        channel.reply("a", lambda: 1, owner=theirs)
        channel.stop_replying("a", owner=mine)
        assert channel.has_reply("a")
        channel.stop_replying("a", owner=theirs)
        assert not channel.has_reply("a")


class TestRadio:
    def test_one_channel_per_name(self):
        radio = Radio()
        assert radio.channel("utils/Url") is radio.channel("utils/Url")
        assert radio.channel("utils/Url") is not radio.channel("other")

    def test_channel_name(self):
        assert Radio().channel("utils/Url").channel_name == "utils/Url"

    def test_reset_stops_replies(self):
        radio = Radio()
        channel = radio.channel("utils/Url")
        channel.reply("a", lambda: 1)
        radio.reset()
        assert not channel.has_reply("a")
        assert radio.channel("utils/Url") is not channel
