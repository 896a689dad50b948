"""Tests for Discord adapter — ParsedMessage conversion and sending."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from mention_kit.adapters.discord.adapter import (
    DiscordMessageSink,
    payload_to_send_kwargs,
    to_parsed,
)
from mention_kit.builder import CreateMessage
from mention_kit.config import MentionKitConfig
from mention_kit.domain.models import Mention, MentionKind
from mention_kit.ports import MessageSink, ParsedMessage

CHANNEL_ID = 100


def _make_message(content: str) -> MagicMock:
    """Create a fake discord.Message."""
    msg = MagicMock()
    msg.content = content
    msg.channel = MagicMock()
    msg.channel.id = CHANNEL_ID
    msg.author = MagicMock()
    msg.author.id = 1234
    return msg


def _make_client(channel) -> MagicMock:
    client = MagicMock()
    client.get_channel = MagicMock(return_value=channel)
    return client


class TestParsedMessage:
    def test_id_properties(self):
        msg = ParsedMessage(
            content="",
            channel_id=1,
            author_id=2,
            mentions=[
                Mention(MentionKind.USER, 10),
                Mention(MentionKind.ROLE, 20),
                Mention(MentionKind.CHANNEL, 30),
                Mention(MentionKind.USER, 11),
            ],
        )
        assert msg.user_ids == [10, 11]
        assert msg.role_ids == [20]
        assert msg.channel_ids == [30]


class TestToParsed:
    def test_command_with_mentions(self):
        parsed = to_parsed(_make_message('!warn <@!42> "posting in <#7>"'))
        assert parsed.channel_id == CHANNEL_ID
        assert parsed.author_id == 1234
        assert parsed.args == ["!warn", "<@!42>", "posting in <#7>"]
        assert parsed.user_ids == [42]
        assert parsed.channel_ids == [7]

    def test_empty_content(self):
        parsed = to_parsed(_make_message(""))
        assert parsed.args == []
        assert parsed.mentions == []


class TestPayloadToSendKwargs:
    def test_content_only(self):
        payload = CreateMessage(MentionKitConfig()).content("hi").build()
        assert payload_to_send_kwargs(payload) == {"tts": False, "content": "hi"}

    def test_embed(self):
        payload = (
            CreateMessage(MentionKitConfig())
            .nonce("n1")
            .embed(lambda e: e.title("T").colour(0x00FF00).field("k", "v"))
            .build()
        )
        kwargs = payload_to_send_kwargs(payload)
        assert kwargs["nonce"] == "n1"
        assert "content" not in kwargs
        embed = kwargs["embed"]
        assert isinstance(embed, discord.Embed)
        assert embed.title == "T"
        assert embed.colour.value == 0x00FF00
        assert embed.fields[0].name == "k"


class TestDiscordMessageSink:
    def test_satisfies_port(self):
        assert isinstance(DiscordMessageSink(MagicMock()), MessageSink)

    @pytest.mark.asyncio
    async def test_send(self):
        channel = MagicMock()
        channel.send = AsyncMock()
        sink = DiscordMessageSink(_make_client(channel))
        await sink.send(CHANNEL_ID, {"content": "hello", "tts": True})
        channel.send.assert_awaited_once_with(content="hello", tts=True)

    @pytest.mark.asyncio
    async def test_unknown_channel(self, capsys):
        sink = DiscordMessageSink(_make_client(None))
        await sink.send(999, {"content": "hello", "tts": False})
        assert "unknown channel 999" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, capsys):
        response = MagicMock()
        response.status = 403
        response.reason = "Forbidden"
        channel = MagicMock()
        channel.send = AsyncMock(side_effect=discord.Forbidden(response, "Missing Access"))
        sink = DiscordMessageSink(_make_client(channel))
        with pytest.raises(discord.Forbidden):
            await sink.send(CHANNEL_ID, {"content": "hello", "tts": False})
        assert "send failed" in capsys.readouterr().err
