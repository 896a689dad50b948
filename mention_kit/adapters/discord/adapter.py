"""Discord adapter — bridges discord.py messages and channels to mention_kit.

Inbound: ``to_parsed`` turns a discord.Message into a ParsedMessage with
quote-aware arguments and extracted mentions.
Outbound: ``DiscordMessageSink`` delivers a CreateMessage payload through
``channel.send``.
"""

import sys
from typing import Any, Dict

import discord

from mention_kit.domain.mentions import find_mentions
from mention_kit.domain.quotes import parse_quotes
from mention_kit.ports.inbound import ParsedMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_parsed(message: discord.Message) -> ParsedMessage:
    """Convert a Discord message to a platform-agnostic ParsedMessage."""
    content = message.content or ""
    return ParsedMessage(
        content=content,
        channel_id=message.channel.id,
        author_id=message.author.id,
        args=parse_quotes(content),
        mentions=find_mentions(content),
    )


def payload_to_send_kwargs(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Map a built payload onto ``discord.abc.Messageable.send`` keywords."""
    kwargs: Dict[str, Any] = {"tts": payload.get("tts", False)}
    if payload.get("content"):
        kwargs["content"] = payload["content"]
    if payload.get("nonce"):
        kwargs["nonce"] = payload["nonce"]
    if payload.get("embed"):
        kwargs["embed"] = discord.Embed.from_dict(payload["embed"])
    return kwargs


class DiscordMessageSink:
    """MessageSink implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def send(self, channel_id: int, payload: Dict[str, Any]) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            _log(f"[mention_kit] unknown channel {channel_id}, message dropped")
            return
        try:
            await channel.send(**payload_to_send_kwargs(payload))
        except discord.HTTPException as e:
            _log(f"[mention_kit] send failed in ch={channel_id}: {e}")
            raise
