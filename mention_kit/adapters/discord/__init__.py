"""Discord (discord.py) adapter."""

from mention_kit.adapters.discord.adapter import (
    DiscordMessageSink,
    payload_to_send_kwargs,
    to_parsed,
)

__all__ = [
    "DiscordMessageSink",
    "payload_to_send_kwargs",
    "to_parsed",
]
