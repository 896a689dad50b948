"""Outbound message builders."""

from mention_kit.builder.create_embed import CreateEmbed
from mention_kit.builder.create_message import CreateMessage, MessagePayload

__all__ = [
    "CreateEmbed",
    "CreateMessage",
    "MessagePayload",
]
