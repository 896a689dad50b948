"""Mention Kit — chat message token parsers and message builder."""

from mention_kit.config import __version__
from mention_kit.builder import CreateEmbed, CreateMessage
from mention_kit.domain import (
    EmojiRef,
    IdOverflow,
    IoError,
    MalformedMarker,
    Mention,
    MentionKind,
    MentionKitError,
    MessagePayloadError,
    ParseError,
    find_mentions,
    join_quotes,
    parse_channel,
    parse_emoji,
    parse_invite,
    parse_quotes,
    parse_role,
    parse_username,
    resolve_mention,
)

__all__ = [
    "__version__",
    "parse_username",
    "parse_role",
    "parse_channel",
    "parse_emoji",
    "parse_invite",
    "parse_quotes",
    "join_quotes",
    "resolve_mention",
    "find_mentions",
    "EmojiRef",
    "Mention",
    "MentionKind",
    "MentionKitError",
    "ParseError",
    "MalformedMarker",
    "IdOverflow",
    "IoError",
    "MessagePayloadError",
    "CreateMessage",
    "CreateEmbed",
]
