"""Domain layer — pure Python, no framework dependencies."""

from mention_kit.domain.errors import (
    IdOverflow,
    IoError,
    MalformedMarker,
    MentionKitError,
    MessagePayloadError,
    ParseError,
)
from mention_kit.domain.invite import parse_invite
from mention_kit.domain.mentions import (
    find_mentions,
    format_channel,
    format_emoji,
    format_role,
    format_user,
    parse_channel,
    parse_emoji,
    parse_role,
    parse_username,
    resolve_mention,
)
from mention_kit.domain.models import ID_MAX, EmojiRef, Mention, MentionKind
from mention_kit.domain.quotes import join_quotes, parse_quotes

__all__ = [
    "EmojiRef",
    "Mention",
    "MentionKind",
    "ID_MAX",
    "parse_username",
    "parse_role",
    "parse_channel",
    "parse_emoji",
    "parse_invite",
    "parse_quotes",
    "join_quotes",
    "resolve_mention",
    "find_mentions",
    "format_user",
    "format_role",
    "format_channel",
    "format_emoji",
    "MentionKitError",
    "ParseError",
    "MalformedMarker",
    "IdOverflow",
    "IoError",
    "MessagePayloadError",
]
