"""Mention marker parsing — users, roles, channels and custom emoji.

Each ``parse_*`` function expects the whole string to be exactly one
marker and returns ``None`` for anything else, including ids that do not
fit in 64 bits. ``resolve_mention`` is the strict variant that reports
why a string was rejected.

Pure Python, no framework dependencies.
"""

import re
from typing import List, Optional, Pattern

from mention_kit.domain.errors import IdOverflow, MalformedMarker
from mention_kit.domain.models import ID_MAX, EmojiRef, Mention, MentionKind

USER_RE = re.compile(r"<@!?(?P<id>[0-9]+)>")
ROLE_RE = re.compile(r"<@&(?P<id>[0-9]+)>")
CHANNEL_RE = re.compile(r"<#(?P<id>[0-9]+)>")
EMOJI_RE = re.compile(r"<:(?P<name>[^:]+):(?P<id>[0-9]+)>")

# Free-text scan: emoji names may not span whitespace or brackets here.
MARKER_RE = re.compile(
    r"<(?P<prefix>@!?|@&|#|:(?P<name>[^:<>\s]+):)(?P<id>[0-9]+)>"
)

_GRAMMARS = (
    (MentionKind.USER, USER_RE),
    (MentionKind.ROLE, ROLE_RE),
    (MentionKind.CHANNEL, CHANNEL_RE),
    (MentionKind.EMOJI, EMOJI_RE),
)

_PREFIX_KINDS = {
    "@": MentionKind.USER,
    "@!": MentionKind.USER,
    "@&": MentionKind.ROLE,
    "#": MentionKind.CHANNEL,
}


def _parse_id(digits: str) -> Optional[int]:
    """Parse a run of ASCII decimal digits as an unsigned 64-bit id.

    Returns None for an empty run, any non-digit character (signs,
    whitespace, underscores and non-ASCII digits included) or a value
    above 2**64 - 1. Never truncates.
    """
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    if value > ID_MAX:
        return None
    return value


def _match_id(pattern: Pattern[str], text: str) -> Optional[int]:
    match = pattern.fullmatch(text)
    if match is None:
        return None
    return _parse_id(match.group("id"))


def parse_username(text: str) -> Optional[int]:
    """Return the user id from ``<@id>`` or ``<@!id>``."""
    return _match_id(USER_RE, text)


def parse_role(text: str) -> Optional[int]:
    """Return the role id from ``<@&id>``."""
    return _match_id(ROLE_RE, text)


def parse_channel(text: str) -> Optional[int]:
    """Return the channel id from ``<#id>``."""
    return _match_id(CHANNEL_RE, text)


def parse_emoji(text: str) -> Optional[EmojiRef]:
    """Return ``(name, id)`` from ``<:name:id>``.

    The name is everything between the first two colons, case preserved.
    """
    match = EMOJI_RE.fullmatch(text)
    if match is None:
        return None
    emoji_id = _parse_id(match.group("id"))
    if emoji_id is None:
        return None
    return EmojiRef(match.group("name"), emoji_id)


def resolve_mention(text: str) -> Mention:
    """Classify a single marker, raising instead of returning None.

    Raises:
        IdOverflow: the marker shape is valid but the id exceeds 64 bits.
        MalformedMarker: the text matches no marker grammar.
    """
    for kind, pattern in _GRAMMARS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        value = _parse_id(match.group("id"))
        if value is None:
            raise IdOverflow(text)
        name = match.group("name") if kind is MentionKind.EMOJI else None
        return Mention(kind=kind, id=value, name=name)
    raise MalformedMarker(text)


def find_mentions(text: str) -> List[Mention]:
    """Extract every well-formed marker from free text, in order.

    Markers whose id overflows are skipped.
    """
    found: List[Mention] = []
    for match in MARKER_RE.finditer(text):
        value = _parse_id(match.group("id"))
        if value is None:
            continue
        name = match.group("name")
        if name is not None:
            found.append(Mention(MentionKind.EMOJI, value, name))
        else:
            found.append(Mention(_PREFIX_KINDS[match.group("prefix")], value))
    return found


def _check_id(value: int) -> int:
    if not 0 <= value <= ID_MAX:
        raise ValueError(f"id out of range: {value}")
    return value


def format_user(user_id: int, nickname: bool = False) -> str:
    """Build a user marker; ``nickname=True`` gives the ``<@!id>`` form."""
    prefix = "<@!" if nickname else "<@"
    return f"{prefix}{_check_id(user_id)}>"


def format_role(role_id: int) -> str:
    return f"<@&{_check_id(role_id)}>"


def format_channel(channel_id: int) -> str:
    return f"<#{_check_id(channel_id)}>"


def format_emoji(name: str, emoji_id: int) -> str:
    if not name or ":" in name:
        raise ValueError(f"invalid emoji name: {name!r}")
    return f"<:{name}:{_check_id(emoji_id)}>"
