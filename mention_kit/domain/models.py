"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

# Largest value a snowflake id may take (unsigned 64-bit).
ID_MAX = 2**64 - 1


class EmojiRef(NamedTuple):
    """Custom emoji reference parsed from ``<:name:id>``."""

    name: str
    id: int


class MentionKind(Enum):
    USER = "user"
    ROLE = "role"
    CHANNEL = "channel"
    EMOJI = "emoji"


@dataclass(frozen=True)
class Mention:
    """A single marker found in message text."""

    kind: MentionKind
    id: int
    name: Optional[str] = None  # emoji only
