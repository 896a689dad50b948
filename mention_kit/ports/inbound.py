"""Inbound port — platform-agnostic parsed message."""

from dataclasses import dataclass, field
from typing import List

from mention_kit.domain.models import Mention, MentionKind


@dataclass
class ParsedMessage:
    """Discord/CLI-agnostic message with its arguments and mentions extracted."""

    content: str
    channel_id: int
    author_id: int
    args: List[str] = field(default_factory=list)
    mentions: List[Mention] = field(default_factory=list)

    def _ids(self, kind: MentionKind) -> List[int]:
        return [m.id for m in self.mentions if m.kind is kind]

    @property
    def user_ids(self) -> List[int]:
        return self._ids(MentionKind.USER)

    @property
    def role_ids(self) -> List[int]:
        return self._ids(MentionKind.ROLE)

    @property
    def channel_ids(self) -> List[int]:
        return self._ids(MentionKind.CHANNEL)
