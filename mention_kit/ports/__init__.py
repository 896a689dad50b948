"""Port interfaces (Hexagonal Architecture)."""

from mention_kit.ports.inbound import ParsedMessage
from mention_kit.ports.outbound import MessageSink

__all__ = [
    "ParsedMessage",
    "MessageSink",
]
