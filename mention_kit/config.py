"""Configuration and shared defaults."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

# Discord rejects message content longer than this (unicode code points)
DEFAULT_CONTENT_LIMIT = 2000

_TRUTHY = ("1", "true", "yes", "on")


def _read_content_limit() -> int:
    raw = os.getenv("MENTION_KIT_CONTENT_LIMIT", str(DEFAULT_CONTENT_LIMIT)).strip()
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        _stderr_print(
            f"Invalid MENTION_KIT_CONTENT_LIMIT={raw!r}, "
            f"falling back to {DEFAULT_CONTENT_LIMIT}"
        )
        return DEFAULT_CONTENT_LIMIT
    return value


def _read_default_tts() -> bool:
    return os.getenv("MENTION_KIT_DEFAULT_TTS", "false").strip().lower() in _TRUTHY


MESSAGE_CONTENT_LIMIT = _read_content_limit()
DEFAULT_TTS = _read_default_tts()


@dataclass
class MentionKitConfig:
    """Typed configuration for the message builder."""

    content_limit: int = DEFAULT_CONTENT_LIMIT
    default_tts: bool = False

    @classmethod
    def from_env(cls) -> "MentionKitConfig":
        """Create config from environment variables, re-reading them."""
        return cls(
            content_limit=_read_content_limit(),
            default_tts=_read_default_tts(),
        )
