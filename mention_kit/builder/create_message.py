"""Message builder — the key/value payload of a send-message request.

Two shapes are accepted by ``build()``:

1. a message with an embed, where nothing else is required;
2. otherwise, a message whose content is set and within the content limit.

Ids produced by the parsers can be dropped straight into content::

    user_id = parse_username("<@!80351110224678912>")
    payload = CreateMessage().content("hi").mention_user(user_id).build()
"""

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ValidationError, model_validator

from mention_kit.builder.create_embed import CreateEmbed
from mention_kit.config import DEFAULT_TTS, MESSAGE_CONTENT_LIMIT, MentionKitConfig
from mention_kit.domain.errors import MessagePayloadError
from mention_kit.domain.mentions import format_channel, format_role, format_user


class MessagePayload(BaseModel):
    """Validated form of a send-message request body."""

    content: Optional[str] = None
    embed: Optional[Dict[str, Any]] = None
    nonce: Optional[str] = None
    tts: bool = False

    @model_validator(mode="after")
    def _require_content_or_embed(self) -> "MessagePayload":
        if not self.content and not self.embed:
            raise ValueError("message needs content or an embed")
        return self


class CreateMessage:
    """Chainable builder for a send-message payload.

    ``tts`` defaults to the configured value (false unless
    MENTION_KIT_DEFAULT_TTS is set).
    """

    def __init__(self, config: Optional[MentionKitConfig] = None):
        self._config = config or MentionKitConfig(
            content_limit=MESSAGE_CONTENT_LIMIT,
            default_tts=DEFAULT_TTS,
        )
        self.payload: Dict[str, Any] = {"tts": self._config.default_tts}

    def content(self, content: str) -> "CreateMessage":
        """Set the content of the message."""
        self.payload["content"] = content
        return self

    def embed(self, f: Callable[[CreateEmbed], CreateEmbed]) -> "CreateMessage":
        """Set an embed, built by ``f`` from a fresh CreateEmbed."""
        self.payload["embed"] = f(CreateEmbed()).payload
        return self

    def nonce(self, nonce: str) -> "CreateMessage":
        """Set the nonce used to validate that the message was sent."""
        self.payload["nonce"] = nonce
        return self

    def tts(self, tts: bool) -> "CreateMessage":
        self.payload["tts"] = tts
        return self

    def _append(self, marker: str) -> "CreateMessage":
        existing = self.payload.get("content")
        self.payload["content"] = f"{existing} {marker}" if existing else marker
        return self

    def mention_user(self, user_id: int, nickname: bool = False) -> "CreateMessage":
        return self._append(format_user(user_id, nickname=nickname))

    def mention_role(self, role_id: int) -> "CreateMessage":
        return self._append(format_role(role_id))

    def mention_channel(self, channel_id: int) -> "CreateMessage":
        return self._append(format_channel(channel_id))

    def build(self) -> Dict[str, Any]:
        """Validate and return the request body.

        Raises:
            MessagePayloadError: no content or embed, or content over the limit.
        """
        try:
            model = MessagePayload.model_validate(self.payload)
        except ValidationError as e:
            raise MessagePayloadError(str(e)) from e

        limit = self._config.content_limit
        if model.content is not None and len(model.content) > limit:
            raise MessagePayloadError(
                f"content is {len(model.content)} code points, limit is {limit}"
            )
        return model.model_dump(exclude_none=True)
