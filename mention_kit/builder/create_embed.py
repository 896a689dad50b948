"""Embed builder — the ``embed`` object of a send-message request."""

from typing import Any, Dict

COLOUR_MAX = 0xFFFFFF


class CreateEmbed:
    """Chainable builder for an embed map.

    Example::

        CreateEmbed().title("Release").description("v0.1.0 is out").colour(0x5865F2)
    """

    def __init__(self):
        self.payload: Dict[str, Any] = {}

    def title(self, title: str) -> "CreateEmbed":
        self.payload["title"] = title
        return self

    def description(self, description: str) -> "CreateEmbed":
        self.payload["description"] = description
        return self

    def url(self, url: str) -> "CreateEmbed":
        self.payload["url"] = url
        return self

    def colour(self, colour: int) -> "CreateEmbed":
        """Set the sidebar colour as a 24-bit RGB integer."""
        if not 0 <= colour <= COLOUR_MAX:
            raise ValueError(f"colour out of range: {colour:#x}")
        self.payload["color"] = colour
        return self

    color = colour

    def field(self, name: str, value: str, inline: bool = True) -> "CreateEmbed":
        self.payload.setdefault("fields", []).append(
            {"name": name, "value": value, "inline": inline}
        )
        return self

    def footer(self, text: str) -> "CreateEmbed":
        self.payload["footer"] = {"text": text}
        return self
