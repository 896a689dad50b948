"""Error types — parse failures and the I/O wrapper."""


class MentionKitError(Exception):
    """Base class for every error raised by mention_kit."""


class ParseError(MentionKitError, ValueError):
    """A marker string could not be turned into a value."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"{reason}: {text!r}")
        self.text = text


class MalformedMarker(ParseError):
    """Text does not match any marker grammar."""

    def __init__(self, text: str):
        super().__init__(text, "not a mention marker")


class IdOverflow(ParseError):
    """Marker shape matched but the id does not fit in 64 bits."""

    def __init__(self, text: str):
        super().__init__(text, "id exceeds 64 bits")


class IoError(MentionKitError):
    """Wraps a low-level OSError. Never produced by the parsers."""

    def __init__(self, inner: OSError):
        super().__init__(str(inner))
        self.inner = inner

    @classmethod
    def from_os_error(cls, err: OSError) -> "IoError":
        return cls(err)


class MessagePayloadError(MentionKitError, ValueError):
    """An outbound message payload failed validation."""
