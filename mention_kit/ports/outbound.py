"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class MessageSink(Protocol):
    """Interface for delivering a built message payload to a channel."""

    async def send(self, channel_id: int, payload: Dict[str, Any]) -> None: ...
