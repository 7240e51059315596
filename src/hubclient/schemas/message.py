"""
Message Schema Definitions

This module defines chat messages and the payloads used to send them
and to page through a channel's history.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from .base import BaseModel, Timestamp, parse_timestamp, to_wire, utc_now


@dataclass(frozen=True)
class Message(BaseModel):
    """
    A chat message posted to a channel.

    Attributes:
        id: Unique identifier for the message
        hub_id: ID of the hub
        channel_id: ID of the channel
        sender: ID of the user who sent the message
        content: The message content
        created: When the message was created; defaults to now
    """

    id: str
    hub_id: str
    channel_id: str
    sender: str
    content: str
    created: datetime = field(default_factory=utc_now)

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Message":
        """Create from response data dictionary."""
        created = data.get("created")
        return cls(
            id=data["id"],
            hub_id=data["hub_id"],
            channel_id=data["channel_id"],
            sender=data["sender"],
            content=data["content"],
            created=(
                parse_timestamp(created) if created is not None else utc_now()
            ),
        )


@dataclass(frozen=True)
class SendMessageRequest(BaseModel):
    """
    Request to post a message to a channel.

    Attributes:
        message: The message content
    """

    message: str


@dataclass(frozen=True)
class MessagesAfterRequest(BaseModel):
    """
    Request for the messages that follow a cursor message.

    Attributes:
        from_message: ID of the message to read after
        max: Maximum number of messages to return
    """

    from_message: str
    max: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire payload."""
        return {"from": self.from_message, "max": self.max}


@dataclass(frozen=True)
class MessagesInPeriodRequest(BaseModel):
    """
    Request for the messages created inside a time window.

    Attributes:
        from_time: Start of the window
        to_time: End of the window
        max: Maximum number of messages to return
        new_to_old: Return newest messages first
    """

    from_time: Timestamp
    to_time: Timestamp
    max: int
    new_to_old: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire payload."""
        return {
            "from": to_wire(parse_timestamp(self.from_time)),
            "to": to_wire(parse_timestamp(self.to_time)),
            "max": self.max,
            "new_to_old": self.new_to_old,
        }
