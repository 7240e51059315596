"""
Channel Schema Definitions

This module defines the channel resource and the payloads used to
create and partially update channels.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .base import BaseModel, parse_timestamp


@dataclass(frozen=True)
class Channel(BaseModel):
    """
    A message stream scoped to one hub.

    Attributes:
        id: Unique identifier for the channel
        name: Display name of the channel
        description: Channel description
        hub_id: ID of the hub the channel belongs to
        created: When the channel was created
    """

    id: str
    name: str
    description: str
    hub_id: str
    created: datetime

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Channel":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            hub_id=data["hub_id"],
            created=parse_timestamp(data["created"]),
        )


@dataclass(frozen=True)
class CreateChannelRequest(BaseModel):
    """
    Request to create a new channel in a hub.

    Attributes:
        name: Name of the channel to create
        description: Channel description
    """

    name: str
    description: str = ""


@dataclass(frozen=True)
class ChannelUpdate(BaseModel):
    """
    Partial update of a channel.

    Fields left as None are not sent and stay unchanged on the server.
    """

    name: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize only the fields being changed."""
        return {
            key: value
            for key, value in super().to_dict().items()
            if value is not None
        }

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "ChannelUpdate":
        """Create from response data dictionary."""
        return cls(name=data.get("name"), description=data.get("description"))
