"""
Hub Schema Definitions

This module defines the hub aggregate and the payloads used to create
and partially update hubs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from .base import BaseModel, frozen_map, parse_timestamp
from .channel import Channel
from .member import HubMember, PermissionGroup


@dataclass(frozen=True)
class Hub(BaseModel):
    """
    Top-level chat community containing channels, members and groups.

    Attributes:
        id: Unique identifier for the hub
        name: Hub name
        description: Hub description
        created: When the hub was created
        owner: ID of the user owning the hub
        default_group: ID of the group new members are placed in
        members: Members keyed by user ID
        channels: Channels keyed by channel ID
        groups: Permission groups keyed by group ID
        banned: IDs of banned users
        mutes: IDs of muted users
    """

    id: str
    name: str
    description: str
    created: datetime
    owner: str
    default_group: str
    members: Mapping[str, HubMember] = field(default_factory=frozen_map)
    channels: Mapping[str, Channel] = field(default_factory=frozen_map)
    groups: Mapping[str, PermissionGroup] = field(default_factory=frozen_map)
    banned: Tuple[str, ...] = ()
    mutes: Tuple[str, ...] = ()

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Hub":
        """Create from response data dictionary."""
        members = data.get("members") or {}
        channels = data.get("channels") or {}
        groups = data.get("groups") or {}

        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            created=parse_timestamp(data["created"]),
            owner=data["owner"],
            default_group=data["default_group"],
            members=frozen_map(
                (member_id, HubMember.from_dict(member))
                for member_id, member in members.items()
            ),
            channels=frozen_map(
                (channel_id, Channel.from_dict(channel))
                for channel_id, channel in channels.items()
            ),
            groups=frozen_map(
                (group_id, PermissionGroup.from_dict(group))
                for group_id, group in groups.items()
            ),
            banned=tuple(data.get("banned") or []),
            mutes=tuple(data.get("mutes") or []),
        )


@dataclass(frozen=True)
class CreateHubRequest(BaseModel):
    """
    Request to create a new hub.

    Attributes:
        name: Name of the hub to create
        description: Hub description
    """

    name: str
    description: str = ""


@dataclass(frozen=True)
class HubUpdate(BaseModel):
    """
    Partial update of a hub.

    Fields left as None are not sent and stay unchanged on the server.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    default_group: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize only the fields being changed."""
        return {
            key: value
            for key, value in super().to_dict().items()
            if value is not None
        }

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "HubUpdate":
        """Create from response data dictionary."""
        return cls(
            name=data.get("name"),
            description=data.get("description"),
            default_group=data.get("default_group"),
        )
