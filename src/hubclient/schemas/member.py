"""
Member Schema Definitions

This module defines hub membership resources: members, permission
groups, moderation status, and the payloads used to change them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Tuple

from .base import BaseModel, frozen_map, parse_timestamp
from .permissions import (
    ChannelPermissionMap,
    HubPermissionMap,
    PermissionSetting,
    SettingLike,
    parse_channel_permissions,
    parse_hub_permissions,
)


class MemberAction(str, Enum):
    """Moderation actions, named after their URL path segment."""

    BAN = "ban"
    UNBAN = "unban"
    MUTE = "mute"
    UNMUTE = "unmute"
    KICK = "kick"


@dataclass(frozen=True)
class HubMember(BaseModel):
    """
    A user's membership in a hub.

    Attributes:
        user_id: ID of the member
        joined: When the member joined the hub
        groups: IDs of the permission groups the member belongs to
        hub_permissions: Per-member hub permission overrides
        channel_permissions: Per-member overrides keyed by channel ID
    """

    user_id: str
    joined: datetime
    groups: Tuple[str, ...] = ()
    hub_permissions: HubPermissionMap = field(default_factory=frozen_map)
    channel_permissions: ChannelPermissionMap = field(
        default_factory=frozen_map
    )

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "HubMember":
        """Create from response data dictionary."""
        return cls(
            user_id=data["user_id"],
            joined=parse_timestamp(data["joined"]),
            groups=tuple(data.get("groups") or []),
            hub_permissions=parse_hub_permissions(data.get("hub_permissions")),
            channel_permissions=parse_channel_permissions(
                data.get("channel_permissions")
            ),
        )


@dataclass(frozen=True)
class PermissionGroup(BaseModel):
    """
    A named set of members sharing permission settings.

    Attributes:
        id: Unique identifier for the group
        name: Group name
        members: IDs of the users in the group
        hub_permissions: Hub permission settings of the group
        channel_permissions: Channel permission settings keyed by channel ID
        created: When the group was created
    """

    id: str
    name: str
    created: datetime
    members: Tuple[str, ...] = ()
    hub_permissions: HubPermissionMap = field(default_factory=frozen_map)
    channel_permissions: ChannelPermissionMap = field(
        default_factory=frozen_map
    )

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "PermissionGroup":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            created=parse_timestamp(data["created"]),
            members=tuple(data.get("members") or []),
            hub_permissions=parse_hub_permissions(data.get("hub_permissions")),
            channel_permissions=parse_channel_permissions(
                data.get("channel_permissions")
            ),
        )


@dataclass(frozen=True)
class MemberStatus(BaseModel):
    """
    Moderation snapshot of a member.

    Attributes:
        member: ID of the member
        banned: Whether the member is banned from the hub
        muted: Whether the member is muted in the hub
    """

    member: str
    banned: bool = False
    muted: bool = False

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "MemberStatus":
        """Create from response data dictionary."""
        return cls(
            member=data["member"],
            banned=bool(data.get("banned", False)),
            muted=bool(data.get("muted", False)),
        )


@dataclass(frozen=True)
class SetPermissionRequest(BaseModel):
    """
    Request to change one permission of a member.

    Attributes:
        setting: New tri-state value; UNSET clears the override
    """

    setting: PermissionSetting

    @classmethod
    def of(cls, setting: SettingLike) -> "SetPermissionRequest":
        """Build from a PermissionSetting or a plain bool/None."""
        return cls(setting=PermissionSetting.from_wire(setting))
