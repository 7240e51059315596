"""
Permission Definitions

Hub-level and channel-level permission names, and the three-valued
setting a member or group holds for each of them.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .base import frozen_map


class HubPermission(str, Enum):
    """Permissions that apply to a whole hub."""

    ALL = "ALL"
    READ_CHANNELS = "READ_CHANNELS"
    WRITE_CHANNELS = "WRITE_CHANNELS"
    ADMINISTRATE = "ADMINISTRATE"
    MANAGE_CHANNELS = "MANAGE_CHANNELS"
    MUTE = "MUTE"
    UNMUTE = "UNMUTE"
    KICK = "KICK"
    BAN = "BAN"
    UNBAN = "UNBAN"


class ChannelPermission(str, Enum):
    """Permissions that apply to a single channel."""

    WRITE = "WRITE"
    READ = "READ"
    MANAGE = "MANAGE"
    ALL = "ALL"


class PermissionSetting(Enum):
    """
    Tri-state permission value.

    On the wire ALLOW is `true`, DENY is `false` and UNSET is `null` or
    an absent value. UNSET means "inherit from the member's groups".
    """

    ALLOW = "allow"
    DENY = "deny"
    UNSET = "unset"

    @property
    def wire_value(self) -> Optional[bool]:
        """JSON value sent to the server."""
        if self is PermissionSetting.ALLOW:
            return True
        if self is PermissionSetting.DENY:
            return False
        return None

    @classmethod
    def from_wire(cls, value: Any) -> "PermissionSetting":
        """
        Convert a wire value into a setting.

        Raises:
            ValueError: If the value is not a boolean or null.
        """
        if isinstance(value, PermissionSetting):
            return value
        if value is None:
            return cls.UNSET
        if value is True:
            return cls.ALLOW
        if value is False:
            return cls.DENY
        raise ValueError(f"Invalid permission setting: {value!r}")


SettingLike = Union[PermissionSetting, bool, None]

HubPermissionMap = Mapping[HubPermission, PermissionSetting]
ChannelPermissionMap = Mapping[
    str, Mapping[ChannelPermission, PermissionSetting]
]


def parse_hub_permissions(data: Optional[Dict[str, Any]]) -> HubPermissionMap:
    """Decode a `{permission: bool|null}` object."""
    return frozen_map(
        (HubPermission(name), PermissionSetting.from_wire(value))
        for name, value in (data or {}).items()
    )


def parse_channel_permissions(
    data: Optional[Dict[str, Dict[str, Any]]],
) -> ChannelPermissionMap:
    """Decode a `{channel_id: {permission: bool|null}}` object."""
    return frozen_map(
        (
            channel_id,
            frozen_map(
                (ChannelPermission(name), PermissionSetting.from_wire(value))
                for name, value in (settings or {}).items()
            ),
        )
        for channel_id, settings in (data or {}).items()
    )
