"""
Schemas Package

This package contains the resource models and request payloads exchanged
with the hub server. Schemas are organized by resource: hub, channel,
member (membership, groups and moderation) and message, plus the shared
permission enumerations.

The base module provides BaseModel, which gives every schema the same
`from_dict`/`from_json` and `to_dict`/`to_json` methods.
"""

from .base import BaseModel, parse_timestamp, to_wire
from .permissions import ChannelPermission, HubPermission, PermissionSetting
from .hub import CreateHubRequest, Hub, HubUpdate
from .channel import Channel, ChannelUpdate, CreateChannelRequest
from .member import (
    HubMember,
    MemberAction,
    MemberStatus,
    PermissionGroup,
    SetPermissionRequest,
)
from .message import (
    Message,
    MessagesAfterRequest,
    MessagesInPeriodRequest,
    SendMessageRequest,
)
from .query import GraphQLRequest

__all__ = [
    # Base
    "BaseModel",
    "parse_timestamp",
    "to_wire",
    # Permissions
    "ChannelPermission",
    "HubPermission",
    "PermissionSetting",
    # Hub schemas
    "CreateHubRequest",
    "Hub",
    "HubUpdate",
    # Channel schemas
    "Channel",
    "ChannelUpdate",
    "CreateChannelRequest",
    # Member schemas
    "HubMember",
    "MemberAction",
    "MemberStatus",
    "PermissionGroup",
    "SetPermissionRequest",
    # Message schemas
    "Message",
    "MessagesAfterRequest",
    "MessagesInPeriodRequest",
    "SendMessageRequest",
    # GraphQL
    "GraphQLRequest",
]
