"""
Hub Client Package

This package provides an asynchronous client for the hub chat server API:
the HubClient service with one coroutine per endpoint, the transport that
unwraps the server's {success|error} envelope, and the resource schemas.

Schemas are organized in the `schemas` subpackage by resource:
    - hub: Hubs and hub updates
    - channel: Channels and channel updates
    - member: Members, permission groups and moderation status
    - message: Chat messages and history queries
"""

from .config import ClientConfig
from .errors import HubClientError, RemoteError, TransportError
from .service import HubClient
from .transport import HttpTransport, unwrap_envelope
from .schemas import (
    # Permissions
    ChannelPermission,
    HubPermission,
    PermissionSetting,
    # Hub schemas
    Hub,
    HubUpdate,
    # Channel schemas
    Channel,
    ChannelUpdate,
    # Member schemas
    HubMember,
    MemberAction,
    MemberStatus,
    PermissionGroup,
    # Message schemas
    Message,
)

__all__ = [
    # Client classes
    "ClientConfig",
    "HubClient",
    "HttpTransport",
    "unwrap_envelope",
    # Errors
    "HubClientError",
    "RemoteError",
    "TransportError",
    # Permissions
    "ChannelPermission",
    "HubPermission",
    "PermissionSetting",
    # Hub schemas
    "Hub",
    "HubUpdate",
    # Channel schemas
    "Channel",
    "ChannelUpdate",
    # Member schemas
    "HubMember",
    "MemberAction",
    "MemberStatus",
    "PermissionGroup",
    # Message schemas
    "Message",
]
