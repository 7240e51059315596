"""
Hub Client Service

This module provides the HubClient class, which exposes one coroutine per
endpoint of the hub server's REST API (hubs, channels, members,
permissions, messages) plus the GraphQL endpoint.

Architecture:
    - Each method maps (path, verb, body) to a typed result
    - Generic verb helpers delegate to HttpTransport, which unwraps the
      {success|error} envelope
    - Every call is an independent round trip; the client holds no state
      beyond the base URL and auth token

Usage:
    client = HubClient("http://127.0.0.1:8080/api", token)
    hub_id = await client.create_hub("general")
    hub = await client.get_hub(hub_id)
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import quote

from .config import ClientConfig
from .schemas import (
    Channel,
    ChannelPermission,
    ChannelUpdate,
    CreateChannelRequest,
    CreateHubRequest,
    GraphQLRequest,
    Hub,
    HubMember,
    HubPermission,
    HubUpdate,
    MemberAction,
    MemberStatus,
    Message,
    MessagesAfterRequest,
    MessagesInPeriodRequest,
    PermissionSetting,
    SendMessageRequest,
    SetPermissionRequest,
)
from .schemas.permissions import SettingLike
from .transport import HttpTransport

logger = logging.getLogger(__name__)


def _path(*segments: str) -> str:
    """Join path segments, percent-encoding each one (including '/')."""
    return "".join("/" + quote(str(segment), safe="") for segment in segments)


class HubClient:
    """
    Client for the hub server API.

    Attributes:
        base_url: Base URL every endpoint path is appended to
        auth: Token sent in the Authorization header
    """

    def __init__(
        self,
        base_url: str,
        auth: str,
        session_factory: Optional[Callable[[], Any]] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the hub API (e.g. http://127.0.0.1:8080/api)
            auth: Opaque token identifying the calling user
            session_factory: Optional factory for HTTP sessions
                             (for dependency injection/testing)
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self._transport = HttpTransport(auth, session_factory)

        logger.info(f"HubClient initialized for {self.base_url}")

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session_factory: Optional[Callable[[], Any]] = None,
    ) -> "HubClient":
        """Create a client from a ClientConfig."""
        return cls(config.base_url, config.auth, session_factory)

    # Verb helpers

    def _url(self, path: str) -> str:
        return self.base_url + path

    async def _get(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        return await self._transport.fetch(
            self._url(path), "GET", body, **kwargs
        )

    async def _post(self, path: str, body: Any = None, **kwargs: Any) -> Any:
        return await self._transport.fetch(
            self._url(path), "POST", body, **kwargs
        )

    async def _put(self, path: str, body: Any = None) -> Any:
        return await self._transport.fetch(self._url(path), "PUT", body)

    async def _delete(self, path: str) -> Any:
        return await self._transport.fetch(self._url(path), "DELETE")

    # Hubs

    async def get_hub(self, hub_id: str) -> Hub:
        """
        Fetch a hub with its members, channels and groups.

        Raises:
            RemoteError: If the hub does not exist or the caller may not
                         see it (e.g. the caller is banned)
        """
        logger.info(f"Getting hub {hub_id}")
        return Hub.from_dict(await self._get(_path("hub", hub_id)))

    async def create_hub(self, name: str, description: str = "") -> str:
        """
        Create a hub owned by the caller.

        Returns:
            ID of the new hub
        """
        logger.info(f"Creating hub '{name}'")
        request = CreateHubRequest(name=name, description=description)
        return await self._post("/hub", request.to_dict())

    async def delete_hub(self, hub_id: str) -> str:
        """Delete a hub. Returns the server's status string."""
        logger.info(f"Deleting hub {hub_id}")
        return await self._delete(_path("hub", hub_id))

    async def update_hub(self, hub_id: str, update: HubUpdate) -> HubUpdate:
        """
        Change some fields of a hub; fields left unset stay unchanged.

        Returns:
            The update as echoed by the server
        """
        logger.info(f"Updating hub {hub_id}: {update.to_dict()}")
        return HubUpdate.from_dict(
            await self._put(_path("hub", hub_id), update.to_dict())
        )

    async def join_hub(self, hub_id: str) -> str:
        """Join a hub as the caller. Returns the server's status string."""
        logger.info(f"Joining hub {hub_id}")
        return await self._post(_path("hub", hub_id, "join"))

    async def leave_hub(self, hub_id: str) -> str:
        """Leave a hub as the caller. Returns the server's status string."""
        logger.info(f"Leaving hub {hub_id}")
        return await self._post(_path("hub", hub_id, "leave"))

    # Channels

    async def get_channel(self, hub_id: str, channel_id: str) -> Channel:
        """Fetch one channel of a hub."""
        logger.info(f"Getting channel {channel_id} in hub {hub_id}")
        return Channel.from_dict(
            await self._get(_path("channel", hub_id, channel_id))
        )

    async def create_channel(
        self, hub_id: str, name: str, description: str = ""
    ) -> str:
        """
        Create a channel in a hub.

        Returns:
            ID of the new channel
        """
        logger.info(f"Creating channel '{name}' in hub {hub_id}")
        request = CreateChannelRequest(name=name, description=description)
        return await self._post(_path("channel", hub_id), request.to_dict())

    async def update_channel(
        self, hub_id: str, channel_id: str, update: ChannelUpdate
    ) -> ChannelUpdate:
        """
        Change some fields of a channel; fields left unset stay unchanged.

        Returns:
            The update as echoed by the server
        """
        logger.info(f"Updating channel {channel_id} in hub {hub_id}")
        return ChannelUpdate.from_dict(
            await self._put(
                _path("channel", hub_id, channel_id), update.to_dict()
            )
        )

    async def delete_channel(self, hub_id: str, channel_id: str) -> str:
        """Delete a channel. Returns the server's status string."""
        logger.info(f"Deleting channel {channel_id} in hub {hub_id}")
        return await self._delete(_path("channel", hub_id, channel_id))

    # Members

    async def get_member(self, hub_id: str, member_id: str) -> HubMember:
        """Fetch a member of a hub."""
        logger.info(f"Getting member {member_id} in hub {hub_id}")
        return HubMember.from_dict(
            await self._get(_path("member", hub_id, member_id))
        )

    async def get_member_status(
        self, hub_id: str, member_id: str
    ) -> MemberStatus:
        """Fetch the ban/mute status of a member."""
        logger.info(f"Getting status of member {member_id} in hub {hub_id}")
        return MemberStatus.from_dict(
            await self._get(_path("member", hub_id, member_id, "status"))
        )

    async def set_member_hub_permission(
        self,
        hub_id: str,
        member_id: str,
        permission: HubPermission,
        setting: SettingLike,
    ) -> MemberStatus:
        """
        Set a hub permission override on a member.

        Args:
            hub_id: ID of the hub
            member_id: ID of the member
            permission: Permission to change
            setting: ALLOW/DENY, or UNSET to clear the override. Plain
                     True/False/None are accepted too.

        Returns:
            The member's status after the change
        """
        request = SetPermissionRequest.of(setting)
        logger.info(
            f"Setting hub permission {HubPermission(permission).value} "
            f"of member {member_id} in hub {hub_id} to {request.setting.name}"
        )
        path = _path(
            "member",
            hub_id,
            member_id,
            "hub_permission",
            HubPermission(permission).value,
        )
        return MemberStatus.from_dict(await self._put(path, request.to_dict()))

    async def set_member_channel_permission(
        self,
        hub_id: str,
        member_id: str,
        channel_id: str,
        permission: ChannelPermission,
        setting: SettingLike,
    ) -> MemberStatus:
        """
        Set a channel permission override on a member.

        Returns:
            The member's status after the change
        """
        request = SetPermissionRequest.of(setting)
        logger.info(
            f"Setting channel permission {ChannelPermission(permission).value} "
            f"of member {member_id} in channel {channel_id} to "
            f"{request.setting.name}"
        )
        path = _path(
            "member",
            hub_id,
            member_id,
            "channel_permission",
            channel_id,
            ChannelPermission(permission).value,
        )
        return MemberStatus.from_dict(await self._put(path, request.to_dict()))

    async def get_member_hub_permission(
        self, hub_id: str, member_id: str, permission: HubPermission
    ) -> PermissionSetting:
        """
        Read a member's hub permission override.

        Returns:
            ALLOW, DENY, or UNSET when the member has no override
        """
        logger.info(
            f"Getting hub permission {HubPermission(permission).value} "
            f"of member {member_id} in hub {hub_id}"
        )
        path = _path(
            "member",
            hub_id,
            member_id,
            "hub_permission",
            HubPermission(permission).value,
        )
        return PermissionSetting.from_wire(
            await self._get(path, allow_empty=True)
        )

    async def get_member_channel_permission(
        self,
        hub_id: str,
        member_id: str,
        channel_id: str,
        permission: ChannelPermission,
    ) -> PermissionSetting:
        """
        Read a member's channel permission override.

        Returns:
            ALLOW, DENY, or UNSET when the member has no override
        """
        logger.info(
            f"Getting channel permission {ChannelPermission(permission).value} "
            f"of member {member_id} in channel {channel_id}"
        )
        path = _path(
            "member",
            hub_id,
            member_id,
            "channel_permission",
            channel_id,
            ChannelPermission(permission).value,
        )
        return PermissionSetting.from_wire(
            await self._get(path, allow_empty=True)
        )

    async def member_action(
        self,
        hub_id: str,
        member_id: str,
        action: Union[MemberAction, str],
    ) -> str:
        """
        Apply a moderation action (ban, unban, mute, unmute, kick).

        Returns:
            The server's status string
        """
        action = MemberAction(action)
        logger.info(
            f"Applying {action.value} to member {member_id} in hub {hub_id}"
        )
        return await self._post(
            _path("member", hub_id, member_id, action.value)
        )

    async def ban_member(self, hub_id: str, member_id: str) -> str:
        return await self.member_action(hub_id, member_id, MemberAction.BAN)

    async def unban_member(self, hub_id: str, member_id: str) -> str:
        return await self.member_action(hub_id, member_id, MemberAction.UNBAN)

    async def mute_member(self, hub_id: str, member_id: str) -> str:
        return await self.member_action(hub_id, member_id, MemberAction.MUTE)

    async def unmute_member(self, hub_id: str, member_id: str) -> str:
        return await self.member_action(hub_id, member_id, MemberAction.UNMUTE)

    async def kick_member(self, hub_id: str, member_id: str) -> str:
        return await self.member_action(hub_id, member_id, MemberAction.KICK)

    # Messages

    async def send_message(
        self, hub_id: str, channel_id: str, message: str
    ) -> str:
        """
        Post a message to a channel as the caller.

        Returns:
            ID of the new message

        Raises:
            RemoteError: If the caller may not write (e.g. is muted)
        """
        logger.info(f"Sending message to channel {channel_id} in hub {hub_id}")
        request = SendMessageRequest(message=message)
        return await self._post(
            _path("message", hub_id, channel_id), request.to_dict()
        )

    async def get_message(
        self, hub_id: str, channel_id: str, message_id: str
    ) -> Message:
        """Fetch one message."""
        logger.info(f"Getting message {message_id} in channel {channel_id}")
        return Message.from_dict(
            await self._get(_path("message", hub_id, channel_id, message_id))
        )

    async def get_messages_after(
        self,
        hub_id: str,
        channel_id: str,
        from_message: str,
        max_messages: int,
    ) -> List[Message]:
        """
        Fetch up to `max_messages` messages following a cursor message.

        Args:
            hub_id: ID of the hub
            channel_id: ID of the channel
            from_message: ID of the message to read after
            max_messages: Upper bound on the number of messages returned
        """
        logger.info(
            f"Getting up to {max_messages} messages after {from_message} "
            f"in channel {channel_id}"
        )
        request = MessagesAfterRequest(
            from_message=from_message, max=max_messages
        )
        messages = await self._get(
            _path("message", hub_id, channel_id, "after"), request.to_dict()
        )
        return [Message.from_dict(message) for message in messages or []]

    async def get_messages_in_period(
        self,
        hub_id: str,
        channel_id: str,
        from_time: Union[datetime, str, int],
        to_time: Union[datetime, str, int],
        max_messages: int,
        new_to_old: bool = False,
    ) -> List[Message]:
        """
        Fetch up to `max_messages` messages created in a time window.

        Args:
            hub_id: ID of the hub
            channel_id: ID of the channel
            from_time: Start of the window
            to_time: End of the window
            max_messages: Upper bound on the number of messages returned
            new_to_old: Return the newest messages first
        """
        logger.info(
            f"Getting up to {max_messages} messages between {from_time} and "
            f"{to_time} in channel {channel_id}"
        )
        request = MessagesInPeriodRequest(
            from_time=from_time,
            to_time=to_time,
            max=max_messages,
            new_to_old=new_to_old,
        )
        messages = await self._get(
            _path("message", hub_id, channel_id, "time_period"),
            request.to_dict(),
        )
        return [Message.from_dict(message) for message in messages or []]

    # GraphQL

    async def graphql(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Run a GraphQL query.

        The response is returned as decoded, without envelope unwrapping;
        GraphQL errors are part of the returned document, not exceptions.
        """
        logger.info("Running GraphQL query")
        request = GraphQLRequest(query=query, variables=variables or {})
        return await self._post("/graphql", request.to_dict(), raw=True)
