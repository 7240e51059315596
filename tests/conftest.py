"""
Shared fixtures for hub client tests.

FakeServer stands in for aiohttp: it hands out sessions that record every
request and answer with queued response bodies.
"""

import json
from typing import Any, Dict, List

import pytest

from hubclient import HubClient

BASE_URL = "http://hub.test/api"
OWNER_TOKEN = "owner-token"


class FakeResponse:
    """Mock aiohttp response with a fixed body."""

    def __init__(self, body: bytes):
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None


class FakeSession:
    """Mock aiohttp session recording requests on its server."""

    def __init__(self, server: "FakeServer"):
        self._server = server

    def request(self, method, url, headers=None, data=None):
        self._server.calls.append(
            {
                "method": method,
                "url": url,
                "path": url[len(BASE_URL):],
                "headers": dict(headers or {}),
                "data": data,
            }
        )
        return FakeResponse(self._server.next_body())

    async def __aenter__(self):
        self._server.sessions_opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None


class FakeServer:
    """Queue of canned responses plus a log of received requests."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.sessions_opened = 0
        self._responses: List[bytes] = []

    def respond(self, body: Any) -> None:
        """Queue a body; bytes and str are sent raw, the rest as JSON."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self._responses.append(body)

    def succeed(self, payload: Any) -> None:
        self.respond({"success": payload})

    def fail(self, message: str) -> None:
        self.respond({"error": message})

    def next_body(self) -> bytes:
        if not self._responses:
            return b'{"success": "ok"}'
        return self._responses.pop(0)

    def session_factory(self) -> FakeSession:
        return FakeSession(self)

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]

    @property
    def last_body(self) -> Any:
        data = self.last_call["data"]
        return json.loads(data) if data else None


@pytest.fixture
def server():
    """A fresh fake server per test."""
    return FakeServer()


@pytest.fixture
def client(server):
    """HubClient wired to the fake server."""
    return HubClient(BASE_URL, OWNER_TOKEN, session_factory=server.session_factory)


def hub_payload(**overrides) -> Dict[str, Any]:
    """A complete hub as the server serializes it."""
    data = {
        "id": "hub-1",
        "name": "test0",
        "description": "A test hub",
        "created": "2024-03-01T12:00:00Z",
        "owner": OWNER_TOKEN,
        "default_group": "group-default",
        "members": {
            OWNER_TOKEN: {
                "user_id": OWNER_TOKEN,
                "joined": "2024-03-01T12:00:00Z",
                "groups": ["group-default"],
                "hub_permissions": {"ALL": True},
                "channel_permissions": {},
            }
        },
        "channels": {
            "channel-1": {
                "id": "channel-1",
                "name": "general",
                "description": "General chat",
                "hub_id": "hub-1",
                "created": "2024-03-01T12:05:00Z",
            }
        },
        "groups": {
            "group-default": {
                "id": "group-default",
                "name": "everyone",
                "members": [OWNER_TOKEN],
                "hub_permissions": {"READ_CHANNELS": True, "WRITE_CHANNELS": None},
                "channel_permissions": {"channel-1": {"WRITE": False}},
                "created": "2024-03-01T12:00:00Z",
            }
        },
        "banned": [],
        "mutes": [],
    }
    data.update(overrides)
    return data


def message_payload(message_id: str = "message-1", **overrides) -> Dict[str, Any]:
    """A message as the server serializes it."""
    data = {
        "id": message_id,
        "hub_id": "hub-1",
        "channel_id": "channel-1",
        "sender": "member-token",
        "created": "2024-03-01T12:10:00.123456789Z",
        "content": "Hello world!",
    }
    data.update(overrides)
    return data
