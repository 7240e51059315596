"""
Tests for the HTTP Transport

Tests for envelope unwrapping and request construction including:
- Falsy but present `success` payloads
- Error envelopes and missing error text
- Headers and bodies per HTTP verb
- Transport-level failures
"""

import json
import logging

import aiohttp
import pytest

from hubclient import HttpTransport, RemoteError, TransportError, unwrap_envelope

from conftest import FakeServer

URL = "http://hub.test/api/hub/hub-1"


# Envelope Tests


@pytest.mark.parametrize("payload", [False, 0, "", [], {}, None])
def test_unwrap_returns_falsy_success_payload(payload):
    """Test that a present but falsy success value is returned as-is."""
    assert unwrap_envelope({"success": payload}) == payload


def test_unwrap_returns_success_payload():
    """Test that the success payload is returned unchanged."""
    assert unwrap_envelope({"success": {"id": "hub-1"}}) == {"id": "hub-1"}


def test_unwrap_prefers_success_over_error():
    """Test that success wins when both keys are present."""
    assert unwrap_envelope({"success": False, "error": "ignored"}) is False


def test_unwrap_raises_remote_error_with_server_message():
    """Test that an error envelope raises with the server's text."""
    with pytest.raises(RemoteError, match="Hub not found") as exc_info:
        unwrap_envelope({"error": "Hub not found"})
    assert exc_info.value.message == "Hub not found"
    assert str(exc_info.value) == "Hub not found"


def test_unwrap_empty_body_raises_unknown_error():
    """Test that a body with neither key is an error by default."""
    with pytest.raises(RemoteError, match="Unknown error"):
        unwrap_envelope({})


def test_unwrap_empty_body_allowed():
    """Test that allow_empty turns an empty envelope into None."""
    assert unwrap_envelope({}, allow_empty=True) is None


def test_unwrap_allow_empty_still_raises_on_error():
    """Test that allow_empty does not hide server errors."""
    with pytest.raises(RemoteError, match="Forbidden"):
        unwrap_envelope({"error": "Forbidden"}, allow_empty=True)


# Request Construction Tests


def test_get_without_body_only_sends_authorization():
    """Test that a plain GET carries just the Authorization header."""
    headers, data = HttpTransport("token").build_request("GET")
    assert headers == {"Authorization": "token"}
    assert data is None


def test_post_with_body_is_json():
    """Test that POST bodies are serialized as JSON."""
    headers, data = HttpTransport("token").build_request(
        "POST", {"name": "test0"}
    )
    assert headers == {
        "Authorization": "token",
        "Content-type": "application/json",
    }
    assert json.loads(data) == {"name": "test0"}


@pytest.mark.parametrize("method", ["POST", "PUT"])
def test_post_and_put_without_body_send_empty_content(method):
    """Test that body-less POST/PUT send an empty body and content type."""
    headers, data = HttpTransport("token").build_request(method)
    assert headers == {"Authorization": "token", "Content-type": ""}
    assert data == ""


def test_get_with_body_is_json():
    """Test that GET requests with a body (history queries) send JSON."""
    headers, data = HttpTransport("token").build_request(
        "GET", {"from": "message-1", "max": 10}
    )
    assert headers["Content-type"] == "application/json"
    assert json.loads(data) == {"from": "message-1", "max": 10}


def test_delete_only_sends_authorization():
    """Test that DELETE never carries a body."""
    headers, data = HttpTransport("token").build_request("DELETE", {"x": 1})
    assert headers == {"Authorization": "token"}
    assert data is None


# Fetch Tests


@pytest.mark.asyncio
async def test_fetch_unwraps_success():
    """Test that fetch returns the unwrapped payload."""
    server = FakeServer()
    server.succeed(False)
    transport = HttpTransport("token", server.session_factory)

    assert await transport.fetch(URL) is False
    assert server.last_call["method"] == "GET"
    assert server.last_call["url"] == URL


@pytest.mark.asyncio
async def test_fetch_raises_remote_error():
    """Test that an error envelope surfaces as RemoteError."""
    server = FakeServer()
    server.fail("You are banned")
    transport = HttpTransport("token", server.session_factory)

    with pytest.raises(RemoteError, match="You are banned"):
        await transport.fetch(URL)


@pytest.mark.asyncio
async def test_fetch_raw_skips_envelope():
    """Test that raw mode returns the decoded body untouched."""
    server = FakeServer()
    server.respond({"data": {"hub": None}, "errors": [{"message": "nope"}]})
    transport = HttpTransport("token", server.session_factory)

    result = await transport.fetch(URL, "POST", {"query": "{}"}, raw=True)

    assert result == {"data": {"hub": None}, "errors": [{"message": "nope"}]}


@pytest.mark.asyncio
async def test_fetch_opens_a_session_per_call():
    """Test that no session is reused between calls."""
    server = FakeServer()
    transport = HttpTransport("token", server.session_factory)

    await transport.fetch(URL)
    await transport.fetch(URL)

    assert server.sessions_opened == 2


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises_transport_error():
    """Test that an undecodable body raises TransportError."""
    server = FakeServer()
    server.respond("<html>502 Bad Gateway</html>")
    transport = HttpTransport("token", server.session_factory)

    with pytest.raises(TransportError) as exc_info:
        await transport.fetch(URL)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.asyncio
async def test_fetch_non_object_body_raises_transport_error():
    """Test that a JSON body that is not an envelope is rejected."""
    server = FakeServer()
    server.respond([1, 2, 3])
    transport = HttpTransport("token", server.session_factory)

    with pytest.raises(TransportError, match="envelope"):
        await transport.fetch(URL)


@pytest.mark.asyncio
async def test_fetch_connection_failure_raises_transport_error():
    """Test that network errors are wrapped in TransportError."""

    class BrokenSession:
        async def __aenter__(self):
            raise aiohttp.ClientConnectionError("connection refused")

        async def __aexit__(self, exc_type, exc, tb):
            return None

    transport = HttpTransport("token", BrokenSession)

    with pytest.raises(TransportError, match="connection refused") as exc_info:
        await transport.fetch(URL)
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_fetch_invalid_utf8_raises_transport_error():
    """Test that a body that is not valid UTF-8 raises TransportError."""
    server = FakeServer()
    server.respond(b'{"success": "\xff\xfe"}')
    transport = HttpTransport("token", server.session_factory)

    with pytest.raises(TransportError, match="Invalid JSON") as exc_info:
        await transport.fetch(URL, "DELETE")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_fetch_decodes_non_ascii_utf8():
    """Test that valid UTF-8 payloads are decoded from bytes."""
    server = FakeServer()
    server.respond('{"success": "héllo ✓"}'.encode("utf-8"))
    transport = HttpTransport("token", server.session_factory)

    assert await transport.fetch(URL) == "héllo ✓"


@pytest.mark.asyncio
async def test_fetch_rejection_is_not_logged_as_error(caplog):
    """Test that server rejections are left to the caller to report."""
    server = FakeServer()
    server.fail("You are muted")
    transport = HttpTransport("token", server.session_factory)

    with caplog.at_level(logging.DEBUG, logger="hubclient.transport"):
        with pytest.raises(RemoteError):
            await transport.fetch(URL, "POST", {"message": "hi"})

    rejections = [r for r in caplog.records if "rejected" in r.getMessage()]
    assert rejections
    assert all(r.levelno == logging.DEBUG for r in rejections)
