"""
HTTP Transport for the Hub Client

This module performs the actual HTTP round trips and unwraps the response
envelope every hub endpoint (except GraphQL) answers with:

    {"success": <payload>}   on success
    {"error": "<message>"}   on failure

Architecture:
    - One fresh aiohttp session per call; nothing is pooled or cached
    - The session factory is injectable (for dependency injection/testing)
    - HTTP status codes are not interpreted, the envelope decides
"""

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple

import aiohttp

from .errors import RemoteError, TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def unwrap_envelope(body: Dict[str, Any], allow_empty: bool = False) -> Any:
    """
    Extract the payload from a response envelope.

    The payload counts as present whenever the `success` key exists, so
    falsy payloads (False, 0, "", [], null) are returned unchanged.

    Args:
        body: Decoded response body
        allow_empty: Return None instead of raising when the body carries
                     neither `success` nor `error`

    Returns:
        The value of the `success` field

    Raises:
        RemoteError: If the server reported an error
    """
    if "success" in body:
        return body["success"]
    if allow_empty and "error" not in body:
        return None
    raise RemoteError(body.get("error"))


class HttpTransport:
    """
    Issues authenticated JSON requests against the hub server.

    Attributes:
        auth: Token sent in the Authorization header of every request
    """

    def __init__(
        self,
        auth: str,
        session_factory: Optional[Callable[[], Any]] = None,
    ):
        """
        Initialize the transport.

        Args:
            auth: Opaque bearer token identifying the caller
            session_factory: Optional factory returning an aiohttp-compatible
                             session (for dependency injection/testing)
        """
        self.auth = auth
        self._session_factory = session_factory or aiohttp.ClientSession

    def build_request(
        self, method: str, body: Any = None
    ) -> Tuple[Dict[str, str], Optional[str]]:
        """
        Build the headers and raw body for a request.

        POST and PUT always declare a content type: JSON when there is a
        body, empty otherwise. GET only carries one when it has a body;
        DELETE never does.

        Returns:
            Tuple of (headers, data)
        """
        headers = {"Authorization": self.auth}
        method = method.upper()

        if body is not None and method != "DELETE":
            headers["Content-type"] = JSON_CONTENT_TYPE
            return headers, json.dumps(body)
        if method in ("POST", "PUT"):
            headers["Content-type"] = ""
            return headers, ""
        return headers, None

    async def fetch(
        self,
        url: str,
        method: str = "GET",
        body: Any = None,
        raw: bool = False,
        allow_empty: bool = False,
    ) -> Any:
        """
        Perform one request and return its unwrapped payload.

        Args:
            url: Absolute URL to call
            method: HTTP verb
            body: JSON-serializable request body, if any
            raw: Return the decoded body without unwrapping the envelope
            allow_empty: See `unwrap_envelope`

        Returns:
            The `success` payload, or the whole body when `raw` is set

        Raises:
            RemoteError: If the server answered with an error envelope
            TransportError: If the request failed or the body is not a
                            JSON object
        """
        headers, data = self.build_request(method, body)
        logger.debug(f"{method} {url}")

        try:
            async with self._session_factory() as session:
                async with session.request(
                    method, url, headers=headers, data=data
                ) as response:
                    content = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        try:
            decoded = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Invalid JSON from {method} {url}: {e}")
            raise TransportError(f"Invalid JSON response from {url}") from e

        if raw:
            return decoded

        if not isinstance(decoded, dict):
            raise TransportError(
                f"Expected a response envelope from {url}, "
                f"got {type(decoded).__name__}"
            )

        try:
            return unwrap_envelope(decoded, allow_empty=allow_empty)
        except RemoteError as e:
            logger.debug(f"{method} {url} rejected: {e.message}")
            raise
