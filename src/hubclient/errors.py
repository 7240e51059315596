"""
Client Errors

Every failure raised by the hub client derives from HubClientError so
callers can catch the whole family at once.

    - RemoteError: the server answered with an error envelope
    - TransportError: the request never produced a usable envelope
      (network failure, undecodable body)
"""

from typing import Optional


class HubClientError(Exception):
    """Base class for hub client errors."""


class RemoteError(HubClientError):
    """
    Error reported by the server in the response envelope.

    The server's message is kept verbatim; the client does not try to
    classify it (not found, forbidden and invalid input all look the same).

    Attributes:
        message: Error text supplied by the server
    """

    def __init__(self, message: Optional[str]):
        self.message = message if message is not None else "Unknown error"
        super().__init__(self.message)


class TransportError(HubClientError):
    """Network or decoding failure below the envelope layer."""
