"""
Client Configuration

Connection settings are read from the environment, falling back to a
local development server and a freshly generated user token.

Environment:
    HUB_BASE_URL: Base URL of the hub API (default http://127.0.0.1:8080/api)
    HUB_AUTH_TOKEN: Token sent in the Authorization header (default: random)
"""

import os
import uuid
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_BASE_URL = "http://127.0.0.1:8080/api"


def new_auth_token() -> str:
    """Generate a random token, i.e. a new simulated user."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings needed to build a HubClient.

    Attributes:
        base_url: Base URL every endpoint path is appended to
        auth: Token sent in the Authorization header
    """

    base_url: str = DEFAULT_BASE_URL
    auth: str = field(default_factory=new_auth_token)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base_url: Optional[str] = None,
    ) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            base_url: Explicit base URL taking precedence over the environment
        """
        env = os.environ if environ is None else environ
        url = base_url or env.get("HUB_BASE_URL") or DEFAULT_BASE_URL
        return cls(
            base_url=url.rstrip("/"),
            auth=env.get("HUB_AUTH_TOKEN") or new_auth_token(),
        )
