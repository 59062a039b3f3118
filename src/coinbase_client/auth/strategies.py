"""Authentication configurations.

``AuthConfig`` is a closed union of two strategies:

- ``ApiKeyAuth``: static key and secret, every request is HMAC-signed.
- ``OAuthAuth``: bearer token with a refresh token. The client keeps a
  single instance for its whole lifetime and updates the tokens on it in
  place when they are refreshed, so callers holding the same object see
  the rotated tokens.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OAuthTokens:
    """Token endpoint response passed to the refresh callback."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int | None = None
    scope: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OAuthTokens":
        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            token_type=data.get("token_type", "bearer"),
            expires_in=data.get("expires_in"),
            scope=data.get("scope"),
        )


RefreshCallback = Callable[[OAuthTokens], Awaitable[None] | None]


@dataclass(frozen=True)
class ApiKeyAuth:
    api_key: str
    api_secret: str = field(repr=False)


@dataclass
class OAuthAuth:
    client_id: str
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)
    access_token: str | None = field(default=None, repr=False)
    refresh_callback: RefreshCallback | None = None


AuthConfig = ApiKeyAuth | OAuthAuth
