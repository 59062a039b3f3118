"""Authentication components for the Coinbase client.

This module provides:
- ``ApiKeyAuth`` / ``OAuthAuth`` configurations
- HMAC request signing for API keys
- The ``Authenticator`` that attaches headers and refreshes OAuth tokens
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from coinbase_client.auth import OAuthAuth

    auth = OAuthAuth(
        client_id="...",
        client_secret="...",
        refresh_token="...",
        refresh_callback=save_tokens,
    )
    ```
"""

from coinbase_client.auth.authenticator import Authenticator
from coinbase_client.auth.credentials import CredentialResolver, resolve_auth_config
from coinbase_client.auth.exceptions import (
    AuthError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    MissingAuthConfig,
    UnrecognizedAuthStrategy,
)
from coinbase_client.auth.signing import sign_request
from coinbase_client.auth.strategies import ApiKeyAuth, AuthConfig, OAuthAuth, OAuthTokens

__all__ = [
    "ApiKeyAuth",
    "AuthConfig",
    "AuthError",
    "Authenticator",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "MissingAuthConfig",
    "OAuthAuth",
    "OAuthTokens",
    "UnrecognizedAuthStrategy",
    "resolve_auth_config",
    "sign_request",
]
