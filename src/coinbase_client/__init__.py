"""Coinbase Client Core - async client for the Coinbase v2 REST API.

This library provides:
- Path template resolution with query string / JSON body placement
- API-key (HMAC) and OAuth (auto-refreshing bearer token) authentication
- Cursor pagination over list endpoints
- Structured errors carrying the API's error messages

Example:
    ```python
    from coinbase_client import CoinbaseClient, OAuthAuth

    auth = OAuthAuth(client_id="...", client_secret="...", refresh_token="...")

    async with CoinbaseClient(auth) as client:
        user = await client.wallet.show_current_user()
        page = await client.wallet.list_transactions(account_id="primary")
        if page.has_next():
            page = await page.next_page()
    ```
"""

from coinbase_client.auth import ApiKeyAuth, CredentialResolver, OAuthAuth, OAuthTokens
from coinbase_client.client import CoinbaseClient
from coinbase_client.errors import MissingPagination, MissingPathArgument, TransportError
from coinbase_client.pagination import PaginatedResult, Pagination
from coinbase_client.resolver import RequestSpec

__version__ = "0.1.0"

__all__ = [
    "ApiKeyAuth",
    "CoinbaseClient",
    "CredentialResolver",
    "MissingPagination",
    "MissingPathArgument",
    "OAuthAuth",
    "OAuthTokens",
    "PaginatedResult",
    "Pagination",
    "RequestSpec",
    "TransportError",
    "__version__",
]
