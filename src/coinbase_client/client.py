"""Coinbase API client."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from coinbase_client.auth.authenticator import Authenticator
from coinbase_client.auth.credentials import CredentialResolver
from coinbase_client.auth.strategies import AuthConfig, OAuthTokens
from coinbase_client.dispatch import RequestDispatcher
from coinbase_client.endpoints import (
    DATA_ENDPOINTS,
    OAUTH_TOKEN_ENDPOINT,
    WALLET_ENDPOINTS,
    Endpoint,
    EndpointNamespace,
)
from coinbase_client.resolver import HttpMethod, RequestSpec
from coinbase_client.transport.http import API_URL, Transport

logger = logging.getLogger(__name__)


class CoinbaseClient:
    """Async client for the Coinbase v2 API.

    Endpoints are grouped in two namespaces:

    - ``wallet``: authenticated user, account, transaction, buy and sell endpoints
    - ``data``: public currencies, exchange rates, prices and server time

    Args:
        auth: ``ApiKeyAuth`` or ``OAuthAuth``. Optional when only the
            ``data`` endpoints are used.
        base_url: API origin.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        timeout: httpx timeout; None (default) waits indefinitely.

    Example:
        ```python
        from coinbase_client import ApiKeyAuth, CoinbaseClient

        async with CoinbaseClient(ApiKeyAuth(api_key="...", api_secret="...")) as client:
            accounts = await client.wallet.list_accounts(limit=10)
            async for page in accounts.pages():
                for account in page:
                    print(account["balance"])

            price = await client.data.get_spot_price(currency_pair="BTC-USD")
        ```
    """

    def __init__(
        self,
        auth: AuthConfig | None = None,
        *,
        base_url: str = API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self.transport = Transport(base_url, transport=transport, timeout=timeout)
        self.authenticator = Authenticator(auth, self.transport)
        self.dispatcher = RequestDispatcher(self.transport, self.authenticator)
        self.wallet = EndpointNamespace(self, WALLET_ENDPOINTS)
        self.data = EndpointNamespace(self, DATA_ENDPOINTS)

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        **kwargs: Any,
    ) -> "CoinbaseClient":
        """Build a client from ``COINBASE_*`` environment variables and .env files.

        Explicit keyword arguments take precedence over the environment.
        """
        resolver = resolver or CredentialResolver()
        kwargs.setdefault("base_url", resolver.base_url())
        return cls(resolver.auth_config(), **kwargs)

    @property
    def auth(self) -> AuthConfig | None:
        return self.authenticator.auth

    async def __aenter__(self):
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        args: Mapping[str, Any] | None = None,
        auth: bool = True,
    ) -> Any:
        """Send a request for any path template, including ones not in the endpoint table."""
        return await self.dispatcher.request(RequestSpec(method, path, args), auth=auth)

    async def call(self, endpoint: Endpoint, args: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        """Send one endpoint from the table.

        Arguments may be passed as a mapping, as keyword arguments, or both;
        keyword arguments win on conflicts.
        """
        merged = {**args, **kwargs} if args else kwargs
        return await self.request(endpoint.method, endpoint.path, merged or None, auth=endpoint.auth)

    async def get_oauth_access_token(self, args: Mapping[str, Any] | None = None, /, **kwargs: Any) -> OAuthTokens:
        """Exchange an authorization code or refresh token for new tokens.

        Example:
            ```python
            tokens = await client.get_oauth_access_token(
                grant_type="authorization_code",
                code=code,
                client_id=client_id,
                client_secret=client_secret,
                redirect_uri=redirect_uri,
            )
            ```
        """
        response = await self.call(OAUTH_TOKEN_ENDPOINT, args, **kwargs)
        return OAuthTokens.from_dict(response)
