"""Per-request authentication.

The ``Authenticator`` turns a resolved request into an authenticated
transport call for whichever ``AuthConfig`` the client was built with:

- ``ApiKeyAuth``: fetch the server time, sign
  ``timestamp + method + path + body`` with HMAC-SHA256 and send the
  ``CB-ACCESS-*`` headers. Stateless, no retries.
- ``OAuthAuth``: send ``Authorization: Bearer <access_token>``. If the
  server answers 401, refresh the tokens once with the refresh token,
  store them on the shared ``OAuthAuth`` record, notify the refresh
  callback and retry the original request once. A failing refresh or a
  failing retry propagates to the caller.

Refreshes are serialized per authenticator. A task that hits 401 after
another task already rotated the token reuses the new token instead of
refreshing again, so concurrent 401s cost at most one refresh.
"""

import asyncio
import inspect
import logging
from typing import Any

from coinbase_client.auth.exceptions import MissingAuthConfig, UnrecognizedAuthStrategy
from coinbase_client.auth.signing import api_key_headers, sign_request
from coinbase_client.auth.strategies import ApiKeyAuth, AuthConfig, OAuthAuth, OAuthTokens
from coinbase_client.errors.exceptions import TransportError
from coinbase_client.resolver import ResolvedRequest, serialize_body
from coinbase_client.transport.http import Transport

logger = logging.getLogger(__name__)

TIME_PATH = "/v2/time"
TOKEN_PATH = "/oauth/token"


class Authenticator:
    def __init__(self, auth: AuthConfig | None, transport: Transport) -> None:
        self.auth = auth
        self._transport = transport
        self._refresh_lock = asyncio.Lock()

    async def dispatch(self, request: ResolvedRequest) -> Any:
        """Send ``request`` with the headers of the configured strategy.

        Raises:
            MissingAuthConfig: If the client has no auth configuration.
            UnrecognizedAuthStrategy: If the configuration is of an unknown type.
            TransportError: Propagated from the transport.
        """
        auth = self.auth
        if auth is None:
            raise MissingAuthConfig()
        if isinstance(auth, ApiKeyAuth):
            return await self._api_key_request(request, auth)
        if isinstance(auth, OAuthAuth):
            return await self._oauth_request(request, auth)
        raise UnrecognizedAuthStrategy(auth)

    async def server_time(self) -> str:
        """Return the API server's epoch time as the string used in signatures."""
        response = await self._transport.request("GET", TIME_PATH)
        return str(response["data"]["epoch"])

    async def _api_key_request(self, request: ResolvedRequest, auth: ApiKeyAuth) -> Any:
        timestamp = await self.server_time()
        signature = sign_request(
            auth.api_secret,
            timestamp,
            request.method,
            request.path,
            serialize_body(request.body),
        )
        headers = api_key_headers(auth.api_key, signature, timestamp)
        return await self._transport.request(request.method, request.path, request.body, headers)

    async def _oauth_request(self, request: ResolvedRequest, auth: OAuthAuth) -> Any:
        refreshed = False
        if auth.access_token is None:
            await self._refresh(auth, failed_token=None)
            refreshed = True

        token = auth.access_token
        try:
            return await self._send_bearer(request, token)
        except TransportError as e:
            # A token fresh from this call gets no second refresh
            if e.status_code != 401 or refreshed:
                raise
            logger.warning(f"Access token rejected for {request.method} {request.path}, refreshing")

        await self._refresh(auth, failed_token=token)
        return await self._send_bearer(request, auth.access_token)

    async def _send_bearer(self, request: ResolvedRequest, token: str | None) -> Any:
        headers = {"Authorization": f"Bearer {token}"}
        return await self._transport.request(request.method, request.path, request.body, headers)

    async def _refresh(self, auth: OAuthAuth, failed_token: str | None) -> None:
        async with self._refresh_lock:
            # Another task rotated the token while we waited
            if auth.access_token is not None and auth.access_token != failed_token:
                logger.debug("Access token already refreshed by a concurrent request")
                return

            response = await self._transport.request(
                "POST",
                TOKEN_PATH,
                {
                    "grant_type": "refresh_token",
                    "refresh_token": auth.refresh_token,
                    "client_id": auth.client_id,
                    "client_secret": auth.client_secret,
                },
            )
            tokens = OAuthTokens.from_dict(response)
            auth.access_token = tokens.access_token
            auth.refresh_token = tokens.refresh_token
            logger.info("Refreshed OAuth access token")

            if auth.refresh_callback is not None:
                result = auth.refresh_callback(tokens)
                if inspect.isawaitable(result):
                    await result
