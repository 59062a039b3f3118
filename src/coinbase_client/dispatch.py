"""Request dispatch: resolve, authenticate, send, unwrap.

Every endpoint call goes through ``RequestDispatcher.request``. Responses
are unwrapped from the Coinbase envelope:

- ``{"data": [...], "pagination": {...}}`` becomes a ``PaginatedResult``
- ``{"data": ...}`` becomes the bare ``data`` value
- anything else is returned unchanged
"""

import logging
from typing import Any

from coinbase_client.auth.authenticator import Authenticator
from coinbase_client.errors.exceptions import MissingPagination
from coinbase_client.pagination import PaginatedResult, Pagination
from coinbase_client.resolver import RequestSpec, ResolvedRequest, resolve_request
from coinbase_client.transport.http import Transport

logger = logging.getLogger(__name__)


class RequestDispatcher:
    def __init__(self, transport: Transport, authenticator: Authenticator) -> None:
        self.transport = transport
        self.authenticator = authenticator

    async def _send(self, request: ResolvedRequest, auth: bool) -> Any:
        logger.debug(f"Dispatching {request.method} {request.path} (auth={auth})")
        if auth:
            return await self.authenticator.dispatch(request)
        return await self.transport.request(request.method, request.path, request.body)

    async def request(self, spec: RequestSpec, auth: bool = True) -> Any:
        """Send ``spec`` and unwrap the response envelope.

        Args:
            spec: Request to send.
            auth: Whether to authenticate the request.

        Returns:
            A ``PaginatedResult`` for list responses, the ``data`` payload
            for other enveloped responses, or the raw response otherwise.

        Raises:
            MissingPathArgument: From path resolution.
            AuthError: From the authenticator on misconfiguration.
            TransportError: For non-2xx responses.
        """
        response = await self._send(resolve_request(spec), auth)

        if not isinstance(response, dict) or "data" not in response:
            return response

        data = response["data"]
        pagination = response.get("pagination")
        if pagination is not None and isinstance(data, list):
            return PaginatedResult(data, Pagination.from_dict(pagination), self, auth)
        return data

    async def fetch_page(self, uri: str, auth: bool = True) -> PaginatedResult:
        """GET a server-supplied page URI and wrap the result.

        The URI is used as-is, without template substitution. A single
        record is wrapped in a one-element list.

        Raises:
            UnexpectedOrigin: If ``uri`` is absolute and not under the base URL.
            MissingPagination: If the response has no ``pagination`` object.
        """
        request = ResolvedRequest("GET", self.transport.relative(uri))
        response = await self._send(request, auth)

        pagination = response.get("pagination") if isinstance(response, dict) else None
        if pagination is None:
            raise MissingPagination(uri)

        data = response.get("data")
        if not isinstance(data, list):
            data = [data]

        return PaginatedResult(data, Pagination.from_dict(pagination), self, auth)
