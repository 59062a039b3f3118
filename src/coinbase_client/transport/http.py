"""Single-shot HTTP transport for the Coinbase API.

The transport owns one ``httpx.AsyncClient`` and performs exactly one HTTP
call per ``request()``. It knows nothing about authentication or the
response envelope: it sends the headers it is given and returns decoded
JSON, or raises a ``TransportError`` subclass for non-2xx results.

Example:
    ```python
    from coinbase_client.transport import Transport

    async with Transport() as transport:
        payload = await transport.request("GET", "/v2/time")
    ```

A custom ``httpx`` transport can be injected, which is how tests route
requests to ``httpx.MockTransport``:

    ```python
    transport = Transport(transport=httpx.MockTransport(handler))
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from coinbase_client.errors.exceptions import UnexpectedOrigin
from coinbase_client.errors.handler import raise_for_status
from coinbase_client.resolver import serialize_body

logger = logging.getLogger(__name__)

API_URL = "https://api.coinbase.com"


class Transport:
    """Issue raw HTTP calls against the API base URL.

    Args:
        base_url: Origin every path is appended to.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        timeout: httpx timeout. ``None`` (default) disables timeouts; callers
            that need one pass a float or ``httpx.Timeout``.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=timeout)

    async def __aenter__(self):
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._client.aclose()

    def relative(self, uri: str) -> str:
        """Reduce a server-supplied URI to a path under the base URL.

        Relative URIs are returned unchanged. Absolute URIs keep their path
        and query only when scheme, host and port match the base URL.

        Raises:
            UnexpectedOrigin: If the URI points anywhere else, so that
                authentication headers never leave the API origin.
        """
        url = httpx.URL(uri)
        if not url.scheme and not url.host:
            return uri

        base = httpx.URL(self.base_url)
        if url.scheme != base.scheme or url.netloc != base.netloc:
            raise UnexpectedOrigin(uri, self.base_url)

        prefix = base.raw_path.decode("ascii").rstrip("/")
        path = url.raw_path.decode("ascii")
        if prefix and path != prefix and not path.startswith(prefix + "/") and not path.startswith(prefix + "?"):
            raise UnexpectedOrigin(uri, self.base_url)
        return path[len(prefix) :] or "/"

    async def request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Perform one HTTP call and decode the JSON response.

        Args:
            method: HTTP verb.
            path: Resolved path (query string included), relative to the base URL.
            body: Optional JSON body.
            headers: Extra headers, typically authentication headers.

        Returns:
            Decoded JSON, or None for an empty response body.

        Raises:
            TransportError: For any non-2xx response.
        """
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        content = serialize_body(body) if body is not None else None

        logger.debug(f"{method} {self.base_url}{path}")
        response = await self._client.request(method, path, content=content, headers=request_headers)

        raise_for_status(response)

        if not response.content:
            return None
        return response.json()
