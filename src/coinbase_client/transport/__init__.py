"""Transport layer for the Coinbase client.

The transport performs exactly one HTTP call per request against the API
base URL and maps non-2xx responses to ``TransportError`` subclasses. It
never retries.

Example:
    ```python
    from coinbase_client.transport import Transport

    async with Transport(base_url="https://api.coinbase.com") as transport:
        payload = await transport.request("GET", "/v2/currencies")
    ```
"""

from coinbase_client.transport.http import API_URL, Transport

__all__ = ["API_URL", "Transport"]
