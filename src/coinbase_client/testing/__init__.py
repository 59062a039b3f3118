"""Testing utilities for code built on the Coinbase client.

``RecordingHandler`` plugs into ``httpx.MockTransport``: it serves queued
responses (or routes by path) and records every request it receives.

Example:
    ```python
    import httpx
    from coinbase_client import CoinbaseClient
    from coinbase_client.testing import RecordingHandler, success_envelope

    handler = RecordingHandler()
    handler.add("/v2/currencies", success_envelope([{"id": "USD"}]))

    client = CoinbaseClient(transport=httpx.MockTransport(handler))
    currencies = await client.data.get_currencies()
    assert handler.paths == ["/v2/currencies"]
    ```
"""

import json
from collections import defaultdict, deque
from typing import Any

import httpx


def success_envelope(data: Any, pagination: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a ``{"data": ..., "pagination": ...}`` response body."""
    body: dict[str, Any] = {"data": data}
    if pagination is not None:
        body["pagination"] = pagination
    return body


def pagination_cursor(
    next_uri: str | None = None,
    previous_uri: str | None = None,
    *,
    order: str = "desc",
    limit: int = 25,
    starting_after: str | None = None,
    ending_before: str | None = None,
) -> dict[str, Any]:
    return {
        "ending_before": ending_before,
        "starting_after": starting_after,
        "limit": limit,
        "order": order,
        "previous_uri": previous_uri,
        "next_uri": next_uri,
    }


def error_envelope(*messages: str, error_id: str = "error") -> dict[str, Any]:
    """Build an ``{"errors": [...]}`` response body."""
    return {"errors": [{"id": error_id, "message": message} for message in messages]}


class RecordingHandler:
    """Serve canned responses by path and record incoming requests.

    Responses registered for the same path are served in order; the last
    one is repeated once the queue is down to a single entry. Unknown
    paths answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, deque[tuple[int, Any]]] = defaultdict(deque)

    def add(self, path: str, json_body: Any = None, status_code: int = 200) -> "RecordingHandler":
        self._routes[path].append((status_code, json_body))
        return self

    @property
    def paths(self) -> list[str]:
        """Requested paths, query strings included, in arrival order."""
        return [request.url.raw_path.decode() for request in self.requests]

    def bodies(self) -> list[Any]:
        """Decoded JSON bodies of recorded requests (None when empty)."""
        return [json.loads(request.content) if request.content else None for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get(request.url.path)
        if not queue:
            return httpx.Response(404, json=error_envelope("Not found", error_id="not_found"))
        status_code, json_body = queue.popleft() if len(queue) > 1 else queue[0]
        return httpx.Response(status_code, json=json_body)
