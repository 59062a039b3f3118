"""Path template and argument resolution.

Endpoints are declared with path templates such as
``/v2/accounts/:account_id/transactions``. Resolution substitutes each
``:name`` segment from the request arguments and places whatever is left
over either in the query string (GET) or in the JSON body (POST, PUT,
DELETE).

Example:
    ```python
    from coinbase_client.resolver import RequestSpec, resolve_request

    resolved = resolve_request(
        RequestSpec("GET", "/v2/accounts/:account_id/transactions", {"account_id": "abc", "limit": 10})
    )
    assert resolved.path == "/v2/accounts/abc/transactions?limit=10"
    assert resolved.body is None
    ```
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import quote

from coinbase_client.errors.exceptions import MissingPathArgument

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class RequestSpec:
    """An unresolved request: verb, path template and arguments."""

    method: HttpMethod
    path: str
    args: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResolvedRequest:
    """A request ready for the wire: concrete path and optional JSON body."""

    method: HttpMethod
    path: str
    body: dict[str, Any] | None = None


def _format_value(value: Any) -> str:
    # Match the JSON spelling of booleans rather than Python's
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode(value: Any) -> str:
    return quote(_format_value(value), safe="")


def build_query_string(args: Mapping[str, Any]) -> str:
    """Build ``?k=v&k=v`` from a mapping, skipping ``None`` values.

    Keys keep the mapping's iteration order. Returns an empty string when
    nothing is left to encode.
    """
    pairs = [f"{key}={_encode(value)}" for key, value in args.items() if value is not None]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def serialize_body(body: Mapping[str, Any] | None) -> str:
    """Serialize a request body to the compact JSON text sent on the wire.

    The same text is used for request signing, so it must be stable for a
    given mapping. A missing body serializes to an empty string.
    """
    if body is None:
        return ""
    return json.dumps(body, separators=(",", ":"))


def resolve_request(spec: RequestSpec) -> ResolvedRequest:
    """Resolve a path template and place residual arguments.

    Args:
        spec: The request to resolve. ``spec.args`` is never mutated.

    Returns:
        The resolved request.

    Raises:
        MissingPathArgument: If a ``:name`` placeholder has no argument, or
            the argument is ``None``.
    """
    args = dict(spec.args or {})
    parts = spec.path.split("/")

    for index, part in enumerate(parts):
        if not part.startswith(":"):
            continue
        name = part[1:]
        if args.get(name) is None:
            raise MissingPathArgument(name)
        parts[index] = _encode(args.pop(name))

    path = "/".join(parts)

    if not args:
        return ResolvedRequest(method=spec.method, path=path)

    if spec.method == "GET":
        return ResolvedRequest(method=spec.method, path=path + build_query_string(args))

    return ResolvedRequest(method=spec.method, path=path, body=args)
