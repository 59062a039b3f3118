"""Static endpoint table.

Each endpoint is plain data: verb, path template and whether it needs
authentication. ``EndpointNamespace`` exposes a group of endpoints as
attributes so that ``client.wallet.list_accounts(limit=10)`` looks up
``WALLET_ENDPOINTS["list_accounts"]`` and sends it through the client's
generic ``call``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from coinbase_client.resolver import HttpMethod

if TYPE_CHECKING:
    from coinbase_client.client import CoinbaseClient


@dataclass(frozen=True)
class Endpoint:
    method: HttpMethod
    path: str
    auth: bool = True


WALLET_ENDPOINTS: dict[str, Endpoint] = {
    "show_current_user": Endpoint("GET", "/v2/user"),
    "list_accounts": Endpoint("GET", "/v2/accounts"),
    "show_account": Endpoint("GET", "/v2/accounts/:account_id"),
    "update_account": Endpoint("PUT", "/v2/accounts/:account_id"),
    "list_transactions": Endpoint("GET", "/v2/accounts/:account_id/transactions"),
    "show_transaction": Endpoint("GET", "/v2/accounts/:account_id/transactions/:transaction_id"),
    "list_sells": Endpoint("GET", "/v2/accounts/:account_id/sells"),
    "show_sell": Endpoint("GET", "/v2/accounts/:account_id/sells/:sell_id"),
    "place_sell_order": Endpoint("POST", "/v2/accounts/:account_id/sells"),
    "list_buys": Endpoint("GET", "/v2/accounts/:account_id/buys"),
    "show_buy": Endpoint("GET", "/v2/accounts/:account_id/buys/:buy_id"),
    "place_buy_order": Endpoint("POST", "/v2/accounts/:account_id/buys"),
}

# Public market data, no authentication required
DATA_ENDPOINTS: dict[str, Endpoint] = {
    "get_currencies": Endpoint("GET", "/v2/currencies", auth=False),
    "get_exchange_rates": Endpoint("GET", "/v2/exchange-rates", auth=False),
    "get_time": Endpoint("GET", "/v2/time", auth=False),
    "get_buy_price": Endpoint("GET", "/v2/prices/:currency_pair/buy", auth=False),
    "get_sell_price": Endpoint("GET", "/v2/prices/:currency_pair/sell", auth=False),
    "get_spot_price": Endpoint("GET", "/v2/prices/:currency_pair/spot", auth=False),
}

OAUTH_TOKEN_ENDPOINT = Endpoint("POST", "/oauth/token", auth=False)


class BoundEndpoint:
    """An endpoint paired with the client that sends it."""

    def __init__(self, client: "CoinbaseClient", name: str, endpoint: Endpoint) -> None:
        self._client = client
        self.name = name
        self.endpoint = endpoint

    def __repr__(self) -> str:
        return f"<BoundEndpoint {self.name}: {self.endpoint.method} {self.endpoint.path}>"

    async def __call__(self, args: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        return await self._client.call(self.endpoint, args, **kwargs)


class EndpointNamespace:
    """Attribute access over one endpoint table."""

    def __init__(self, client: "CoinbaseClient", endpoints: Mapping[str, Endpoint]) -> None:
        self._client = client
        self._endpoints = endpoints

    def __getattr__(self, name: str) -> BoundEndpoint:
        try:
            endpoint = self._endpoints[name]
        except KeyError:
            raise AttributeError(f"Unknown endpoint: {name}") from None
        return BoundEndpoint(self._client, name, endpoint)

    def __dir__(self) -> list[str]:
        return sorted(self._endpoints)
