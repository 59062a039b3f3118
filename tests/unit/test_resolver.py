"""Tests for path template and argument resolution."""

import pytest

from coinbase_client.errors.exceptions import MissingPathArgument
from coinbase_client.resolver import (
    RequestSpec,
    ResolvedRequest,
    build_query_string,
    resolve_request,
    serialize_body,
)


class TestPathSubstitution:
    """Test ``:name`` placeholder substitution."""

    @pytest.mark.unit
    def test_no_args_leaves_path_untouched(self):
        resolved = resolve_request(RequestSpec("GET", "/v2/user"))

        assert resolved == ResolvedRequest("GET", "/v2/user")

    @pytest.mark.unit
    def test_substitutes_every_placeholder(self):
        spec = RequestSpec(
            "GET",
            "/v2/accounts/:account_id/transactions/:transaction_id",
            {"account_id": "acc-1", "transaction_id": "tx-2"},
        )

        resolved = resolve_request(spec)

        assert resolved.path == "/v2/accounts/acc-1/transactions/tx-2"
        assert resolved.body is None

    @pytest.mark.unit
    def test_missing_placeholder_raises(self):
        spec = RequestSpec("GET", "/v2/accounts/:account_id/sells/:sell_id", {"account_id": "acc-1"})

        with pytest.raises(MissingPathArgument) as exc_info:
            resolve_request(spec)

        assert exc_info.value.name == "sell_id"

    @pytest.mark.unit
    def test_placeholder_with_none_value_raises(self):
        spec = RequestSpec("GET", "/v2/accounts/:account_id", {"account_id": None})

        with pytest.raises(MissingPathArgument):
            resolve_request(spec)

    @pytest.mark.unit
    def test_placeholder_without_any_args_raises(self):
        with pytest.raises(MissingPathArgument) as exc_info:
            resolve_request(RequestSpec("GET", "/v2/accounts/:account_id"))

        assert exc_info.value.name == "account_id"

    @pytest.mark.unit
    def test_path_values_are_percent_encoded(self):
        spec = RequestSpec("GET", "/v2/accounts/:account_id", {"account_id": "a/b c"})

        assert resolve_request(spec).path == "/v2/accounts/a%2Fb%20c"

    @pytest.mark.unit
    def test_caller_args_are_not_mutated(self):
        args = {"account_id": "acc-1", "limit": 5}

        resolve_request(RequestSpec("GET", "/v2/accounts/:account_id/buys", args))

        assert args == {"account_id": "acc-1", "limit": 5}


class TestQueryString:
    """Test residual GET arguments."""

    @pytest.mark.unit
    def test_residual_args_become_query_in_insertion_order(self):
        spec = RequestSpec(
            "GET",
            "/v2/accounts/:account_id/transactions",
            {"limit": 10, "account_id": "acc-1", "order": "asc", "starting_after": "tx-9"},
        )

        resolved = resolve_request(spec)

        assert resolved.path == "/v2/accounts/acc-1/transactions?limit=10&order=asc&starting_after=tx-9"
        assert resolved.body is None

    @pytest.mark.unit
    def test_consumed_placeholder_not_in_query(self):
        spec = RequestSpec("GET", "/v2/prices/:currency_pair/spot", {"currency_pair": "BTC-USD", "date": "2024-01-01"})

        resolved = resolve_request(spec)

        assert resolved.path == "/v2/prices/BTC-USD/spot?date=2024-01-01"
        assert "currency_pair" not in resolved.path

    @pytest.mark.unit
    def test_none_values_are_skipped(self):
        spec = RequestSpec("GET", "/v2/accounts", {"limit": 10, "order": None, "starting_after": "x"})

        assert resolve_request(spec).path == "/v2/accounts?limit=10&starting_after=x"

    @pytest.mark.unit
    def test_trailing_none_leaves_no_dangling_separator(self):
        spec = RequestSpec("GET", "/v2/accounts", {"limit": 10, "order": None})

        assert resolve_request(spec).path == "/v2/accounts?limit=10"

    @pytest.mark.unit
    def test_all_none_values_produce_no_query(self):
        spec = RequestSpec("GET", "/v2/exchange-rates", {"currency": None})

        assert resolve_request(spec).path == "/v2/exchange-rates"

    @pytest.mark.unit
    def test_build_query_string_formats_values(self):
        query = build_query_string({"commit": False, "quote": True, "amount": 1.5, "memo": "a&b"})

        assert query == "?commit=false&quote=true&amount=1.5&memo=a%26b"

    @pytest.mark.unit
    def test_build_query_string_empty(self):
        assert build_query_string({}) == ""


class TestBody:
    """Test residual arguments for write verbs."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    def test_residual_args_become_body(self, method):
        spec = RequestSpec(method, "/v2/accounts/:account_id", {"account_id": "acc-1", "name": "Savings"})

        resolved = resolve_request(spec)

        assert resolved.path == "/v2/accounts/acc-1"
        assert resolved.body == {"name": "Savings"}

    @pytest.mark.unit
    def test_body_keeps_none_values(self):
        spec = RequestSpec("POST", "/v2/accounts/:account_id/buys", {"account_id": "a", "amount": "1", "total": None})

        assert resolve_request(spec).body == {"amount": "1", "total": None}

    @pytest.mark.unit
    def test_no_residual_args_means_no_body(self):
        spec = RequestSpec("POST", "/v2/accounts/:account_id/buys", {"account_id": "acc-1"})

        resolved = resolve_request(spec)

        assert resolved.body is None
        assert resolved.path == "/v2/accounts/acc-1/buys"


class TestSerializeBody:
    """Test wire serialization of request bodies."""

    @pytest.mark.unit
    def test_none_is_empty_string(self):
        assert serialize_body(None) == ""

    @pytest.mark.unit
    def test_compact_json(self):
        assert serialize_body({"amount": "10", "currency": "BTC"}) == '{"amount":"10","currency":"BTC"}'
