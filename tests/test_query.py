# -*- coding: utf-8 -*-
"""
Tests for query string encoding and history search parameters.
"""

import pytest
from decimal import Decimal

from bpx_client.models.enums import FillType, MarketType, Side, SortDirection
from bpx_client.models.history import FillHistorySearchParams, OrderHistorySearchParams
from bpx_client.models.strategies import StrategyHistorySearchParams
from bpx_client.query import encode_query, render_value


class TestEncodeQuery:
    """Test the pair encoder."""

    def test_empty(self):
        assert encode_query([]) == ""

    def test_all_unset(self):
        assert encode_query([("symbol", None), ("limit", None)]) == ""

    def test_declared_order_kept(self):
        """Pairs appear in caller order, not sorted."""
        query = encode_query([("symbol", "SOL_USDC"), ("interval", "1h"), ("endTime", 10), ("a", 1)])
        assert query == "?symbol=SOL_USDC&interval=1h&endTime=10&a=1"

    def test_none_pairs_skipped_in_middle(self):
        assert encode_query([("a", 1), ("b", None), ("c", 3)]) == "?a=1&c=3"


class TestRenderValue:
    """Test canonical value rendering."""

    def test_booleans_lowercase(self):
        assert render_value(True) == "true"
        assert render_value(False) == "false"

    def test_enum_wire_string(self):
        assert render_value(Side.ASK) == "Ask"

    def test_decimal_positional(self):
        assert render_value(Decimal("0.00001000")) == "0.00001000"
        assert render_value(Decimal("1E+2")) == "100"

    def test_string_escaped(self):
        assert render_value("a b&c") == "a%20b%26c"
        assert render_value("BTC_USDC") == "BTC_USDC"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            render_value(1.5)


class TestFillHistorySearchParams:
    """Test fill history filters."""

    def test_defaults_emit_nothing(self):
        assert FillHistorySearchParams().to_query() == ""

    def test_symbol_and_limit_only(self):
        params = FillHistorySearchParams(symbol="SOL_USDC", limit=50)
        assert params.to_query() == "?symbol=SOL_USDC&limit=50"

    def test_full_field_order(self):
        params = FillHistorySearchParams(
            sort_direction=SortDirection.ASC,
            market_type=MarketType.PERP,
            fill_type=FillType.USER,
            offset=20,
            limit=10,
            symbol="SOL_USDC_PERP",
            to=1747296000000,
            from_=1747290000000,
            strategy_id="s-1",
            order_id="o-1",
        )
        assert params.to_query() == (
            "?order_id=o-1&strategy_id=s-1&from=1747290000000&to=1747296000000"
            "&symbol=SOL_USDC_PERP&limit=10&offset=20&fill_type=User"
            "&market_type=PERP&sort_direction=Asc"
        )

    def test_explicit_zero_offset_is_emitted(self):
        """A caller-set value equal to the default is still sent."""
        params = FillHistorySearchParams(offset=0)
        assert params.to_query() == "?offset=0"

    def test_effective_defaults(self):
        params = FillHistorySearchParams()
        assert params.limit is None
        assert params.effective_limit == 100
        assert params.effective_offset == 0

    def test_from_dict_applies_defaults(self):
        params = FillHistorySearchParams.from_dict({"symbol": "SOL_USDC", "from": 5})
        assert params.symbol == "SOL_USDC"
        assert params.from_ == 5
        assert params.limit == 100
        assert params.offset == 0

    def test_from_dict_decodes_enums(self):
        params = FillHistorySearchParams.from_dict({"fill_type": "Liquidation", "limit": 25})
        assert params.fill_type is FillType.LIQUIDATION
        assert params.limit == 25


class TestOtherSearchParams:
    """Test order and strategy history filters."""

    def test_order_history_order(self):
        params = OrderHistorySearchParams(
            sort_direction=SortDirection.DESC, symbol="BTC_USDC", order_id="42"
        )
        assert params.to_query() == "?order_id=42&symbol=BTC_USDC&sort_direction=Desc"

    def test_strategy_history_order(self):
        params = StrategyHistorySearchParams(market_type=MarketType.SPOT, strategy_id="7", limit=5)
        assert params.to_query() == "?strategy_id=7&limit=5&market_type=SPOT"
