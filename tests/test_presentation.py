"""Tests for dashboard table shaping and number formatting."""

from datetime import datetime, timezone

from tokenarb.schemas.coin import CoinSearchResult, PricePoint
from tokenarb.services.arbitrage import find_best_opportunity
from tokenarb.services.presentation import (
    coins_frame, format_percent, format_usd, price_frame, tickers_frame,
)

from sample_data import ADDRESS, make_quote


class TestFormatting:
    """Price and percent strings."""

    def test_usd(self):
        assert format_usd(60000) == "$60,000.00"
        assert format_usd(1.5) == "$1.50"
        assert format_usd(0.000123) == "$0.000123"
        assert format_usd(0.5) == "$0.5"
        assert format_usd(0) == "$0"
        assert format_usd(None) == "-"

    def test_percent(self):
        assert format_percent(0.3333) == "+0.33%"
        assert format_percent(-1.5) == "-1.50%"
        assert format_percent(None) == "-"


class TestFrames:
    """DataFrames fed to the dashboard."""

    def test_tickers_frame(self):
        quotes = [
            make_quote("Binance", "USDT", 100.0),
            make_quote(f"Uniswap (V3) Pool {ADDRESS}", "WETH", 101.0),
            make_quote("Kraken", "USD", None),
        ]
        df = tickers_frame(quotes, find_best_opportunity(quotes))
        assert list(df.columns) == ["exchange", "venue", "pair", "price_usd", "role"]
        assert list(df["exchange"]) == ["Binance", "Uniswap", "Kraken"]
        assert list(df["venue"]) == ["CEX", "DEX", "CEX"]
        assert list(df["role"]) == ["buy", "sell", ""]

    def test_tickers_frame_without_opportunity(self):
        quotes = [make_quote("Binance", "USDT", 100.0)]
        df = tickers_frame(quotes, None)
        assert list(df["role"]) == [""]

    def test_empty_tickers_frame(self):
        df = tickers_frame([], None)
        assert df.empty
        assert "role" in df.columns

    def test_coins_frame(self):
        df = coins_frame([CoinSearchResult(id="ethereum", name="Ethereum", symbol="eth", market_cap_rank=2)])
        assert df.iloc[0].to_dict() == {"name": "Ethereum", "symbol": "ETH", "rank": 2}

    def test_price_frame(self):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        df = price_frame([PricePoint(ts=ts, price=42.0)])
        assert df.index.name == "ts"
        assert df.loc[ts, "price"] == 42.0
