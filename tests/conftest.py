"""Shared fixtures for the token arbitrage tests."""

import pytest

from sample_data import make_quote


@pytest.fixture
def btc_quotes():
    """Binance / Uniswap / Kraken example, Kraken has no USD price."""
    return [
        make_quote("Binance", "USDT", 60000.0, logo="https://logo/binance.png"),
        make_quote("Uniswap V3", "WETH", 60200.0),
        make_quote("Kraken", "USD", None),
    ]
