"""Sample tickers and CoinGecko payloads for testing."""

from tokenarb.schemas.ticker import TickerQuote

ADDRESS = "0x" + "1" * 40


def make_quote(exchange, target, price, base="BTC", logo=None):
    return TickerQuote(
        exchange_name=exchange,
        exchange_logo_url=logo,
        base_symbol=base,
        target_symbol=target,
        price_usd=price,
    )


# GET /search?query=bitcoin (trimmed)
SEARCH_PAYLOAD = {
    "coins": [
        {"id": "bitcoin", "name": "Bitcoin", "symbol": "BTC", "market_cap_rank": 1,
         "thumb": "https://assets.coingecko.com/coins/images/1/thumb/bitcoin.png"},
        {"id": "bitcoin-cash", "name": "Bitcoin Cash", "symbol": "BCH", "market_cap_rank": 18,
         "thumb": None},
        {"id": "bitcoin-puppets", "name": "Bitcoin Puppets", "symbol": "PUPS", "market_cap_rank": None},
        {"id": "", "name": "Broken", "symbol": "X", "market_cap_rank": 3},
    ],
    "exchanges": [],
    "nfts": [{"id": "bitcoin-frogs", "name": "Bitcoin Frogs"}],
}

# GET /coins/bitcoin/tickers (trimmed)
TICKERS_PAYLOAD = {
    "name": "Bitcoin",
    "tickers": [
        {"base": "BTC", "target": "USDT",
         "market": {"name": "Binance", "identifier": "binance", "logo": "https://logo/binance.png"},
         "last": 60000.0, "converted_last": {"btc": 1.0, "eth": 20.1, "usd": 60000.0}},
        {"base": "BTC", "target": "WETH",
         "market": {"name": f"Uniswap (V3) Pool {ADDRESS}", "identifier": "uniswap_v3", "logo": ""},
         "last": 20.0, "converted_last": {"usd": 60200.0}},
        {"base": "BTC", "target": "USD",
         "market": {"name": "Kraken", "identifier": "kraken"},
         "last": 60010.0},
        {"base": "BTC", "target": "EUR", "market": {}, "converted_last": {"usd": 59000.0}},
    ],
}

# GET /coins/bitcoin/market_chart?vs_currency=usd&days=1 (trimmed)
CHART_PAYLOAD = {
    "prices": [[1700000000000, 36500.5], [1700003600000, 36610.0], [1700007200000, None]],
    "market_caps": [],
    "total_volumes": [],
}

# GET /coins/bitcoin (trimmed)
COIN_PAYLOAD = {
    "id": "bitcoin",
    "symbol": "btc",
    "name": "Bitcoin",
    "market_cap_rank": 1,
    "image": {"thumb": "t.png", "small": "s.png", "large": "l.png"},
    "links": {"homepage": ["http://www.bitcoin.org", "", ""]},
    "market_data": {"current_price": {"usd": 60100, "eur": 55000}, "price_change_percentage_24h": -1.25},
}
