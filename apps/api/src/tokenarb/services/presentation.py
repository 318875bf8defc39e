import pandas as pd
from typing import Iterable, Optional
from ..schemas.coin import CoinSearchResult, PricePoint
from ..schemas.opportunity import ArbitrageOpportunity
from ..schemas.ticker import TickerQuote
from .arbitrage import leg_role
from .exchange_classifier import display_name, venue_type

def format_usd(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if abs(value) >= 1:
        return f"${value:,.2f}"
    s = f"{value:.8f}".rstrip("0").rstrip(".")
    return f"${s}" if s not in ("0", "-0") else "$0"

def format_percent(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:+.2f}%"

def coins_frame(coins: Iterable[CoinSearchResult]) -> pd.DataFrame:
    rows = [{"name": c.name, "symbol": c.symbol.upper(), "rank": c.market_cap_rank} for c in coins]
    return pd.DataFrame(rows, columns=["name", "symbol", "rank"])

def tickers_frame(quotes: Iterable[TickerQuote], opportunity: Optional[ArbitrageOpportunity]) -> pd.DataFrame:
    rows = []
    for q in quotes:
        rows.append({
            "exchange": display_name(q.exchange_name),
            "venue": venue_type(q.exchange_name),
            "pair": q.pair_label,
            "price_usd": q.price_usd,
            "role": leg_role(q, opportunity) or "",
        })
    return pd.DataFrame(rows, columns=["exchange", "venue", "pair", "price_usd", "role"])

def price_frame(points: Iterable[PricePoint]) -> pd.DataFrame:
    df = pd.DataFrame([{"ts": p.ts, "price": p.price} for p in points], columns=["ts", "price"])
    return df.set_index("ts")
