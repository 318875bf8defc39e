import orjson
import requests
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, List, Optional
from loguru import logger
from ..config import settings
from ..schemas.coin import CoinDetail, CoinSearchResult, PricePoint
from ..schemas.ticker import TickerQuote

class MarketDataError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

@lru_cache(maxsize=1)
def get_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"accept": "application/json"})
    if settings.coingecko_api_key:
        s.headers["x-cg-demo-api-key"] = settings.coingecko_api_key
    return s

def _get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    url = f"{settings.coingecko_base_url.rstrip('/')}/{path.lstrip('/')}"
    try:
        r = get_session().get(url, params=params, timeout=settings.http_timeout_s)
    except requests.RequestException as e:
        logger.warning(f"[coingecko] GET {path} failed: {e}")
        raise MarketDataError(f"Market data request failed: {e}") from e
    if not 200 <= r.status_code < 300:
        logger.warning(f"[coingecko] GET {path} -> {r.status_code}")
        raise MarketDataError(f"Market data request failed. Status: {r.status_code}", r.status_code)
    try:
        return orjson.loads(r.content)
    except orjson.JSONDecodeError as e:
        raise MarketDataError("Market data response was not valid JSON") from e

def _float_or_none(x: Any) -> Optional[float]:
    try:
        return float(x) if x is not None else None
    except (TypeError, ValueError):
        return None

def search_coins(query: str) -> List[CoinSearchResult]:
    q = (query or "").strip()
    if not q:
        raise ValueError("Enter a token name or symbol.")
    data = _get("/search", {"query": q})
    out: List[CoinSearchResult] = []
    # NFTs, categories and unranked listings come back without a market cap rank
    for c in data.get("coins") or []:
        if not c.get("id") or c.get("market_cap_rank") is None:
            continue
        out.append(CoinSearchResult(
            id=c["id"],
            name=c.get("name") or c["id"],
            symbol=c.get("symbol") or "",
            market_cap_rank=c["market_cap_rank"],
            thumb_url=c.get("thumb"),
        ))
    logger.info(f"[coingecko] search '{q}' -> {len(out)} coins")
    return out

def fetch_coin(coin_id: str) -> CoinDetail:
    data = _get(f"/coins/{coin_id}", {
        "localization": "false",
        "tickers": "false",
        "community_data": "false",
        "developer_data": "false",
    })
    md = data.get("market_data") or {}
    image = data.get("image") or {}
    homepages = [h for h in ((data.get("links") or {}).get("homepage") or []) if h]
    return CoinDetail(
        id=data.get("id") or coin_id,
        name=data.get("name") or coin_id,
        symbol=data.get("symbol") or "",
        image_url=image.get("large") or image.get("small") or image.get("thumb"),
        market_cap_rank=data.get("market_cap_rank"),
        current_price_usd=_float_or_none((md.get("current_price") or {}).get("usd")),
        price_change_24h_percent=_float_or_none(md.get("price_change_percentage_24h")),
        homepage_url=homepages[0] if homepages else None,
    )

def fetch_tickers(coin_id: str) -> List[TickerQuote]:
    data = _get(f"/coins/{coin_id}/tickers", {"include_exchange_logo": "true"})
    out: List[TickerQuote] = []
    for t in data.get("tickers") or []:
        market = t.get("market") or {}
        name = market.get("name")
        if not name:
            continue
        out.append(TickerQuote(
            exchange_name=name,
            exchange_logo_url=market.get("logo") or None,
            base_symbol=t.get("base") or "",
            target_symbol=t.get("target") or "",
            price_usd=_float_or_none((t.get("converted_last") or {}).get("usd")),
        ))
    logger.info(f"[coingecko] {coin_id}: {len(out)} tickers")
    return out

def fetch_price_history(coin_id: str, days: int, vs_currency: Optional[str] = None) -> List[PricePoint]:
    data = _get(f"/coins/{coin_id}/market_chart", {
        "vs_currency": vs_currency or settings.vs_currency,
        "days": days,
    })
    out: List[PricePoint] = []
    for row in data.get("prices") or []:
        if not isinstance(row, (list, tuple)) or len(row) < 2 or row[1] is None:
            continue
        ts = datetime.fromtimestamp(float(row[0]) / 1000.0, tz=timezone.utc)
        out.append(PricePoint(ts=ts, price=float(row[1])))
    return out
