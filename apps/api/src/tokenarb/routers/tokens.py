from fastapi import APIRouter, HTTPException, Query
from typing import Any, Dict, List, Optional
from loguru import logger
from ..config import settings
from ..schemas.coin import CoinDetail, PricePoint
from ..schemas.opportunity import ArbitrageOpportunity
from ..schemas.ticker import TickerQuote
from ..services import coingecko
from ..services.arbitrage import find_best_opportunity, leg_role
from ..services.exchange_classifier import classify, display_name, venue_type

router = APIRouter(prefix="/tokens", tags=["tokens"])

def ticker_rows(quotes: List[TickerQuote], opp: Optional[ArbitrageOpportunity]) -> List[Dict[str, Any]]:
    out = []
    for q in quotes:
        row = q.model_dump()
        row.update({
            "pair": q.pair_label,
            "is_dex": classify(q.exchange_name),
            "venue": venue_type(q.exchange_name),
            "display_name": display_name(q.exchange_name),
            "valid": q.is_valid,
            "role": leg_role(q, opp),
        })
        out.append(row)
    return out

@router.get("/search")
def search(q: str = Query(..., min_length=1, examples=["bitcoin"])):
    try:
        coins = coingecko.search_coins(q)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"query": q, "count": len(coins), "coins": coins}

@router.get("/{coin_id}", response_model=CoinDetail)
def coin(coin_id: str):
    return coingecko.fetch_coin(coin_id)

@router.get("/{coin_id}/tickers")
def tickers(coin_id: str):
    quotes = coingecko.fetch_tickers(coin_id)
    opp = find_best_opportunity(quotes)
    if opp:
        logger.info(f"[tokens] {coin_id}: buy {opp.buy.exchange_name}@{opp.buy.price} "
                    f"sell {opp.sell.exchange_name}@{opp.sell.price} spread={opp.spread_percent}%")
    return {
        "coin_id": coin_id,
        "count": len(quotes),
        "tickers": ticker_rows(quotes, opp),
        "opportunity": opp,
    }

@router.get("/{coin_id}/chart")
def chart(
    coin_id: str,
    days: int = Query(settings.chart_default_days, ge=1, le=365),
    vs_currency: str = Query(settings.vs_currency),
):
    points: List[PricePoint] = coingecko.fetch_price_history(coin_id, days, vs_currency)
    return {"coin_id": coin_id, "days": days, "vs_currency": vs_currency, "prices": points}
