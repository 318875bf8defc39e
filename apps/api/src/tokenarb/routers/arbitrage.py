from fastapi import APIRouter, Query
from typing import List
from ..schemas.ticker import TickerQuote
from ..services.arbitrage import find_best_opportunity
from ..services.exchange_classifier import classify, display_name, venue_type
from .tokens import ticker_rows

router = APIRouter(prefix="/arbitrage", tags=["arbitrage"])

@router.post("/analyze")
def analyze(quotes: List[TickerQuote]):
    opp = find_best_opportunity(quotes)
    return {"count": len(quotes), "opportunity": opp, "tickers": ticker_rows(quotes, opp)}

@router.get("/classify")
def classify_exchange(name: str = Query(..., examples=["Uniswap V3 (Ethereum)"])):
    return {
        "name": name,
        "is_dex": classify(name),
        "venue": venue_type(name),
        "display_name": display_name(name),
    }
