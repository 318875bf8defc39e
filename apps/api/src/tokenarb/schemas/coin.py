from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class CoinSearchResult(BaseModel):
    id: str = Field(..., examples=["bitcoin"])
    name: str
    symbol: str
    market_cap_rank: Optional[int] = None
    thumb_url: Optional[str] = None

class CoinDetail(BaseModel):
    id: str
    name: str
    symbol: str
    image_url: Optional[str] = None
    market_cap_rank: Optional[int] = None
    current_price_usd: Optional[float] = None
    price_change_24h_percent: Optional[float] = None
    homepage_url: Optional[str] = None

class PricePoint(BaseModel):
    ts: datetime
    price: float
