import math
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class TickerQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    exchange_name: str = Field(..., examples=["Binance"])
    exchange_logo_url: Optional[str] = None
    base_symbol: str = Field(..., examples=["BTC"])
    target_symbol: str = Field(..., examples=["USDT"])
    price_usd: Optional[float] = Field(None, description="Last traded price converted to USD")

    @property
    def pair_label(self) -> str:
        return f"{self.base_symbol}/{self.target_symbol}"

    @property
    def is_valid(self) -> bool:
        p = self.price_usd
        return p is not None and math.isfinite(p) and p > 0
