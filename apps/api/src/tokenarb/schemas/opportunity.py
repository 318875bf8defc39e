from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field
from ..services.exchange_classifier import classify, display_name

class OpportunityLeg(BaseModel):
    model_config = ConfigDict(frozen=True)

    exchange_name: str
    exchange_logo_url: Optional[str] = None
    pair_label: str = Field(..., examples=["BTC/USDT"])
    price: float

    # presentation only, never used to pick the legs
    @computed_field
    @property
    def is_dex(self) -> bool:
        return classify(self.exchange_name)

    @computed_field
    @property
    def display_name(self) -> str:
        return display_name(self.exchange_name)

class ArbitrageOpportunity(BaseModel):
    model_config = ConfigDict(frozen=True)

    buy: OpportunityLeg
    sell: OpportunityLeg
    spread_percent: float = Field(..., description="(sell - buy) / buy * 100, rounded to 2 decimals")
