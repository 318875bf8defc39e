from typing import Literal
from pydantic import BaseModel, ConfigDict

class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    units_acquired: float
    total_buy_cost: float
    gross_sale_proceeds: float
    net_sale_proceeds: float
    gross_profit: float
    roi_percent: float

class SimulationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_input"] = "invalid_input"
    message: str
