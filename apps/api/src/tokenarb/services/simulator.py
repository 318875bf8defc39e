import math
from typing import Any, Optional, Union
from ..schemas.simulation import SimulationError, SimulationResult

INVALID_NUMBER_MSG = "All fields must be valid numbers."
NON_POSITIVE_MSG = "Investment, buy price and sell price must be greater than zero."
BUY_FEE_MSG = "Buy fee must be greater than -100%."

def _parse(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        x = float(value)
    except (TypeError, ValueError):
        return None
    return x if math.isfinite(x) else None

def simulate(
    investment: Any,
    buy_price: Any,
    sell_price: Any,
    buy_fee_percent: Any,
    sell_fee_percent: Any,
) -> Union[SimulationResult, SimulationError]:
    """
    Buy `investment` worth of units at `buy_price`, sell all of them at `sell_price`.

    The buy fee is charged on top of the investment (units are not reduced),
    the sell fee is taken out of the sale proceeds.
    """
    values = [_parse(v) for v in (investment, buy_price, sell_price, buy_fee_percent, sell_fee_percent)]
    if any(v is None for v in values):
        return SimulationError(message=INVALID_NUMBER_MSG)
    inv, buy_px, sell_px, buy_fee_pct, sell_fee_pct = values
    if inv <= 0 or buy_px <= 0 or sell_px <= 0:
        return SimulationError(message=NON_POSITIVE_MSG)

    buy_fee = buy_fee_pct / 100.0
    sell_fee = sell_fee_pct / 100.0

    units = inv / buy_px
    total_cost = inv + inv * buy_fee
    if total_cost <= 0:
        return SimulationError(message=BUY_FEE_MSG)
    gross_sale = units * sell_px
    net_sale = gross_sale - gross_sale * sell_fee
    profit = net_sale - total_cost
    roi = profit / total_cost * 100.0

    return SimulationResult(
        units_acquired=units,
        total_buy_cost=total_cost,
        gross_sale_proceeds=gross_sale,
        net_sale_proceeds=net_sale,
        gross_profit=profit,
        roi_percent=roi,
    )
