from fastapi import APIRouter, Query
from ..schemas.simulation import SimulationError
from ..services.simulator import simulate

router = APIRouter(prefix="/simulator", tags=["simulator"])

# Form values arrive as raw strings; validation is the simulator's job.
@router.get("")
def run_simulation(
    investment: str = Query(..., examples=["100"]),
    buy_price: str = Query(..., examples=["0.50"]),
    sell_price: str = Query(..., examples=["0.51"]),
    buy_fee_pct: str = Query("0.1"),
    sell_fee_pct: str = Query("0.1"),
):
    res = simulate(investment, buy_price, sell_price, buy_fee_pct, sell_fee_pct)
    if isinstance(res, SimulationError):
        return {"ok": False, "error": res}
    return {"ok": True, "result": res}
