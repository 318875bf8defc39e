from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from .config import settings
from .logs import setup_logging
from .routers.health import router as health_router
from .routers.tokens import router as tokens_router
from .routers.arbitrage import router as arb_router
from .routers.simulator import router as sim_router
from .services.coingecko import MarketDataError

setup_logging(settings.log_level)

app = FastAPI(title="Token Arbitrage API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(MarketDataError)
async def market_data_error(request: Request, exc: MarketDataError):
    logger.warning(f"[api] {request.url.path}: {exc.message}")
    return JSONResponse(status_code=502, content={"detail": exc.message, "upstream_status": exc.status_code})

app.include_router(health_router)
app.include_router(tokens_router)
app.include_router(arb_router)
app.include_router(sim_router)
