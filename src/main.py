"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
      or: pokebet  (console script, uvloop event loop)
"""

import logging
import random

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.pm_account.api.router import router as account_router
from src.pm_account.api.router import session_router
from src.pm_common.errors import AppError, InternalError
from src.pm_common.events import BalanceUpdated, DomainEvent, TradeCompleted
from src.pm_common.response import error_response
from src.pm_gateway.middleware.request_log import RequestLogMiddleware
from src.pm_market.api.router import router as market_router
from src.pm_portfolio.api.router import router as portfolio_router
from src.pm_trade.api.router import router as trade_router
from src.store import DemoStore

VERSION = "0.1.0"

logger = logging.getLogger("pm.app")
event_logger = logging.getLogger("pm.events")


def _log_event(event: DomainEvent) -> None:
    event_logger.debug("%s %r", type(event).__name__, event)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.code, exc.message, request).model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    err = InternalError()
    return JSONResponse(
        status_code=err.http_status,
        content=error_response(err.code, err.message, request).model_dump(),
    )


def create_app(store: DemoStore | None = None) -> FastAPI:
    """Build the app around *store*; a fresh seeded store when omitted."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if store is None:
        store = DemoStore(rng=random.Random(settings.PRICE_SEED))
    store.event_bus.subscribe(TradeCompleted, _log_event)
    store.event_bus.subscribe(BalanceUpdated, _log_event)

    app = FastAPI(title=settings.APP_NAME, version=VERSION, debug=settings.DEBUG)
    app.state.store = store

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(session_router, prefix="/api/v1")
    app.include_router(account_router, prefix="/api/v1")
    app.include_router(market_router, prefix="/api/v1")
    app.include_router(trade_router, prefix="/api/v1")
    app.include_router(portfolio_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()


def run() -> None:
    uvicorn.run("src.main:app", host="127.0.0.1", port=8000, loop="uvloop")
