"""pm_market REST endpoints.

GET /markets                       - list, optional category filter; moves prices
GET /markets/categories            - category labels and icons
GET /markets/{market_id}           - full detail
GET /markets/{market_id}/price     - current YES/NO quote
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.auth.dependencies import get_store
from src.pm_market.application.service import MarketApplicationService
from src.store import DemoStore

router = APIRouter(prefix="/markets", tags=["markets"])


def get_market_service(
    store: Annotated[DemoStore, Depends(get_store)],
) -> MarketApplicationService:
    return MarketApplicationService(store)


@router.get("")
async def list_markets(
    request: Request,
    service: Annotated[MarketApplicationService, Depends(get_market_service)],
    category: str | None = Query(
        None, description="Filter by category. Omit or use 'all' for no filter."
    ),
) -> ApiResponse:
    result = await service.list_markets(category)
    return success_response(result.model_dump(), request)


@router.get("/categories")
async def list_categories(
    request: Request,
    service: Annotated[MarketApplicationService, Depends(get_market_service)],
) -> ApiResponse:
    result = await service.list_categories()
    return success_response([c.model_dump() for c in result], request)


@router.get("/{market_id}")
async def get_market(
    market_id: int,
    request: Request,
    service: Annotated[MarketApplicationService, Depends(get_market_service)],
) -> ApiResponse:
    result = await service.get_market(market_id)
    return success_response(result.model_dump(), request)


@router.get("/{market_id}/price")
async def get_price(
    market_id: int,
    request: Request,
    service: Annotated[MarketApplicationService, Depends(get_market_service)],
) -> ApiResponse:
    result = await service.get_price(market_id)
    return success_response(result.model_dump(), request)
