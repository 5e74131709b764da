"""Portfolio REST API.

GET /portfolio                                  - summary + valued positions
GET /portfolio/positions/{market_id}/{side}     - one position
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pm_account.domain.models import User
from src.pm_common.enums import Side
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.auth.dependencies import get_current_user, get_store
from src.pm_portfolio.application.service import PortfolioApplicationService
from src.store import DemoStore

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


def get_portfolio_service(
    store: Annotated[DemoStore, Depends(get_store)],
) -> PortfolioApplicationService:
    return PortfolioApplicationService(store)


@router.get("")
async def get_portfolio(
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PortfolioApplicationService, Depends(get_portfolio_service)],
) -> ApiResponse:
    data = await service.get_portfolio(current_user)
    return success_response(data.model_dump(), request)


@router.get("/positions/{market_id}/{side}")
async def get_position(
    market_id: int,
    side: Side,
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PortfolioApplicationService, Depends(get_portfolio_service)],
) -> ApiResponse:
    data = await service.get_position(current_user, market_id, side)
    return success_response(data.model_dump(), request)
