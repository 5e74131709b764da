"""Trade REST API.

GET  /trades/quote    - preview shares, cost and potential payout; no mutation
POST /trades          - buy YES or NO shares with a cash amount
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_account.domain.models import User
from src.pm_common.enums import Side
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.auth.dependencies import get_current_user, get_store
from src.pm_trade.application.schemas import PlaceTradeRequest
from src.pm_trade.application.service import TradeApplicationService
from src.store import DemoStore

router = APIRouter(prefix="/trades", tags=["trades"])


def get_trade_service(
    store: Annotated[DemoStore, Depends(get_store)],
) -> TradeApplicationService:
    return TradeApplicationService(store)


@router.get("/quote")
async def quote_trade(
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TradeApplicationService, Depends(get_trade_service)],
    market_id: int = Query(...),
    side: Side = Query(...),
    amount_cents: int = Query(..., description="Amount to invest in cents"),
) -> ApiResponse:
    data = await service.quote_trade(current_user, market_id, side, amount_cents)
    return success_response(data.model_dump(), request)


@router.post("")
async def place_trade(
    body: PlaceTradeRequest,
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TradeApplicationService, Depends(get_trade_service)],
) -> ApiResponse:
    data = await service.place_trade(current_user, body.market_id, body.side, body.amount_cents)
    return success_response(data.model_dump(), request)
