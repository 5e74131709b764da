"""pm_account REST API - demo session and account endpoints.

POST /session/login           - any credentials; creates the user on first login
POST /session/logout
GET  /session/me
GET  /account/balance
POST /account/deposit         - add funds
POST /account/withdraw
GET  /account/transactions    - newest first
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_account.application.schemas import (
    DepositRequest,
    LoginRequest,
    WithdrawRequest,
)
from src.pm_account.application.service import AccountApplicationService
from src.pm_account.domain.models import User
from src.pm_common.enums import TransactionType
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.auth.dependencies import get_current_user, get_store
from src.store import DemoStore

session_router = APIRouter(prefix="/session", tags=["session"])
router = APIRouter(prefix="/account", tags=["account"])


def get_account_service(
    store: Annotated[DemoStore, Depends(get_store)],
) -> AccountApplicationService:
    return AccountApplicationService(store)


@session_router.post("/login")
async def login(
    body: LoginRequest,
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    data = await service.login(body.username, body.email)
    return success_response(data.model_dump(), request)


@session_router.post("/logout")
async def logout(
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    await service.logout()
    return success_response(None, request)


@session_router.get("/me")
async def me(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    data = await service.me()
    return success_response(data.model_dump(), request)


@router.get("/balance")
async def get_balance(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    data = await service.get_balance()
    return success_response(data.model_dump(), request)


@router.post("/deposit")
async def deposit(
    body: DepositRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    data = await service.deposit(body.amount_cents)
    return success_response(data.model_dump(), request)


@router.post("/withdraw")
async def withdraw(
    body: WithdrawRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
) -> ApiResponse:
    data = await service.withdraw(body.amount_cents)
    return success_response(data.model_dump(), request)


@router.get("/transactions")
async def list_transactions(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AccountApplicationService, Depends(get_account_service)],
    request: Request,
    type: TransactionType | None = Query(None, description="Filter by transaction type"),
) -> ApiResponse:
    data = await service.list_transactions(type.value if type else None)
    return success_response(data.model_dump(), request)
