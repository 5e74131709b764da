"""FastAPI dependencies: the app's DemoStore and the signed-in user.

Usage in any protected router:
    from src.pm_gateway.auth.dependencies import get_current_user

    @router.get("/protected")
    async def protected(user: Annotated[User, Depends(get_current_user)]):
        ...
"""

from typing import Annotated

from fastapi import Depends, Request

from src.pm_account.domain.models import User
from src.pm_common.errors import NotAuthenticatedError
from src.store import DemoStore


def get_store(request: Request) -> DemoStore:
    """The DemoStore built by create_app() and attached to app.state."""
    return request.app.state.store


def get_current_user(store: Annotated[DemoStore, Depends(get_store)]) -> User:
    """Return the session user; raises NotAuthenticatedError (1006/401) if none."""
    user = store.sessions.get_current_user()
    if user is None:
        raise NotAuthenticatedError()
    return user
