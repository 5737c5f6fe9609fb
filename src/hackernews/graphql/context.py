"""
Per-request GraphQL context
"""

from typing import Any

import strawberry
from fastapi import Request

from ..auth.middleware import authenticate_user
from ..database.connection import SessionFactory, get_async_session
from ..dbmodels import Users
from ..logging import bind_user_id, get_logger
from .loaders import Loaders

logger = get_logger(__name__)


async def build_context(request: Request, db: SessionFactory = get_async_session) -> dict[str, Any]:
    """
    Build a fresh context for one GraphQL request.

    The session factory is shared by every request; the current user and the
    loaders are resolved anew each time.
    """
    current_user = await authenticate_user(request, db)
    bind_user_id(str(current_user.id) if current_user else None)

    return {
        "request": request,
        "db": db,
        "current_user": current_user,
        "loaders": Loaders(db),
    }


def get_db(info: strawberry.Info) -> SessionFactory:
    """Session factory for this request, falling back to the shared one."""
    return info.context.get("db") or get_async_session


def get_current_user(info: strawberry.Info) -> Users | None:
    return info.context.get("current_user")


def get_loaders(info: strawberry.Info) -> Loaders:
    loaders = info.context.get("loaders")
    if loaders is None:
        logger.debug("Loaders missing from GraphQL context, creating request-local set")
        loaders = Loaders(get_db(info))
        info.context["loaders"] = loaders
    return loaders
