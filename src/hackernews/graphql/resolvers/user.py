from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ...auth.factory import get_auth_adapter
from ...auth.passwords import hash_password, verify_password
from ...dbmodels import Users
from ...logging import get_logger
from ..context import get_current_user, get_db, get_loaders
from ..errors import (
    ArgumentValidationError,
    AuthenticationFailedError,
    ConstraintViolationError,
    is_unique_violation,
)
from .converters import convert_db_to_graphql_link, convert_db_to_graphql_user

if TYPE_CHECKING:
    from ..types.link import Link
    from ..types.user import AuthPayload, User

logger = get_logger(__name__)


async def resolve_current_user(info: strawberry.Info) -> User | None:
    """Resolve the user authenticated for this request, if any."""
    current_user = get_current_user(info)
    if current_user is None:
        return None
    return convert_db_to_graphql_user(current_user)


async def resolve_user_links(user: User, info: strawberry.Info) -> list[Link]:
    links = await get_loaders(info).links_by_user_loader.load(int(user.id))
    return [convert_db_to_graphql_link(link) for link in links]


async def _issue_auth_payload(user: Users) -> AuthPayload:
    from ..types.user import AuthPayload

    token = await get_auth_adapter().issue_token(user.id)
    return AuthPayload(token=token, user=convert_db_to_graphql_user(user))


async def signup(info: strawberry.Info, name: str, email: str, password: str) -> AuthPayload:
    """Register a user and return a token for it."""
    if not name or not email or not password:
        raise ArgumentValidationError("All fields are required.")

    already_exists = f"User with email '{email}' already exists."

    async with get_db(info)() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        if result.scalar_one_or_none():
            raise ConstraintViolationError(already_exists)

        hashed = await asyncio.to_thread(hash_password, password)

        user = Users(name=name, email=email, password=hashed)
        session.add(user)
        try:
            await session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConstraintViolationError(already_exists) from e
            raise

        logger.info("User signed up", new_user_id=user.id)

    return await _issue_auth_payload(user)


async def login(info: strawberry.Info, email: str, password: str) -> AuthPayload:
    """Exchange email and password for a token."""
    async with get_db(info)() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        user = result.scalar_one_or_none()

    if user is None or not await asyncio.to_thread(verify_password, password, user.password):
        logger.info("Login rejected", email_known=user is not None)
        raise AuthenticationFailedError("Invalid email or password.")

    logger.info("User logged in", login_user_id=user.id)

    return await _issue_auth_payload(user)
