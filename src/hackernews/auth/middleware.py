"""Request authentication: bearer token to local user."""

from __future__ import annotations

from fastapi import Request

from ..database.connection import SessionFactory, get_async_session
from ..dbmodels import Users
from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .factory import get_auth_adapter

logger = get_logger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of an `Authorization: Bearer <token>` header, or None."""
    if not authorization:
        return None

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None

    token = token.strip()
    return token or None


async def authenticate_user(
    request: Request,
    db: SessionFactory = get_async_session,
    adapter: AuthAdapter | None = None,
) -> Users | None:
    """
    Resolve the user behind a request's bearer token.

    A missing or malformed header, a token that fails verification, a claim
    that is not an integer, an unknown user and a failed lookup all resolve to
    None. Nothing raised here reaches the caller.
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    if token is None:
        return None

    try:
        principal = await (adapter or get_auth_adapter()).verify_token(token)
    except AuthenticationError as e:
        logger.info("Treating request as unauthenticated", reason=str(e))
        return None
    except Exception as e:
        logger.error("Unexpected authentication error", error=str(e))
        return None

    subject = principal["subject"]
    if not (subject.isascii() and subject.isdigit()):
        logger.info("Token user id is not an integer", subject=subject)
        return None

    try:
        async with db() as session:
            user = await session.get(Users, int(subject))
    except Exception as e:
        logger.error("User lookup failed during authentication", error=str(e))
        return None

    if user is None:
        logger.info("Token refers to unknown user", user_id=subject)

    return user
