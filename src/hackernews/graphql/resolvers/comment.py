from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...dbmodels import Comments, Links
from ...logging import get_logger
from ..arguments import parse_int_safe
from ..context import get_db, get_loaders
from ..errors import (
    ArgumentValidationError,
    ConstraintViolationError,
    NotFoundError,
    is_foreign_key_violation,
)
from .converters import convert_db_to_graphql_comment, convert_db_to_graphql_link

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.link import Link

logger = get_logger(__name__)


async def _lock_comment(session: AsyncSession, comment_id: int, raw_id: str) -> Comments:
    """Load a comment for update or raise NotFoundError."""
    stmt = select(Comments).where(Comments.id == comment_id).with_for_update()
    result = await session.execute(stmt)
    comment = result.scalar_one_or_none()

    if not comment:
        raise NotFoundError(f"Comment with ID: '{raw_id}' does not exist.")

    return comment


async def _flush_remapping_foreign_keys(session: AsyncSession, message: str) -> None:
    try:
        await session.flush()
    except IntegrityError as e:
        if is_foreign_key_violation(e):
            raise ConstraintViolationError(message) from e
        raise


def _forget_link_comments(info: strawberry.Info, link_id: int | None) -> None:
    """Drop cached comment lists so later fields in this request see the write."""
    if link_id is not None:
        get_loaders(info).comments_by_link_loader.clear(link_id)


# Query resolvers
async def resolve_comment_by_id(info: strawberry.Info, comment_id: str) -> Comment | None:
    """Resolve a comment by its ID; unknown or malformed ids give None."""
    safe_id = parse_int_safe(comment_id)
    if safe_id is None:
        return None

    async with get_db(info)() as session:
        comment = await session.get(Comments, safe_id)

    if not comment:
        logger.debug("Comment not found", comment_id=comment_id)
        return None

    return convert_db_to_graphql_comment(comment)


# Field resolvers
async def resolve_comment_link(comment: Comment, info: strawberry.Info) -> Link | None:
    if comment.link_id is None:
        return None
    link = await get_loaders(info).link_loader.load(comment.link_id)
    return convert_db_to_graphql_link(link) if link else None


# Mutation resolvers
async def post_comment_on_link(info: strawberry.Info, link_id: str, body: str) -> Comment:
    """Attach a new comment to an existing link."""
    cannot_post = f"Cannot post comment on non-existing link with id '{link_id}'."

    safe_id = parse_int_safe(link_id)
    if safe_id is None:
        raise NotFoundError(cannot_post)

    async with get_db(info)() as session:
        link = await session.get(Links, safe_id)
        if not link:
            raise NotFoundError(f"Link with ID: '{link_id}' does not exist.")

        if not body:
            raise ArgumentValidationError("Body is a required field.")

        comment = Comments(body=body, link_id=safe_id)
        session.add(comment)
        await _flush_remapping_foreign_keys(session, cannot_post)
        _forget_link_comments(info, safe_id)

        logger.info("Comment posted", comment_id=comment.id, link_id=safe_id)

        return convert_db_to_graphql_comment(comment)


async def delete_comment_on_link(info: strawberry.Info, comment_id: str) -> Comment:
    """Delete a comment and return it as it was."""
    cannot_delete = f"Cannot delete non-existing comment with id '{comment_id}'."

    safe_id = parse_int_safe(comment_id)
    if safe_id is None:
        raise NotFoundError(cannot_delete)

    async with get_db(info)() as session:
        comment = await _lock_comment(session, safe_id, comment_id)
        deleted = convert_db_to_graphql_comment(comment)

        await session.delete(comment)
        await _flush_remapping_foreign_keys(session, cannot_delete)
        _forget_link_comments(info, comment.link_id)

        logger.info("Comment deleted", comment_id=safe_id)

        return deleted


async def update_comment_on_link(info: strawberry.Info, comment_id: str, body: str) -> Comment:
    """Replace the body of an existing comment."""
    cannot_update = f"Cannot update non-existing comment with id '{comment_id}'."

    safe_id = parse_int_safe(comment_id)
    if safe_id is None:
        raise NotFoundError(cannot_update)

    async with get_db(info)() as session:
        comment = await _lock_comment(session, safe_id, comment_id)
        comment.body = body
        await _flush_remapping_foreign_keys(session, cannot_update)
        _forget_link_comments(info, comment.link_id)

        logger.info("Comment updated", comment_id=safe_id)

        return convert_db_to_graphql_comment(comment)
