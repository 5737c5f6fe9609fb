from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from ...dbmodels import Links
from ...logging import get_logger
from ..arguments import apply_skip_constraints, apply_take_constraints, parse_int_safe
from ..context import get_current_user, get_db, get_loaders
from ..errors import (
    ArgumentValidationError,
    ConstraintViolationError,
    NotFoundError,
    is_foreign_key_violation,
)
from .converters import (
    convert_db_to_graphql_comment,
    convert_db_to_graphql_link,
    convert_db_to_graphql_user,
)

if TYPE_CHECKING:
    from ..types.comment import Comment
    from ..types.link import Link
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_link_feed(
    info: strawberry.Info,
    filter_needle: str | None,
    take: int | None,
    skip: int | None,
) -> list[Link]:
    """
    Resolve a page of links, optionally filtered by a needle.

    A link matches when its description or its url contains the needle
    (case-sensitive). `take` and `skip` are validated before any query runs.
    """
    take = apply_take_constraints(take)
    skip = apply_skip_constraints(skip)

    stmt = select(Links)
    if filter_needle:
        stmt = stmt.where(
            or_(
                Links.description.contains(filter_needle, autoescape=True),
                Links.url.contains(filter_needle, autoescape=True),
            )
        )
    stmt = stmt.order_by(Links.id).limit(take).offset(skip)

    async with get_db(info)() as session:
        result = await session.execute(stmt)
        links = result.scalars().all()

    return [convert_db_to_graphql_link(link) for link in links]


async def resolve_link_by_id(info: strawberry.Info, link_id: str) -> Link | None:
    """Resolve a link by its ID; unknown or malformed ids give None."""
    safe_id = parse_int_safe(link_id)
    if safe_id is None:
        return None

    async with get_db(info)() as session:
        link = await session.get(Links, safe_id)

    if not link:
        logger.debug("Link not found", link_id=link_id)
        return None

    return convert_db_to_graphql_link(link)


# Field resolvers
async def resolve_link_comments(link: Link, info: strawberry.Info) -> list[Comment]:
    comments = await get_loaders(info).comments_by_link_loader.load(int(link.id))
    return [convert_db_to_graphql_comment(comment) for comment in comments]


async def resolve_link_posted_by(link: Link, info: strawberry.Info) -> User | None:
    if link.posted_by_id is None:
        return None
    user = await get_loaders(info).user_loader.load(link.posted_by_id)
    return convert_db_to_graphql_user(user) if user else None


# Mutation resolvers
async def post_link(info: strawberry.Info, description: str, url: str) -> Link:
    """Create a link, attributed to the current user when there is one."""
    if not description or not url:
        raise ArgumentValidationError("All fields are required.")

    current_user = get_current_user(info)

    async with get_db(info)() as session:
        link = Links(
            description=description,
            url=url,
            posted_by_id=current_user.id if current_user else None,
        )
        session.add(link)
        await session.flush()
        await session.refresh(link)

        if link.posted_by_id is not None:
            get_loaders(info).links_by_user_loader.clear(link.posted_by_id)

        logger.info("Link posted", link_id=link.id, posted_by_id=link.posted_by_id)

        return convert_db_to_graphql_link(link)


async def delete_link(info: strawberry.Info, id: str) -> Link:
    """
    Delete a link and, through the database cascade, its comments.

    The existence check and the delete share one transaction, and the row is
    locked between them on databases that support SELECT ... FOR UPDATE.
    """
    safe_id = parse_int_safe(id)
    if safe_id is None:
        raise NotFoundError(f"Cannot delete non-existing link with id '{id}'.")

    async with get_db(info)() as session:
        stmt = select(Links).where(Links.id == safe_id).with_for_update()
        result = await session.execute(stmt)
        link = result.scalar_one_or_none()

        if not link:
            raise NotFoundError(f"Link with ID: '{id}' does not exist.")

        deleted = convert_db_to_graphql_link(link)

        try:
            await session.delete(link)
            await session.flush()
        except IntegrityError as e:
            if is_foreign_key_violation(e):
                raise ConstraintViolationError(
                    f"Cannot delete non-existing link with id '{id}'."
                ) from e
            raise

        loaders = get_loaders(info)
        loaders.link_loader.clear(safe_id)
        loaders.comments_by_link_loader.clear(safe_id)
        if link.posted_by_id is not None:
            loaders.links_by_user_loader.clear(link.posted_by_id)

        logger.info("Link deleted", link_id=safe_id)

        return deleted
