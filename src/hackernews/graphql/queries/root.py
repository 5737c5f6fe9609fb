"""
Root GraphQL query definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.link import Link
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def link_feed(
        self,
        info: strawberry.Info,
        filter_needle: str | None = None,
        take: int | None = None,
        skip: int | None = None,
    ) -> list[Link | None]:
        """Get a page of links, optionally filtered by description or url."""
        from ..resolvers.link import resolve_link_feed

        return await resolve_link_feed(info, filter_needle, take, skip)

    @strawberry.field
    async def link(self, info: strawberry.Info, link_id: strawberry.ID) -> Link | None:
        """Get a link by ID."""
        from ..resolvers.link import resolve_link_by_id

        return await resolve_link_by_id(info, link_id)

    @strawberry.field
    async def comment(self, info: strawberry.Info, comment_id: str) -> Comment | None:
        """Get a comment by ID."""
        from ..resolvers.comment import resolve_comment_by_id

        return await resolve_comment_by_id(info, comment_id)

    @strawberry.field
    async def link_comments(self, info: strawberry.Info, link_id: str) -> Link | None:
        """Get a link by ID; select its `comments` field for the comments."""
        from ..resolvers.link import resolve_link_by_id

        return await resolve_link_by_id(info, link_id)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        from ..resolvers.user import resolve_current_user

        return await resolve_current_user(info)
