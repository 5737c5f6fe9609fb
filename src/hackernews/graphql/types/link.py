"""
Link GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Link:
    """A submitted URL with its description."""

    id: strawberry.ID
    description: str
    url: str
    created_at: datetime
    posted_by_id: strawberry.Private[int | None]

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get the comments posted on this link."""
        from ..resolvers.link import resolve_link_comments

        return await resolve_link_comments(self, info)

    @strawberry.field
    async def posted_by(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who posted this link, if known."""
        if self.posted_by_id is None:
            return None
        from ..resolvers.link import resolve_link_posted_by

        return await resolve_link_posted_by(self, info)
