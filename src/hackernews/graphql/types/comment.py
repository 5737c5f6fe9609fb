"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .link import Link


@strawberry.type
class Comment:
    """A text reply attached to a link."""

    id: strawberry.ID
    body: str
    link_id: strawberry.Private[int | None]

    @strawberry.field
    async def link(
        self, info: strawberry.Info
    ) -> Annotated["Link", strawberry.lazy(".link")] | None:
        """Get the link this comment belongs to."""
        if self.link_id is None:
            return None
        from ..resolvers.comment import resolve_comment_link

        return await resolve_comment_link(self, info)
