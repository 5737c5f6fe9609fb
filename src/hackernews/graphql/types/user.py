"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .link import Link


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str

    @strawberry.field
    async def links(
        self, info: strawberry.Info
    ) -> list[Annotated["Link", strawberry.lazy(".link")]]:
        """Get links posted by this user."""
        from ..resolvers.user import resolve_user_links

        return await resolve_user_links(self, info)


@strawberry.type
class AuthPayload:
    """Signed token plus the user it was issued for."""

    token: str
    user: User
