"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.link import Link
from ..types.user import AuthPayload


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Link mutations
    @strawberry.mutation(name="postLink")
    async def post_link(self, info: strawberry.Info, description: str, url: str) -> Link | None:
        """Post a new link."""
        from ..resolvers.link import post_link

        return await post_link(info, description, url)

    @strawberry.mutation(name="deleteLink")
    async def delete_link(self, info: strawberry.Info, id: str) -> Link:
        """Delete a link together with its comments."""
        from ..resolvers.link import delete_link

        return await delete_link(info, id)

    # Comment mutations
    @strawberry.mutation(name="postCommentOnLink")
    async def post_comment_on_link(
        self, info: strawberry.Info, link_id: str, body: str
    ) -> Comment | None:
        """Post a comment on a link."""
        from ..resolvers.comment import post_comment_on_link

        return await post_comment_on_link(info, link_id, body)

    @strawberry.mutation(name="deleteCommentOnLink")
    async def delete_comment_on_link(
        self, info: strawberry.Info, comment_id: str
    ) -> Comment | None:
        """Delete a comment."""
        from ..resolvers.comment import delete_comment_on_link

        return await delete_comment_on_link(info, comment_id)

    @strawberry.mutation(name="updateCommentOnLink")
    async def update_comment_on_link(
        self, info: strawberry.Info, comment_id: str, body: str
    ) -> Comment | None:
        """Replace the body of a comment."""
        from ..resolvers.comment import update_comment_on_link

        return await update_comment_on_link(info, comment_id, body)

    # User mutations
    @strawberry.mutation
    async def signup(
        self, info: strawberry.Info, name: str, email: str, password: str
    ) -> AuthPayload | None:
        """Create a user account and return a token for it."""
        from ..resolvers.user import signup

        return await signup(info, name, email, password)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, email: str, password: str) -> AuthPayload | None:
        """Log in with email and password."""
        from ..resolvers.user import login

        return await login(info, email, password)
