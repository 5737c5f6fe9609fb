"""
Conversions from database models to GraphQL types
"""

import strawberry

from ...dbmodels import Comments, Links, Users
from ..types.comment import Comment
from ..types.link import Link
from ..types.user import User


def convert_db_to_graphql_link(link: Links) -> Link:
    """Convert a database Link model to GraphQL Link type."""
    return Link(
        id=strawberry.ID(str(link.id)),
        description=link.description,
        url=link.url,
        created_at=link.created_at,
        posted_by_id=link.posted_by_id,
    )


def convert_db_to_graphql_comment(comment: Comments) -> Comment:
    """Convert a database Comment model to GraphQL Comment type."""
    return Comment(
        id=strawberry.ID(str(comment.id)),
        body=comment.body,
        link_id=comment.link_id,
    )


def convert_db_to_graphql_user(user: Users) -> User:
    """Convert a database User model to GraphQL User type."""
    return User(
        id=strawberry.ID(str(user.id)),
        name=user.name,
        email=user.email,
    )
