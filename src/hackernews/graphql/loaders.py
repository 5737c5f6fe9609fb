"""
Request-scoped data loaders.

Nested fields (`Link.comments`, `Comment.link`, `Link.postedBy`,
`User.links`) resolve once per parent object. Loaders collect the keys
requested during one tick of the event loop and fetch them with a single
query, so a feed of N links costs one comments query instead of N.
"""

from collections import defaultdict
from functools import partial

from sqlalchemy import select
from strawberry.dataloader import DataLoader

from ..database.connection import SessionFactory, get_async_session
from ..dbmodels import Comments, Links, Users


async def load_links(db: SessionFactory, keys: list[int]) -> list[Links | None]:
    """Batch load links by ID."""
    async with db() as session:
        result = await session.execute(select(Links).where(Links.id.in_(keys)))
        links_map = {link.id: link for link in result.scalars().all()}
        return [links_map.get(key) for key in keys]


async def load_users(db: SessionFactory, keys: list[int]) -> list[Users | None]:
    """Batch load users by ID."""
    async with db() as session:
        result = await session.execute(select(Users).where(Users.id.in_(keys)))
        users_map = {user.id: user for user in result.scalars().all()}
        return [users_map.get(key) for key in keys]


async def load_comments_by_link(db: SessionFactory, keys: list[int]) -> list[list[Comments]]:
    """Batch load the comments of several links, in id order per link."""
    async with db() as session:
        stmt = select(Comments).where(Comments.link_id.in_(keys)).order_by(Comments.id)
        result = await session.execute(stmt)
        grouped: dict[int, list[Comments]] = defaultdict(list)
        for comment in result.scalars().all():
            grouped[comment.link_id].append(comment)
        return [grouped.get(key, []) for key in keys]


async def load_links_by_user(db: SessionFactory, keys: list[int]) -> list[list[Links]]:
    """Batch load the links posted by several users, in id order per user."""
    async with db() as session:
        stmt = select(Links).where(Links.posted_by_id.in_(keys)).order_by(Links.id)
        result = await session.execute(stmt)
        grouped: dict[int, list[Links]] = defaultdict(list)
        for link in result.scalars().all():
            grouped[link.posted_by_id].append(link)
        return [grouped.get(key, []) for key in keys]


class Loaders:
    def __init__(self, db: SessionFactory = get_async_session):
        self.link_loader = DataLoader(load_fn=partial(load_links, db))
        self.user_loader = DataLoader(load_fn=partial(load_users, db))
        self.comments_by_link_loader = DataLoader(load_fn=partial(load_comments_by_link, db))
        self.links_by_user_loader = DataLoader(load_fn=partial(load_links_by_user, db))
