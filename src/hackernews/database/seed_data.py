"""
Reusable seed data functions for database initialization.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Links
from ..logging import get_logger

logger = get_logger(__name__)


async def seed_sample_link(
    db: AsyncSession,
    *,
    description: str = "test link",
    url: str = "test link url",
) -> Links:
    """Insert a sample link and return it with its generated id."""
    link = Links(description=description, url=url)
    db.add(link)
    await db.flush()
    await db.refresh(link)

    logger.info("Sample link created", link_id=link.id, url=url)
    return link


async def list_all_links(db: AsyncSession) -> list[Links]:
    """Return every stored link ordered by id."""
    result = await db.execute(select(Links).order_by(Links.id))
    return list(result.scalars().all())
