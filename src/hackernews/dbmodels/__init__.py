"""
Database models for the Hacker News backend (authoritative ORM definitions).

Table and column names follow the layout of the deployed database
(`"User"`, `"Link"`, `"Comment"` with camelCase columns) so an existing
database can be pointed at without a data migration. Python attribute names
are snake_case.
"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    ForeignKeyConstraint,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "%(table_name)s_%(column_0_name)s_idx",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "User"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="User_pkey"),
        UniqueConstraint("email", name="User_email_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    links: Mapped[list["Links"]] = relationship(
        "Links", uselist=True, back_populates="posted_by", passive_deletes=True
    )


class Links(Base):
    __tablename__ = "Link"
    __table_args__ = (
        ForeignKeyConstraint(
            ["postedById"],
            ["User.id"],
            ondelete="SET NULL",
            onupdate="CASCADE",
            name="Link_postedById_fkey",
        ),
        PrimaryKeyConstraint("id", name="Link_pkey"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, nullable=False, server_default=func.now()
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    posted_by_id: Mapped[int | None] = mapped_column("postedById", Integer, nullable=True)

    posted_by: Mapped["Users | None"] = relationship("Users", back_populates="links")
    comments: Mapped[list["Comments"]] = relationship(
        "Comments",
        uselist=True,
        back_populates="link",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Comments(Base):
    __tablename__ = "Comment"
    __table_args__ = (
        ForeignKeyConstraint(
            ["linkId"],
            ["Link.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="Comment_linkId_fkey",
        ),
        PrimaryKeyConstraint("id", name="Comment_pkey"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    link_id: Mapped[int | None] = mapped_column("linkId", Integer, nullable=True)

    link: Mapped["Links | None"] = relationship("Links", back_populates="comments")


# Expose metadata for Alembic
target_metadata = Base.metadata

__all__ = ["Base", "Users", "Links", "Comments", "target_metadata"]
