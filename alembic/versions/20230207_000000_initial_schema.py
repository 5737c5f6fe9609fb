"""
Initial schema: users, links posted by users, comments on links.

Revision ID: 20230207_000000_initial_schema
Revises:
Create Date: 2023-02-07 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20230207_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "User",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="User_pkey"),
        sa.UniqueConstraint("email", name="User_email_key"),
    )

    op.create_table(
        "Link",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "createdAt",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("postedById", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["postedById"],
            ["User.id"],
            ondelete="SET NULL",
            onupdate="CASCADE",
            name="Link_postedById_fkey",
        ),
        sa.PrimaryKeyConstraint("id", name="Link_pkey"),
    )

    op.create_table(
        "Comment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("linkId", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["linkId"],
            ["Link.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="Comment_linkId_fkey",
        ),
        sa.PrimaryKeyConstraint("id", name="Comment_pkey"),
    )


def downgrade() -> None:
    op.drop_table("Comment")
    op.drop_table("Link")
    op.drop_table("User")
