#!/usr/bin/env python3
"""
CLI entry point for Hacker News database migrations.
"""

import asyncio
import sys
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from hackernews import __version__
from hackernews.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Locate alembic.ini at the project root."""
    project_dir = Path(__file__).parent.parent.parent.parent
    alembic_ini = project_dir / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(project_dir / "alembic"))
    return config


def _run_alembic(action: str, func, *args, **kwargs) -> None:
    try:
        func(get_alembic_config(), *args, **kwargs)
    except Exception as e:
        logger.error(f"Database {action} failed", error=str(e))
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="hackernews-migrate")
def main(log_level: str) -> None:
    """Hacker News database migration management."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    logger.info("Upgrading database", revision=revision)
    _run_alembic("upgrade", command.upgrade, revision)
    logger.info("Database upgrade completed successfully")


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    logger.info("Downgrading database", revision=revision)
    _run_alembic("downgrade", command.downgrade, revision)
    logger.info("Database downgrade completed successfully")


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Auto-generate migration")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration revision."""
    logger.info("Creating new migration", message=message, autogenerate=autogenerate)
    _run_alembic("revision", command.revision, message=message, autogenerate=autogenerate)


@main.command()
def current() -> None:
    """Show current database revision."""
    _run_alembic("current", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    _run_alembic("history", command.history)


@main.command()
def check() -> None:
    """Check that the configured database accepts connections."""
    from hackernews.database.connection import (
        dispose_database,
        init_database,
        test_database_connection,
    )

    async def do_check() -> tuple[bool, str | None]:
        init_database()
        try:
            return await test_database_connection()
        finally:
            await dispose_database()

    ok, error = asyncio.run(do_check())
    if not ok:
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)
    click.echo("✓ Database connection successful")


if __name__ == "__main__":
    main()
