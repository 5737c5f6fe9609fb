#!/usr/bin/env python3
"""
Main CLI entry point for the Hacker News backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from hackernews import __version__
from hackernews.config import settings
from hackernews.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="hackernews")
def cli() -> None:
    """Hacker News CLI - run the API server and manage sample data."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Hacker News API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Hacker News API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reloaded and worker processes import the app afresh and read these
    if log_level == "debug":
        os.environ["HACKERNEWS_DEBUG"] = "true"
        os.environ["HACKERNEWS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("HACKERNEWS_DEBUG", "false")
        os.environ.setdefault("HACKERNEWS_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "hackernews.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from hackernews.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option("--description", default="test link", show_default=True, help="Link description")
@click.option("--url", default="test link url", show_default=True, help="Link url")
def seed(description: str, url: str) -> None:
    """Insert a sample link, then print every stored link."""
    from hackernews.database.connection import dispose_database, get_async_session
    from hackernews.database.seed_data import list_all_links, seed_sample_link

    configure_logging()

    async def do_seed() -> None:
        try:
            async with get_async_session() as db:
                link = await seed_sample_link(db, description=description, url=url)
                click.echo(f"✓ Link created: {link.id}")

                links = await list_all_links(db)
                click.echo("::: all links :::")
                for stored in links:
                    click.echo(f"  {stored.id}\t{stored.description}\t{stored.url}")
        finally:
            await dispose_database()

    try:
        asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
