"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="function")
def test_database_url(tmp_path: Path) -> str:
    """A throwaway SQLite database file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'hackernews.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(test_database_url: str) -> Any:
    """Point the shared engine at a fresh database with all tables created."""
    from hackernews.database.connection import (
        dispose_database,
        get_async_engine,
        init_database,
        reset_database,
    )
    from hackernews.dbmodels import Base

    os.environ["HACKERNEWS_DATABASE_URL"] = test_database_url

    reset_database()
    init_database(test_database_url, force_reinit=True)

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_database_url

    await dispose_database()
    reset_database()


@pytest.fixture(scope="function")
def execute(database: str):
    """
    Run a GraphQL document against the schema with a fresh request context.

    Pass `current_user` to act as an authenticated user.
    """
    from hackernews.database.connection import get_async_session
    from hackernews.graphql.loaders import Loaders
    from hackernews.graphql.schema import schema

    async def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        current_user: Any = None,
    ):
        context = {
            "request": None,
            "db": get_async_session,
            "current_user": current_user,
            "loaders": Loaders(get_async_session),
        }
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
