"""Test configuration for database e2e tests.

This module provides fixtures for testing data entries against a SQLite
database file, with a fresh session per unit of work.
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from recordkit.core.database import create_all, create_engine, create_sessionmaker


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """Get the test database URL, the driver is filled in by ``create_engine``."""
    return f"sqlite:///{tmp_path / 'recordkit.db'}"


@pytest.fixture
async def file_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(database_url)
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def new_session(file_engine: AsyncEngine) -> Callable[[], AsyncSession]:
    """Session factory, each test opens as many independent sessions as it needs."""
    return create_sessionmaker(file_engine)
