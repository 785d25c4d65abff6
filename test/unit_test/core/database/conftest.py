"""Test configuration for database unit tests.

This module provides common fixtures for testing data entries and their
repository against an in-memory SQLite database.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from recordkit.core.database import create_all
from recordkit.core.database.repositories import DataEntryRepository
from recordkit.core.models.domain import Incident, Plugin, Role, User


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async_session = sessionmaker(
        bind=in_memory_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def plugins(in_memory_session: AsyncSession) -> DataEntryRepository[Plugin]:
    return DataEntryRepository(in_memory_session, Plugin)


@pytest.fixture
def roles(in_memory_session: AsyncSession) -> DataEntryRepository[Role]:
    return DataEntryRepository(in_memory_session, Role)


@pytest.fixture
def users(in_memory_session: AsyncSession) -> DataEntryRepository[User]:
    return DataEntryRepository(in_memory_session, User)


@pytest.fixture
def incidents(in_memory_session: AsyncSession) -> DataEntryRepository[Incident]:
    return DataEntryRepository(in_memory_session, Incident)


@pytest.fixture
def sample_plugin() -> Plugin:
    """An unsaved, valid plugin."""
    return (
        Plugin()
        .set_name("Foo Bar")
        .set_vendor("Acme")
        .set_class_path("Plugins\\Acme\\FooBar\\Plugin")
        .set_description("Adds foo to the bar")
    )
