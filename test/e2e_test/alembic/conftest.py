"""Test configuration for the Alembic migration e2e tests.

Migrations run through Alembic's ``Operations`` API against a SQLite database
file, so no server and no ``alembic.ini`` are needed.
"""

from __future__ import annotations

import importlib.util
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Iterator

import pytest
import sqlalchemy as sa
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
VERSIONS_DIR = PROJECT_ROOT / "alembic" / "versions"


def load_revisions() -> list[ModuleType]:
    """Load every revision script, ordered by file name."""
    modules = []
    for path in sorted(VERSIONS_DIR.glob("*.py")):
        spec = importlib.util.spec_from_file_location(f"recordkit_migration_{path.stem}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        modules.append(module)
    return modules


@contextmanager
def operations(engine: sa.Engine) -> Iterator[None]:
    """Bind ``alembic.op`` to a connection of ``engine`` inside one transaction."""
    with engine.begin() as connection:
        context = MigrationContext.configure(connection)
        with Operations.context(context):
            yield


class Migrator:
    def __init__(self, engine: sa.Engine) -> None:
        self.engine = engine
        self.revisions = load_revisions()

    def upgrade(self) -> None:
        with operations(self.engine):
            for revision in self.revisions:
                revision.upgrade()

    def downgrade(self) -> None:
        with operations(self.engine):
            for revision in reversed(self.revisions):
                revision.downgrade()


@pytest.fixture
def sync_database_url(tmp_path: Path) -> str:
    """Get a sync database URL for a fresh SQLite file."""
    return f"sqlite:///{tmp_path / 'migration.db'}"


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """Get the async URL of the same SQLite file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'migration.db'}"


@pytest.fixture
def sync_engine(sync_database_url: str) -> Iterator[sa.Engine]:
    engine = sa.create_engine(sync_database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def migrator(sync_engine: sa.Engine) -> Migrator:
    return Migrator(sync_engine)
