"""End-to-end tests for the Alembic migration scripts.

Tests verify that the initial migration script:
1. Creates all required tables with the columns the entities expect
2. Creates all required indexes
3. Seeds the core plugin
4. Can be downgraded and upgraded again
5. Produces a schema the repositories work with
"""

import pytest
import sqlalchemy as sa
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from recordkit.core.database.base import Base
from recordkit.core.database.repositories import DataEntryRepository
from recordkit.core.errors import OutOfBoundsError
from recordkit.core.models.domain import Incident, Plugin

REQUIRED_TABLES = ["accounts_users", "accounts_roles", "core_plugins", "security_incidents"]


class TestMigrationRevisions:
    def test_revision_chain(self, migrator):
        first = migrator.revisions[0]

        assert first.down_revision is None
        for previous, revision in zip(migrator.revisions, migrator.revisions[1:]):
            assert revision.down_revision == previous.revision


class TestMigrationExecution:
    """Test actual migration execution against a database."""

    def test_migration_creates_tables(self, migrator, sync_engine):
        migrator.upgrade()

        tables = inspect(sync_engine).get_table_names()
        for table in REQUIRED_TABLES:
            assert table in tables, f"Table {table} not found in database"

    def test_migration_creates_indexes(self, migrator, sync_engine):
        migrator.upgrade()

        inspector = inspect(sync_engine)
        for table in REQUIRED_TABLES:
            indexes = {index["name"] for index in inspector.get_indexes(table)}
            assert {f"ix_{table}_created_by", f"ix_{table}_status"} <= indexes, f"Indexes missing on {table}"

        severity = {index["name"] for index in inspector.get_indexes("security_incidents")}
        assert "ix_security_incidents_severity" in severity

    def test_migration_matches_entity_columns(self, migrator, sync_engine):
        import recordkit.core.database.entities  # noqa: F401

        migrator.upgrade()

        inspector = inspect(sync_engine)
        for table in REQUIRED_TABLES:
            migrated = {column["name"] for column in inspector.get_columns(table)}
            declared = {column.name for column in Base.metadata.tables[table].columns}
            assert migrated == declared, f"Columns of {table} differ from the entity"

    def test_migration_seeds_core_plugin(self, migrator, sync_engine):
        migrator.upgrade()

        with sync_engine.connect() as connection:
            rows = connection.execute(
                text("SELECT name, seo_name, priority, status FROM core_plugins")
            ).all()

        assert rows == [("Phoundation", "phoundation", 0, None)]

    def test_downgrade_drops_everything(self, migrator, sync_engine):
        migrator.upgrade()
        migrator.downgrade()

        assert inspect(sync_engine).get_table_names() == []

    def test_upgrade_after_downgrade(self, migrator, sync_engine):
        migrator.upgrade()
        migrator.downgrade()
        migrator.upgrade()

        with sync_engine.connect() as connection:
            count = connection.execute(sa.select(sa.func.count()).select_from(sa.table("core_plugins"))).scalar()

        assert count == 1


class TestMigratedSchemaWithRepositories:
    @pytest.fixture
    async def migrated_session(self, migrator, database_url):
        migrator.upgrade()

        engine = create_async_engine(database_url)
        async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with async_session() as session:
            yield session
        await engine.dispose()

    async def test_load_seeded_plugin(self, migrated_session):
        plugins = DataEntryRepository(migrated_session, Plugin)

        core = await plugins.load("Phoundation")

        assert core.is_core()
        assert core.get_priority() == 0
        assert core.get_enabled()

    async def test_seeded_names_stay_unique(self, migrated_session):
        plugins = DataEntryRepository(migrated_session, Plugin)

        with pytest.raises(OutOfBoundsError):
            await plugins.create(Plugin().set_name("Phoundation"))

        other = await plugins.create(Plugin().set_name("Phoundation!"))
        assert other.get_seo_name() == "phoundation1"

    async def test_incident_round_trip(self, migrated_session):
        incidents = DataEntryRepository(migrated_session, Incident)

        saved = await incidents.create(Incident().set_title("Blocked").set_details({"ip": "10.0.0.1"}))
        loaded = await incidents.load(saved.get_id())

        assert loaded.get_details() == {"ip": "10.0.0.1"}
