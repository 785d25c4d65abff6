"""
Data entry repository.

Loads and saves ``DataEntry`` objects through their SQLModel table entity.
Besides plain CRUD this repository keeps SEO names unique, fills the meta
columns and implements soft deletion through the ``status`` column.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

import sqlalchemy as sa
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from recordkit.core import seo
from recordkit.core.errors import (
    DataEntryError,
    DataEntryNotFoundError,
    OutOfBoundsError,
    UndefinedColumnError,
)
from recordkit.core.logging_config import get_logger

from ..base import utc_now
from ..data_entry import DataEntry
from .base import AsyncBaseRepository, QueryBuilder

logger = get_logger(__name__)

EntryType = TypeVar("EntryType", bound=DataEntry)

DELETED = "deleted"


class DataEntryRepository(AsyncBaseRepository[EntryType], Generic[EntryType]):
    """Repository for one ``DataEntry`` class."""

    def __init__(self, session: AsyncSession, entry_class: Type[EntryType]) -> None:
        """Initialize the repository.

        Args:
            session: Async SQLAlchemy session for database operations
            entry_class: The ``DataEntry`` subclass this repository loads and saves
        """
        super().__init__(session, entry_class.entity)
        self.entry_class = entry_class

    def _column(self, column: str):
        if column not in self.entry_class.definitions():
            raise UndefinedColumnError(self.entry_class.entry_name, column)
        return getattr(self.model, column)

    def _not_deleted(self, stmt):
        status = self._column("status")
        return stmt.where(sa.or_(status.is_(None), status != DELETED))

    def _identify(self, stmt, identifier: Union[int, str]):
        if isinstance(identifier, bool) or not isinstance(identifier, (int, str)):
            raise DataEntryError(f"Invalid {self.entry_class.entry_name} identifier '{identifier}'")

        if isinstance(identifier, int):
            return stmt.where(self._column("id") == identifier)

        if not self.entry_class.unique_column:
            raise DataEntryError(f"{self.entry_class.entry_name} entries have no unique column to load '{identifier}' by")

        return stmt.where(self._column(self.entry_class.unique_column) == identifier)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def get_by_id(self, item_id: int) -> Optional[EntryType]:
        return await self.load_or_none(item_id, ignore_deleted=True)

    async def load(self, identifier: Union[int, str], ignore_deleted: bool = False) -> EntryType:
        """Load an entry by id (int) or by its unique column (str).

        Args:
            identifier: Row id, or the value of the entry's unique column
            ignore_deleted: Also return entries with status ``deleted``

        Returns:
            The loaded entry

        Raises:
            DataEntryNotFoundError: If the row does not exist or is deleted
        """
        result = await self.session.execute(self._identify(select(self.model), identifier))
        row = result.scalar_one_or_none()

        if row is None:
            raise DataEntryNotFoundError(self.entry_class.entry_name, identifier)

        if row.status == DELETED and not ignore_deleted:
            raise DataEntryNotFoundError(self.entry_class.entry_name, identifier, "is deleted")

        return self.entry_class.from_entity(row)

    async def load_or_none(self, identifier: Union[int, str], ignore_deleted: bool = False) -> Optional[EntryType]:
        try:
            return await self.load(identifier, ignore_deleted=ignore_deleted)
        except DataEntryNotFoundError:
            return None

    async def exists(self, identifier: Union[int, str], not_id: Optional[int] = None) -> bool:
        """Return whether a row with this id or unique value exists, optionally ignoring row ``not_id``."""
        stmt = self._identify(select(self._column("id")), identifier)
        if not_id is not None:
            stmt = stmt.where(self._column("id") != not_id)

        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        include_deleted: bool = False,
    ) -> List[EntryType]:
        """List entries ordered by id.

        Args:
            limit: Maximum number of entries to return
            offset: Number of entries to skip
            filters: Column equality filters
            include_deleted: Also return entries with status ``deleted``

        Returns:
            List of entries
        """
        stmt = select(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        if not include_deleted:
            stmt = self._not_deleted(stmt)
        stmt = QueryBuilder.apply_pagination(stmt.order_by(self._column("id")), limit, offset)

        result = await self.session.execute(stmt)
        return [self.entry_class.from_entity(row) for row in result.scalars().all()]

    async def select_rows(
        self,
        *columns: str,
        filters: Optional[Dict[str, Any]] = None,
        include_deleted: bool = False,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Result:
        """Select raw rows, e.g. as the source query of an ``HtmlTable``.

        The id column is always selected first so it can serve as the row id.

        Args:
            columns: Columns to select, all non protected columns by default

        Returns:
            A buffered SQLAlchemy result
        """
        if not columns:
            columns = tuple(
                column for column in self.entry_class.definitions() if column not in self.entry_class.protected_columns
            )

        columns = ("id",) + tuple(column for column in columns if column != "id")
        stmt = sa.select(*[self._column(column) for column in columns])
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        if not include_deleted:
            stmt = self._not_deleted(stmt)
        stmt = QueryBuilder.apply_pagination(stmt.order_by(self._column("id")), limit, offset)

        return await self.session.execute(stmt)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def _ensure_unique_seo_name(self, entry: EntryType) -> None:
        if "seo_name" not in entry.definitions():
            return

        seo_name = entry.get_typesafe("str|null", "seo_name")
        if not seo_name or (not entry.is_new() and "seo_name" not in entry.get_changes()):
            return

        column = self._column("seo_name")
        stmt = select(column).where(column.like(f"{seo_name}%"))
        if entry.get_id() is not None:
            stmt = stmt.where(self._column("id") != entry.get_id())

        result = await self.session.execute(stmt)
        taken = set(result.scalars().all())

        unique_name = seo.unique(seo_name, taken.__contains__)
        if unique_name != seo_name:
            logger.debug(f"SEO name '{seo_name}' of {entry.entry_name} is taken, using '{unique_name}'")
            entry.set(unique_name, "seo_name")

    async def _ensure_unique_value(self, entry: EntryType) -> None:
        column = entry.unique_column
        if not column:
            return

        value = entry.get_unique_column_value()
        if value is None or not isinstance(value, str):
            return

        if await self.exists(value, not_id=entry.get_id()):
            raise OutOfBoundsError(f"The {entry.entry_name} {column} '{value}' already exists")

    async def save(self, entry: EntryType, force: bool = False) -> EntryType:
        """Insert or update ``entry``.

        Existing entries without modifications are only written when forced.
        The entry is reloaded from the stored row afterwards.

        Args:
            entry: Entry to persist
            force: Write even if nothing changed

        Returns:
            The saved entry

        Raises:
            OutOfBoundsError: If the unique column value is already taken
            DataEntryNotFoundError: If an existing entry's row vanished
        """
        if not entry.is_new() and not entry.is_modified() and not force:
            logger.debug(f"Not saving {entry!r}, it has not been modified")
            return entry

        await self._ensure_unique_value(entry)
        await self._ensure_unique_seo_name(entry)

        if entry.is_new():
            entry.set(utc_now(), "created_on", force=True)
            row = entry.to_entity()
            self.session.add(row)
        else:
            row = await self.session.get(self.model, entry.get_id())
            if row is None:
                raise DataEntryNotFoundError(entry.entry_name, entry.get_id())

            values = entry.to_entity()
            for column in entry.get_changes():
                setattr(row, column, getattr(values, column))

        await self.session.commit()
        await self.session.refresh(row)

        entry.set_source(row.model_dump())
        logger.info(f"Saved {entry.entry_name} '{entry.get_display_name()}' with id {entry.get_id()}")
        return entry

    async def create(self, item: EntryType) -> EntryType:
        if not item.is_new():
            raise DataEntryError(f"Cannot create {item!r}, it already exists")
        return await self.save(item)

    async def update(self, item: EntryType) -> EntryType:
        if item.is_new():
            raise DataEntryError(f"Cannot update {item.entry_name}, it has not been saved yet")
        return await self.save(item)

    async def set_status(self, entry: EntryType, status: Optional[str]) -> EntryType:
        """Set the status meta column and write it immediately."""
        if entry.is_new():
            raise DataEntryError(f"Cannot set status of {entry.entry_name}, it has not been saved yet")

        entry.set(status, "status", force=True)
        return await self.save(entry, force=True)

    async def delete(self, item: EntryType) -> EntryType:
        """Soft delete ``item`` by setting its status to ``deleted``.

        Raises:
            OutOfBoundsError: If the entry has unsaved modifications
        """
        if item.is_modified():
            raise OutOfBoundsError(f"Cannot delete {item!r}, it has unsaved modifications")

        await self.set_status(item, DELETED)
        logger.info(f"Deleted {item.entry_name} {item.get_id()}")
        return item

    async def undelete(self, entry: EntryType) -> EntryType:
        if not entry.is_deleted():
            return entry
        return await self.set_status(entry, None)

    async def erase(self, entry: EntryType) -> None:
        """Permanently remove the row of ``entry`` from the database."""
        row = await self.session.get(self.model, entry.get_id()) if entry.get_id() is not None else None
        if row is None:
            raise DataEntryNotFoundError(entry.entry_name, entry.get_id())

        await self.session.delete(row)
        await self.session.commit()
        logger.info(f"Erased {entry.entry_name} {entry.get_id()}")
        entry.set(None, "id", force=True)
