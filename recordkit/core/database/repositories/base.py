"""
Base repository interfaces and utilities.

This module provides the foundational repository pattern and query helpers
used by the repository implementations in the database layer. Built with
async SQLAlchemy sessions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

# Generic type for the items a repository hands out
ItemType = TypeVar("ItemType")


class AsyncBaseRepository(ABC, Generic[ItemType]):
    """Base async repository interface with common CRUD operations."""

    def __init__(self, session: AsyncSession, model: Type[SQLModel]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class backing this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, item: ItemType) -> ItemType:
        """Create a new record.

        Args:
            item: Item to persist

        Returns:
            Persisted item with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[ItemType]:
        """Get an item by its primary identifier.

        Args:
            item_id: Primary key value

        Returns:
            Item instance or None if not found
        """

    @abstractmethod
    async def update(self, item: ItemType) -> ItemType:
        """Update an existing record.

        Args:
            item: Item with updated fields

        Returns:
            Updated item
        """

    @abstractmethod
    async def delete(self, item: ItemType) -> ItemType:
        """Delete an item.

        Args:
            item: Item to delete

        Returns:
            The deleted item
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[ItemType]:
        """List items with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of items
        """


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[SQLModel], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters, ``None`` values are ignored

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
