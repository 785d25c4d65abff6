"""
Database repository layer.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- data_entries: Repository that loads and saves ``DataEntry`` objects
"""

from .base import AsyncBaseRepository, QueryBuilder
from .data_entries import DataEntryRepository

__all__ = [
    "AsyncBaseRepository",
    "DataEntryRepository",
    "QueryBuilder",
]
