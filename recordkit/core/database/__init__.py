"""
Database layer for recordkit.

This package holds the SQLModel table entities, the ``DataEntry`` active-record
wrapper with its field mixins, and the async repositories that persist entries.

Structure:
- entities/: SQLModel table entities
- fields/: Typed accessor mixins for data entries
- repositories/: Data access layer
- data_entry.py: The ``DataEntry`` base class
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, table creation)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
]
