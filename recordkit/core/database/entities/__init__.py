"""
SQLModel table entities.

Importing this package registers every table on ``Base.metadata``.
"""

from .accounts import RoleRecord, UserRecord
from .incidents import IncidentRecord
from .meta import MetaColumns
from .plugins import PluginRecord

__all__ = [
    "IncidentRecord",
    "MetaColumns",
    "PluginRecord",
    "RoleRecord",
    "UserRecord",
]
