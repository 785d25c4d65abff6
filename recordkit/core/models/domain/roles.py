"""
Role data entry.
"""

from __future__ import annotations

from recordkit.core.database.data_entry import DataEntry
from recordkit.core.database.entities import RoleRecord
from recordkit.core.database.fields import CreatedByMixin, NameDescriptionMixin


class Role(NameDescriptionMixin, CreatedByMixin, DataEntry):
    entity = RoleRecord
    entry_name = "role"
    unique_column = "name"
    name_max_length = 64
    description_max_length = 2047
