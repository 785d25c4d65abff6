"""
User data entry.
"""

from __future__ import annotations

from typing import Optional

from recordkit.core.database.data_entry import DataEntry
from recordkit.core.database.entities import UserRecord
from recordkit.core.database.fields import (
    CreatedByMixin,
    DataMixin,
    EmailMixin,
    FirstNamesMixin,
    LastNamesMixin,
    NicknameMixin,
    PriorityMixin,
)


class User(
    EmailMixin,
    NicknameMixin,
    FirstNamesMixin,
    LastNamesMixin,
    PriorityMixin,
    DataMixin,
    CreatedByMixin,
    DataEntry,
):
    """A user account. The password hash is never exposed through the generic API."""

    entity = UserRecord
    entry_name = "user"
    unique_column = "email"
    protected_columns = ("password",)
    hidden_columns = ("data",)
    json_columns = ("data",)
    priority_min = 1
    priority_max = 9

    def get_is_leader(self) -> bool:
        return self.get_typesafe("bool", "is_leader", False)

    def set_is_leader(self, is_leader: Optional[bool]) -> User:
        return self.set(bool(is_leader), "is_leader")

    def get_display_name(self) -> str:
        """Nickname, full name or email address, whichever is available first."""
        nickname = self.get_nickname()
        if nickname:
            return nickname

        full_name = " ".join(part for part in (self.get_first_names(), self.get_last_names()) if part)
        if full_name:
            return full_name

        return self.get_email() or super().get_display_name()
