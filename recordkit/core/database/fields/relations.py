"""
Accessors that resolve related entries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from recordkit.core.models.domain.users import User


class CreatedByMixin:
    """Resolve the ``created_by`` meta column into a :class:`User`."""

    async def load_created_by_user(self, session: AsyncSession) -> Optional[User]:
        """Load the user that created this entry.

        Returns:
            The user, or ``None`` when the entry has no (existing) creator
        """
        from recordkit.core.database.repositories import DataEntryRepository
        from recordkit.core.models.domain.users import User

        users_id = self.get_created_by()
        if users_id is None:
            return None

        return await DataEntryRepository(session, User).load_or_none(users_id, ignore_deleted=True)

    def set_created_by(self, users_id: Optional[int]):
        """Force the creator, for entries created on behalf of a user."""
        return self.set(users_id, "created_by", force=True)
