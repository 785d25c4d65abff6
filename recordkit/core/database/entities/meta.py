"""
Shared meta columns.

Every data entry table carries the same four meta columns. They are managed by
the repositories and can only be written through the data entry API when the
write is forced.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base


class MetaColumns(Base):
    """Meta columns shared by all data entry tables."""

    id: Optional[int] = Field(default=None, primary_key=True)
    created_on: Optional[datetime] = Field(default=None, description="Creation time")
    created_by: Optional[int] = Field(default=None, index=True, description="Id of the user that created the entry")
    status: Optional[str] = Field(default=None, max_length=16, index=True, description="Status, NULL meaning active")
