"""
Account entity models.

This module contains the database entities for users and roles.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from .meta import MetaColumns


class UserRecord(MetaColumns, table=True):
    """Persistent user account.

    Table: accounts_users
    """

    __tablename__ = "accounts_users"
    __table_args__ = ({"extend_existing": True},)

    email: Optional[str] = Field(default=None, max_length=128, unique=True, description="Email address")
    nickname: Optional[str] = Field(default=None, max_length=64, description="Nickname")
    first_names: Optional[str] = Field(default=None, max_length=127, description="First names")
    last_names: Optional[str] = Field(default=None, max_length=127, description="Last names")
    password: Optional[str] = Field(default=None, max_length=255, description="Password hash")
    priority: Optional[int] = Field(default=None, description="Priority")
    is_leader: bool = Field(default=False, description="Is leader")
    data: Optional[str] = Field(default=None, description="Additional JSON data")

    def __repr__(self) -> str:
        return f"UserRecord(id={self.id}, email={self.email})"


class RoleRecord(MetaColumns, table=True):
    """Persistent role.

    Table: accounts_roles
    """

    __tablename__ = "accounts_roles"
    __table_args__ = ({"extend_existing": True},)

    name: Optional[str] = Field(default=None, max_length=128, unique=True, description="Name")
    seo_name: Optional[str] = Field(default=None, max_length=128, unique=True, description="SEO name")
    description: Optional[str] = Field(default=None, max_length=65535, description="Description")

    def __repr__(self) -> str:
        return f"RoleRecord(id={self.id}, name={self.name})"
