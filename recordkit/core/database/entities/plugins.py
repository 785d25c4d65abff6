"""
Plugin entity models.

Plugins register a vendor class path and the menu, command and web features
they provide.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from .meta import MetaColumns


class PluginRecord(MetaColumns, table=True):
    """Persistent plugin registration.

    Table: core_plugins
    """

    __tablename__ = "core_plugins"
    __table_args__ = ({"extend_existing": True},)

    name: Optional[str] = Field(default=None, max_length=128, unique=True, description="Name")
    seo_name: Optional[str] = Field(default=None, max_length=128, unique=True, description="SEO name")
    vendor: Optional[str] = Field(default=None, max_length=128, description="Vendor")
    class_path: Optional[str] = Field(default=None, max_length=1024, description="Class path")
    directory: Optional[str] = Field(default=None, max_length=255, description="Directory")
    priority: int = Field(default=50, ge=0, le=100, description="Priority")
    menu_priority: int = Field(default=50, ge=0, le=100, description="Menu priority")
    menu_enabled: bool = Field(default=True, description="Menu enabled")
    commands_enabled: bool = Field(default=True, description="Commands enabled")
    web_enabled: bool = Field(default=True, description="Web enabled")
    description: Optional[str] = Field(default=None, max_length=65535, description="Description")

    def __repr__(self) -> str:
        return f"PluginRecord(id={self.id}, name={self.name}, vendor={self.vendor})"
