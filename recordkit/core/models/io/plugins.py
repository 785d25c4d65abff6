"""
Plugin I/O models for API requests and responses.

Create payloads are only shape-checked here. Value rules (lengths, ranges,
class path format) are enforced by the ``Plugin`` entry setters.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PluginRead(BaseModel):
    """Schema for reading a plugin from the API."""

    id: int
    name: Optional[str] = Field(default=None, description="Plugin name")
    seo_name: Optional[str] = Field(default=None, description="Unique URL safe name")
    vendor: Optional[str] = Field(default=None, description="Vendor")
    class_path: Optional[str] = Field(default=None, description="Plugin class path")
    priority: int = Field(description="Load priority, 0 loads first")
    menu_priority: int = Field(description="Menu position priority")
    menu_enabled: bool
    commands_enabled: bool
    web_enabled: bool
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, description="Status, NULL meaning enabled")
    created_on: Optional[datetime] = None

    class Config:
        from_attributes = True


class PluginCreate(BaseModel):
    """Schema for registering a plugin via the API."""

    name: str = Field(description="Plugin name")
    vendor: Optional[str] = Field(default=None, description="Vendor")
    class_path: Optional[str] = Field(default=None, description="Plugin class path")
    priority: Optional[int] = Field(default=None, description="Load priority, defaults to 50")
    menu_priority: Optional[int] = Field(default=None, description="Menu priority, defaults to 50")
    enabled: bool = Field(default=True, description="Whether the plugin is enabled")
    description: Optional[str] = None
