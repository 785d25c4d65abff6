"""Pydantic request/response schemas."""

from .incidents import IncidentCreate, IncidentRead
from .plugins import PluginCreate, PluginRead

__all__ = [
    "IncidentCreate",
    "IncidentRead",
    "PluginCreate",
    "PluginRead",
]
