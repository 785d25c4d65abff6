"""Concrete data entries."""

from .incidents import Incident
from .plugins import CORE_PLUGIN, Plugin
from .roles import Role
from .users import User

__all__ = [
    "CORE_PLUGIN",
    "Incident",
    "Plugin",
    "Role",
    "User",
]
