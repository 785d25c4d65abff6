"""
Plugin data entry.

Plugins are registered by vendor and class path. The core plugin is special:
it always has priority 0 and can never be disabled.
"""

from __future__ import annotations

import re
from typing import Optional

from recordkit.core.database.data_entry import DataEntry
from recordkit.core.database.entities import PluginRecord
from recordkit.core.database.fields import CreatedByMixin, NameDescriptionMixin, PriorityMixin
from recordkit.core.errors import OutOfBoundsError

CORE_PLUGIN = "Phoundation"
DEFAULT_PRIORITY = 50

_CLASS_PATH = re.compile(r"^Plugins([\\.])[A-Za-z_][A-Za-z0-9_]*(\1[A-Za-z_][A-Za-z0-9_]*)*\1Plugin$")


class Plugin(NameDescriptionMixin, PriorityMixin, CreatedByMixin, DataEntry):
    entity = PluginRecord
    entry_name = "plugin"
    unique_column = "name"
    readonly_columns = ("class_path",)
    hidden_columns = ("directory",)

    def is_core(self) -> bool:
        return self.get_name() == CORE_PLUGIN

    def set_priority(self, priority: Optional[int]) -> Plugin:
        """Set the load priority, 0 or ``None`` meaning the default of 50."""
        if self.is_core():
            priority = 0
        elif not priority:
            priority = DEFAULT_PRIORITY

        return super().set_priority(priority)

    def get_menu_priority(self) -> int:
        return self.get_typesafe("int", "menu_priority", DEFAULT_PRIORITY)

    def set_menu_priority(self, menu_priority: Optional[int]) -> Plugin:
        if menu_priority is None:
            menu_priority = DEFAULT_PRIORITY

        self._check_range("menu_priority", menu_priority, 0, 100)
        return self.set(menu_priority, "menu_priority")

    def get_enabled(self) -> bool:
        if self.is_core():
            return True
        return self.get_status() is None

    def set_enabled(self, enabled: bool) -> Plugin:
        if not enabled and self.is_core():
            raise OutOfBoundsError(f"Cannot disable the '{CORE_PLUGIN}' plugin, it is always enabled")

        return self.set(None if enabled else "disabled", "status", force=True)

    def get_disabled(self) -> bool:
        return not self.get_enabled()

    def get_vendor(self) -> Optional[str]:
        return self.get_typesafe("str|null", "vendor")

    def set_vendor(self, vendor: Optional[str]) -> Plugin:
        self._check_length("vendor", vendor, 128)
        return self.set(vendor, "vendor")

    def get_class_path(self) -> Optional[str]:
        return self.get_typesafe("str|null", "class_path")

    def set_class_path(self, class_path: Optional[str]) -> Plugin:
        """Set the plugin class path, e.g. ``Plugins\\Vendor\\Example\\Plugin``."""
        self._check_length("class_path", class_path, 1024)

        if class_path is not None and not _CLASS_PATH.match(class_path):
            raise OutOfBoundsError(f"Specified class path '{class_path}' is invalid, it should look like 'Plugins\\Vendor\\Name\\Plugin'")

        return self.set(class_path, "class_path")

    def get_directory(self) -> Optional[str]:
        return self.get_typesafe("str|null", "directory")

    def set_directory(self, directory: Optional[str]) -> Plugin:
        self._check_length("directory", directory, 255)
        return self.set(directory, "directory")

    def get_menu_enabled(self) -> bool:
        return self.get_typesafe("bool", "menu_enabled", True)

    def set_menu_enabled(self, menu_enabled: Optional[bool]) -> Plugin:
        return self.set(bool(menu_enabled), "menu_enabled")

    def get_commands_enabled(self) -> bool:
        return self.get_typesafe("bool", "commands_enabled", True)

    def set_commands_enabled(self, commands_enabled: Optional[bool]) -> Plugin:
        return self.set(bool(commands_enabled), "commands_enabled")

    def get_web_enabled(self) -> bool:
        return self.get_typesafe("bool", "web_enabled", True)

    def set_web_enabled(self, web_enabled: Optional[bool]) -> Plugin:
        return self.set(bool(web_enabled), "web_enabled")
