"""
JSON field accessors.

Both columns are stored as JSON text. Reads that fail to decode are logged by
``DataEntry.get_json`` and return the raw string instead.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class DetailsMixin:
    def get_details(self) -> Any:
        return self.get_json("details")

    def set_details(self, details: Any):
        return self.set_json(details, "details")

    def add_details(self, details: Mapping[str, Any]):
        """Merge ``details`` into the existing details mapping."""
        current = self.get_details()
        if not isinstance(current, dict):
            current = {} if current is None else {"details": current}

        current.update(details)
        return self.set_details(current)


class DataMixin:
    def get_data(self) -> Optional[Any]:
        return self.get_json("data")

    def set_data(self, data: Any):
        return self.set_json(data, "data")
