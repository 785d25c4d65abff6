"""
Security incident data entry.
"""

from __future__ import annotations

from typing import Any

from recordkit.core.database.data_entry import DataEntry
from recordkit.core.database.entities import IncidentRecord
from recordkit.core.database.fields import (
    BodyMixin,
    CreatedByMixin,
    DataMixin,
    DetailsMixin,
    ExceptionMixin,
    Severity,
    SeverityMixin,
    TitleMixin,
    TypeMixin,
    UrlMixin,
)


class Incident(
    TypeMixin,
    SeverityMixin,
    TitleMixin,
    BodyMixin,
    DetailsMixin,
    UrlMixin,
    ExceptionMixin,
    DataMixin,
    CreatedByMixin,
    DataEntry,
):
    """A security incident. Everything but the meta columns is fixed once saved."""

    entity = IncidentRecord
    entry_name = "security incident"
    readonly_columns = ("type", "severity", "title", "body", "details", "url", "exception", "data")
    json_columns = ("details", "data")
    hidden_columns = ("exception", "data")
    column_choices = {"severity": [severity.value for severity in Severity]}

    def get_details_text(self) -> str:
        """Render the details as aligned ``key : value`` lines."""
        details: Any = self.get_details()
        if details is None:
            return ""

        if not isinstance(details, dict):
            return str(details)

        width = max((len(str(key)) for key in details), default=0)
        return "\n".join(f"{str(key).ljust(width)} : {value}" for key, value in details.items())
