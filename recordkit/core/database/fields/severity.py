"""
Severity field accessors.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from recordkit.core.errors import OutOfBoundsError


class Severity(str, Enum):
    """Incident severity levels, ordered from least to most severe."""

    notice = "notice"
    low = "low"
    medium = "medium"
    high = "high"
    severe = "severe"
    unknown = "unknown"

    @classmethod
    def ordered(cls) -> List["Severity"]:
        return [cls.notice, cls.low, cls.medium, cls.high, cls.severe]

    @classmethod
    def parse(cls, value: Union[str, "Severity"]) -> "Severity":
        try:
            return cls(value)
        except ValueError:
            raise OutOfBoundsError(
                f"Unknown severity '{value}' specified, use one of {', '.join(member.value for member in cls)}"
            ) from None


class SeverityMixin:
    def get_severity(self) -> Optional[Severity]:
        value = self.get_typesafe("str|null", "severity")
        return None if value is None else Severity(value)

    def set_severity(self, severity: Union[str, Severity, None]):
        if severity is not None:
            severity = Severity.parse(severity).value
        return self.set(severity, "severity")

    def severity_is_equal_or_higher_than(self, severity: Union[str, Severity]) -> bool:
        """Compare against ``severity``.

        An ``unknown`` severity, on either side, is treated as severe.
        """
        severity = Severity.parse(severity)
        current = self.get_severity()

        if current is None:
            return False

        if severity is Severity.unknown or current is Severity.unknown:
            return True

        ordered = Severity.ordered()
        return ordered.index(current) >= ordered.index(severity)
