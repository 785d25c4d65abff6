"""
Numeric field accessors.
"""

from __future__ import annotations

from typing import ClassVar, Optional

PRIORITY_MIN = 0
PRIORITY_MAX = 100


class PriorityMixin:
    """Integer ``priority`` column limited to ``priority_min..priority_max``.

    Entries may narrow the range by overriding the class attributes.
    """

    priority_min: ClassVar[int] = PRIORITY_MIN
    priority_max: ClassVar[int] = PRIORITY_MAX

    def get_priority(self) -> Optional[int]:
        return self.get_typesafe("int|null", "priority")

    def set_priority(self, priority: Optional[int]):
        self._check_range("priority", priority, self.priority_min, self.priority_max)
        return self.set(priority, "priority")
