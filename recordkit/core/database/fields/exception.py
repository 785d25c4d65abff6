"""
Exception field accessors.
"""

from __future__ import annotations

import traceback
from typing import Optional, Union


class ExceptionMixin:
    def get_exception(self) -> Optional[str]:
        return self.get_typesafe("str|null", "exception")

    def set_exception(self, exception: Union[BaseException, str, None]):
        """Store an exception as its formatted traceback, or a plain message."""
        if isinstance(exception, BaseException):
            exception = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
        return self.set(exception, "exception")
