"""
Typed reads over loosely typed source values.

Data entries keep their columns in a plain mapping that is filled from database
rows, JSON payloads and form posts, so the same column can hold ``"12"`` or
``12``. ``typesafe`` returns the value only when it matches (or safely coerces
to) one of the requested types.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from recordkit.core.errors import OutOfBoundsError

_INTEGER = re.compile(r"^[+-]?\d+$")
_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

_MISMATCH = object()


def _as_str(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (bool, int, float)):
        return _MISMATCH
    if type(value).__str__ is not object.__str__:
        return str(value)
    return _MISMATCH


def _as_int(value: Any) -> Any:
    if isinstance(value, bool):
        return _MISMATCH
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.match(value.strip()):
        return int(value)
    return _MISMATCH


def _as_float(value: Any) -> Any:
    if isinstance(value, bool):
        return _MISMATCH
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _FLOAT.match(value.strip()):
        return float(value)
    return _MISMATCH


def _as_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    return _MISMATCH


def _as_scalar(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)):
        return value
    return _MISMATCH


def _as_list(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    return _MISMATCH


def _as_dict(value: Any) -> Any:
    return value if isinstance(value, dict) else _MISMATCH


def _as_datetime(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return _MISMATCH
    return _MISMATCH


def _as_null(value: Any) -> Any:
    return _MISMATCH


CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "str": _as_str,
    "int": _as_int,
    "float": _as_float,
    "bool": _as_bool,
    "scalar": _as_scalar,
    "list": _as_list,
    "dict": _as_dict,
    "datetime": _as_datetime,
    "null": _as_null,
}


def parse_types(types: str) -> Tuple[str, ...]:
    """Split a ``str|int`` style type list and validate every name.

    Raises:
        OutOfBoundsError: For empty lists or unknown type names.
    """
    names = tuple(name.strip() for name in types.split("|") if name.strip())
    if not names:
        raise OutOfBoundsError("No types specified")

    unknown: List[str] = [name for name in names if name not in CONVERTERS]
    if unknown:
        raise OutOfBoundsError(f"Unknown type(s) {', '.join(unknown)} specified, use one of {', '.join(CONVERTERS)}")

    return names


def coerce(types: str, value: Any) -> Optional[Any]:
    """Return ``value`` converted to the first matching type, or ``None``."""
    for name in parse_types(types):
        converted = CONVERTERS[name](value)
        if converted is not _MISMATCH:
            return converted
    return None


def typesafe(types: str, value: Any, default: Any = None) -> Any:
    """
    Return ``value`` if it matches ``types``, the default if it is ``None``.

    Args:
        types: ``|`` separated type names, e.g. ``"int|null"``
        value: The raw value
        default: Returned when ``value`` is ``None``. Must match ``types`` itself.

    Returns:
        The (coerced) value, the default, or ``None`` for a type mismatch

    Raises:
        OutOfBoundsError: When the default does not match the requested types
    """
    if value is None:
        if default is None:
            return None

        converted = coerce(types, default)
        if converted is None:
            raise OutOfBoundsError(f"Specified default '{default}' does not match the requested type(s) '{types}'")
        return converted

    return coerce(types, value)
