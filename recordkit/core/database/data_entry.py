"""
Data entry base class.

A ``DataEntry`` wraps one row of a SQLModel table entity as an in-memory source
mapping. Field mixins (see ``recordkit.core.database.fields``) add typed
``get_*`` / ``set_*`` accessors on top of the generic ``get_typesafe`` and
``set`` methods defined here. Persistence is handled by
``recordkit.core.database.repositories.DataEntryRepository``.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic.fields import FieldInfo

from recordkit.core.errors import (
    DataEntryError,
    OutOfBoundsError,
    ProtectedColumnError,
    UndefinedColumnError,
)
from recordkit.core.logging_config import get_logger
from recordkit.core.utils import typesafe

from .base import Base

logger = get_logger(__name__)

EntryType = TypeVar("EntryType", bound="DataEntry")

META_COLUMNS: Tuple[str, ...] = ("id", "created_on", "created_by", "status")


class DataEntry:
    """Active-record style wrapper around a single table row.

    Subclasses set ``entity`` to their SQLModel table class and mix in the
    field accessors they need::

        class Role(NameDescriptionMixin, DataEntry):
            entity = RoleRecord
            entry_name = "role"
            unique_column = "name"
    """

    entity: ClassVar[Type[Base]]
    entry_name: ClassVar[str] = "entry"
    unique_column: ClassVar[Optional[str]] = None
    meta_columns: ClassVar[Tuple[str, ...]] = META_COLUMNS
    protected_columns: ClassVar[Tuple[str, ...]] = ()
    readonly_columns: ClassVar[Tuple[str, ...]] = ()
    hidden_columns: ClassVar[Tuple[str, ...]] = ()
    json_columns: ClassVar[Tuple[str, ...]] = ()
    column_choices: ClassVar[Dict[str, Sequence[str]]] = {}

    def __init__(self, source: Optional[Mapping[str, Any]] = None) -> None:
        self._source: Dict[str, Any] = self.defaults()
        self._changes: List[str] = []
        self._is_modified = False
        self._is_validated = False

        if source:
            self._load(source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.get_id()})"

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    @classmethod
    def definitions(cls) -> List[str]:
        """Return the ordered column names of this entry type."""
        return list(cls.entity.model_fields)

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Return a source mapping holding the column defaults of the entity."""
        return {
            column: field.get_default(call_default_factory=True)
            for column, field in cls.entity.model_fields.items()
        }

    @classmethod
    def field(cls, column: str) -> FieldInfo:
        """Return the pydantic field definition for ``column``."""
        try:
            return cls.entity.model_fields[column]
        except KeyError:
            raise UndefinedColumnError(cls.entry_name, column) from None

    @classmethod
    def new_from_source(cls: Type[EntryType], source: Mapping[str, Any]) -> EntryType:
        """Create a new, unsaved entry and set every column through ``set``."""
        entry = cls()
        for column, value in source.items():
            entry.set(value, column)
        return entry

    @classmethod
    def from_entity(cls: Type[EntryType], entity: Base) -> EntryType:
        """Create an entry from a loaded table row."""
        return cls(entity.model_dump())

    def to_entity(self) -> Base:
        """Build a table entity instance from the current source."""
        return self.entity(**self._source)

    # ------------------------------------------------------------------
    # Generic access
    # ------------------------------------------------------------------

    def _check_column(self, column: str) -> None:
        if not column:
            raise DataEntryError(f"No column specified for {self.entry_name} entry")

        if column in self.protected_columns:
            raise ProtectedColumnError(self.entry_name, column)

        if column not in self._source:
            raise UndefinedColumnError(self.entry_name, column)

    def _load(self, source: Mapping[str, Any]) -> None:
        for column, value in source.items():
            if column not in self._source:
                raise UndefinedColumnError(self.entry_name, column)
            self._source[column] = value

    def get(self, column: str) -> Any:
        """Return the raw value of ``column``."""
        self._check_column(column)
        return self._source[column]

    def get_typesafe(self, types: str, column: str, default: Any = None) -> Any:
        """Return the value of ``column`` if it matches ``types``.

        Args:
            types: ``|`` separated type names, e.g. ``"str|null"``
            column: Column to read
            default: Returned when the column is ``None``

        Returns:
            The typed value, the default, or ``None`` on a type mismatch
        """
        self._check_column(column)
        return typesafe(types, self._source[column], default)

    def set(self: EntryType, value: Any, column: str, force: bool = False) -> EntryType:
        """Write ``value`` into ``column``.

        Meta columns are skipped unless ``force`` is set. Readonly columns can
        only be written on new entries.

        Raises:
            DataEntryError: For empty, protected or undefined columns
            OutOfBoundsError: For readonly columns of an existing entry
        """
        self._check_column(column)

        if not force:
            if column in self.meta_columns:
                return self

            if column in self.readonly_columns and not self.is_new():
                raise OutOfBoundsError(f"Column '{column}' of {self.entry_name} entries is readonly")

        if column not in self._changes:
            self._changes.append(column)

        if self._source[column] != value:
            self._is_modified = True

        self._source[column] = value
        self._is_validated = False
        return self

    def get_source(self, filter_meta: bool = False) -> Dict[str, Any]:
        """Return a copy of the source mapping.

        Protected columns are never part of it, only ``to_entity()`` sees them.
        """
        return {
            column: value
            for column, value in self._source.items()
            if column not in self.protected_columns and not (filter_meta and column in self.meta_columns)
        }

    def get_source_keys(self, filter_meta: bool = False) -> List[str]:
        return list(self.get_source(filter_meta=filter_meta))

    def set_source(self: EntryType, source: Mapping[str, Any]) -> EntryType:
        """Reload the entry from ``source``, discarding pending changes."""
        self._source = self.defaults()
        self._load(source)
        self._changes = []
        self._is_modified = False
        self._is_validated = True
        return self

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def is_new(self) -> bool:
        return self._source.get("id") is None

    def is_modified(self) -> bool:
        return self._is_modified

    def is_validated(self) -> bool:
        return self._is_validated

    def get_changes(self) -> List[str]:
        return list(self._changes)

    def get_id(self) -> Optional[int]:
        return typesafe("int|null", self._source.get("id"))

    def get_status(self) -> Optional[str]:
        return typesafe("str|null", self._source.get("status"))

    def has_status(self, status: Optional[str]) -> bool:
        return self.get_status() == status

    def is_deleted(self) -> bool:
        return self.has_status("deleted")

    def get_created_on(self) -> Optional[datetime]:
        return typesafe("datetime|null", self._source.get("created_on"))

    def get_created_by(self) -> Optional[int]:
        return typesafe("int|null", self._source.get("created_by"))

    def get_unique_column_value(self) -> Any:
        """Return the value of the unique column, falling back to the id."""
        if self.unique_column:
            value = self._source.get(self.unique_column)
            if value is not None:
                return value
        return self.get_id()

    def get_display_name(self) -> str:
        """Return a human readable name for this entry."""
        for column in ("name", "title"):
            value = self._source.get(column)
            if value:
                return str(value)

        if self.unique_column and self._source.get(self.unique_column):
            return str(self._source[self.unique_column])

        return f"{self.entry_name.capitalize()} #{self.get_id()}"

    # ------------------------------------------------------------------
    # JSON columns
    # ------------------------------------------------------------------

    def get_json(self, column: str, default: Any = None) -> Any:
        """Decode the JSON text stored in ``column``.

        A value that is not valid JSON is logged and returned as is.
        """
        value = self.get(column)
        if value is None or value == "":
            return default

        if not isinstance(value, str):
            return value

        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Failed to decode JSON column '{column}' of {self!r}, returning raw value: {e}")
            return value

    def set_json(self: EntryType, value: Any, column: str) -> EntryType:
        """Encode ``value`` as JSON text into ``column``."""
        if value is None or isinstance(value, str):
            return self.set(value, column)
        return self.set(json.dumps(value, default=str), column)

    # ------------------------------------------------------------------
    # Validation helpers for the field mixins
    # ------------------------------------------------------------------

    def _check_length(self, column: str, value: Optional[str], maximum: int, minimum: int = 0) -> None:
        if value is None:
            return

        if len(value) > maximum:
            raise OutOfBoundsError(
                f"Specified {column} '{value[:32]}...' of {self.entry_name} is invalid, "
                f"it should be less than {maximum} characters"
            )

        if len(value) < minimum:
            raise OutOfBoundsError(
                f"Specified {column} '{value}' of {self.entry_name} is invalid, "
                f"it should be at least {minimum} characters"
            )

    def _check_range(self, column: str, value: Optional[int], minimum: int, maximum: int) -> None:
        if value is None:
            return

        if isinstance(value, bool) or not isinstance(value, int):
            raise OutOfBoundsError(f"Specified {column} '{value}' of {self.entry_name} is invalid, it should be an integer")

        if not minimum <= value <= maximum:
            raise OutOfBoundsError(
                f"Specified {column} '{value}' of {self.entry_name} is invalid, "
                f"it should be between {minimum} and {maximum}"
            )
