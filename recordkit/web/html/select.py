"""
Select element.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError

from .attributes import format_attributes
from .resource import ResourceElement


class InputSelect(ResourceElement):
    """A ``<select>`` rendered from a ``key -> value`` source or a query.

    Query rows use ``key_column`` and ``value_column``, defaulting to the first
    and the last column. Source values that are mappings (or data entries)
    need a ``value_column``. ``source_data`` maps option keys to mappings of
    ``data-*`` values for that option.

    Example:
        >>> InputSelect().set_name("severity").set_source({"low": "Low", "high": "High"}).set_selected("high")
    """

    element = "select"

    def __init__(self) -> None:
        super().__init__()
        self.none = "Select an option"
        self.empty = "No options available"
        self.multiple = False
        self.key_column: Optional[str] = None
        self.value_column: Optional[str] = None
        self._option_classes: List[str] = []
        self._selected: Dict[str, bool] = {}

    def set_multiple(self, multiple: bool) -> InputSelect:
        self.multiple = bool(multiple)
        return self.set_attribute("multiple", self.multiple)

    def set_key_column(self, key_column: Optional[str]) -> InputSelect:
        self.key_column = key_column
        return self

    def set_value_column(self, value_column: Optional[str]) -> InputSelect:
        self.value_column = value_column
        return self

    def add_option_class(self, *classes: str) -> InputSelect:
        for value in classes:
            self._option_classes.extend(str(value).split())
        return self

    @property
    def option_class(self) -> Optional[str]:
        return " ".join(self._option_classes) or None

    @property
    def selected(self) -> List[str]:
        return list(self._selected)

    def set_selected(self, selected: Union[Any, Iterable[Any], None], is_value: bool = False) -> InputSelect:
        """Select options by key, or by value when ``is_value`` is set.

        Raises:
            OutOfBoundsError: When several options are selected on a single select
        """
        self._selected = {}
        if selected is None:
            return self

        if isinstance(selected, (list, tuple, set)):
            if not self.multiple and len(selected) > 1:
                raise OutOfBoundsError(f"Cannot select multiple options on select '{self.name}', it is not a multiple select")
            items = list(selected)
        else:
            items = [selected]

        for item in items:
            self._selected[str(item)] = is_value
        return self

    def _is_selected(self, key: Any, value: Any) -> bool:
        key = "" if key is None else str(key)
        if key in self._selected and not self._selected[key]:
            return True

        value = "" if value is None else str(value)
        return self._selected.get(value, False)

    def set_readonly(self, readonly: bool) -> InputSelect:
        """Selects cannot be readonly in HTML, a readonly select is disabled instead."""
        super().set_readonly(readonly)
        return self.set_disabled(readonly) if readonly else self

    def collect_attributes(self) -> Dict[str, Any]:
        attributes = super().collect_attributes()
        attributes["readonly"] = None
        return attributes

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _option_value(self, key: Any, value: Any) -> Any:
        if hasattr(value, "get_source"):
            value = value.get_source()

        if isinstance(value, Mapping):
            if not self.value_column:
                raise OutOfBoundsError(f"Select '{self.name}' source contains mappings, but no value column was specified")
            if self.value_column not in value:
                raise OutOfBoundsError(f"Select '{self.name}' source row '{key}' has no column '{self.value_column}'")
            return value[self.value_column]

        if value is not None and not isinstance(value, (str, int, float)):
            raise OutOfBoundsError(
                f"Select '{self.name}' source is invalid, expected key => value pairs, got '{type(value).__name__}'"
            )
        return value

    def iterate_options(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, label)`` pairs from the source query, then the source."""
        for _, row in self.iterate_query():
            columns = list(row)
            key = row[self.key_column] if self.key_column else row[columns[0]]
            value = row[self.value_column] if self.value_column else row[columns[-1]]
            yield key, value

        source = self.source
        if source is None:
            return

        if isinstance(source, Mapping):
            items = source.items()
        else:
            items = ((item, item) if isinstance(item, (str, int, float)) else (index, item) for index, item in enumerate(source))

        for key, value in items:
            yield key, self._option_value(key, value)

    def _option(self, key: Any, label: Any, selected: bool, data: Optional[Mapping[str, Any]] = None) -> Markup:
        # value is rendered even when empty
        attributes = format_attributes({"class": self.option_class})
        attributes += Markup(' value="{}"').format("" if key is None else str(key))
        attributes += format_attributes({f"data-{data_key}": data_value for data_key, data_value in (data or {}).items()})
        attributes += format_attributes({"selected": selected})
        return Markup("<option{}>{}</option>").format(attributes, "" if label is None else label)

    def render_option(self, key: Any, value: Any) -> Markup:
        data = self.source_data.get(key)
        return self._option(key, value, self._is_selected(key, value), data if isinstance(data, Mapping) else None)

    def render_body(self) -> Markup:
        options = Markup("").join(self.render_option(key, value) for key, value in self.iterate_options())

        if not options:
            if self.empty:
                return self._option(None, self.empty, True)
            return Markup("")

        if self.none and not self.multiple:
            options = self._option(None, self.none, not self._selected) + options

        return options
