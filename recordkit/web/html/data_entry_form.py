"""
Forms generated from data entries.
"""

from __future__ import annotations

import json
import typing
from typing import Any, Mapping, Optional, Sequence

from markupsafe import Markup

from recordkit.core.database.data_entry import DataEntry
from recordkit.core.errors import OutOfBoundsError

from .element import Element
from .elements import Button, Div, Label
from .forms import Form, InputCheckbox, InputNumber, InputText, InputTextArea
from .select import InputSelect

TEXTAREA_MIN_LENGTH = 255


def _base_type(annotation: Any) -> Any:
    """Return the type inside ``Optional[...]``."""
    if typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _constraint(field, name: str) -> Optional[Any]:
    for item in field.metadata:
        value = getattr(item, name, None)
        if value is not None:
            return value
    return None


class DataEntryForm(Form):
    """A form with a labelled input for every editable column of a data entry.

    Meta, hidden and protected columns are left out. Readonly columns of a
    saved entry render readonly.
    """

    def __init__(self, entry: DataEntry, submit_label: Optional[str] = "Save") -> None:
        super().__init__()
        self.entry = entry
        self.submit_label = submit_label
        self.add_class("data-entry-form")

    def columns(self) -> Sequence[str]:
        entry = self.entry
        return [
            column
            for column in entry.definitions()
            if column not in entry.meta_columns
            and column not in entry.hidden_columns
            and column not in entry.protected_columns
        ]

    def render_input(self, column: str) -> Element:
        """Pick the input component for ``column`` from its definition."""
        entry = self.entry
        field = entry.field(column)
        value = entry.get(column)
        base_type = _base_type(field.annotation)
        max_length = _constraint(field, "max_length")

        if column in entry.column_choices:
            component = InputSelect().set_source({choice: choice for choice in entry.column_choices[column]})
            component.set_selected(value)
        elif base_type is bool:
            component = InputCheckbox().set_value(1).set_checked(bool(value))
        elif base_type is int:
            component = InputNumber().set_value(value).set_min(_constraint(field, "ge")).set_max(_constraint(field, "le"))
        elif column in entry.json_columns or (max_length is not None and max_length > TEXTAREA_MIN_LENGTH):
            if value is not None and not isinstance(value, str):
                value = json.dumps(value, indent=2, default=str)
            component = InputTextArea().set_value(value).set_rows(5)
        else:
            component = InputText().set_value(value).set_max_length(max_length)

        component.set_id(column).add_class("form-control")
        if column in entry.readonly_columns and not entry.is_new():
            component.set_readonly(True)
        return component

    def render_row(self, column: str) -> Markup:
        label = Label(self.entry.field(column).description or column, make_safe=True).set_for(column)
        return Div().add_class("form-group").set_content(label.render() + self.render_input(column).render()).render()

    def render_content(self) -> Markup:
        rows = Markup("").join(self.render_row(column) for column in self.columns())
        if self.submit_label:
            rows += Button(self.submit_label, make_safe=True).add_class("btn-primary").render()
        self.set_content(rows)
        return super().render_content()

    def editable_columns(self) -> Sequence[str]:
        entry = self.entry
        if entry.is_new():
            return self.columns()
        return [column for column in self.columns() if column not in entry.readonly_columns]

    def apply(self, data: Mapping[str, Any]) -> DataEntry:
        """Write submitted form values back into the entry.

        Values go through the entry's ``set_<column>`` setters so they are
        validated the same way as in code. An absent checkbox means ``False``,
        empty fields mean ``None``.

        Raises:
            OutOfBoundsError: If a value is invalid for its column
        """
        entry = self.entry
        for column in self.editable_columns():
            field = entry.field(column)
            base_type = _base_type(field.annotation)

            if base_type is bool and column not in entry.column_choices:
                value: Any = column in data
            elif column not in data:
                continue
            else:
                value = data[column]
                value = value.strip() if isinstance(value, str) else value
                if value == "":
                    value = None
                elif base_type is int and column not in entry.column_choices:
                    try:
                        value = int(value)
                    except ValueError:
                        raise OutOfBoundsError(f"Specified {entry.entry_name} {column} '{value}' should be an integer") from None
                elif column in entry.json_columns:
                    try:
                        value = json.loads(value)
                    except ValueError:
                        raise OutOfBoundsError(f"Specified {entry.entry_name} {column} is not valid JSON") from None

            setter = getattr(entry, f"set_{column}", None)
            if setter is None:
                entry.set(value, column)
            else:
                setter(value)

        return entry
