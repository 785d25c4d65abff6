"""
HTML tables.

``HtmlTable`` renders rows from a source query or an in-memory source of
mappings, data entries or pydantic models. The first column of every row is
the row id; ``checkbox_selectors`` decides whether it is hidden, shown, or
rendered as a selection checkbox.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, MutableMapping, Optional, Tuple, Union
from urllib.parse import quote_plus

from markupsafe import Markup, escape
from pydantic import BaseModel

from recordkit.core.errors import OutOfBoundsError
from recordkit.web.url import www

from .attributes import format_attributes
from .elements import ElementsBlock
from .enums import TableIdColumn, TableRowType
from .forms import InputCheckbox
from .resource import ResourceElement

TableCallback = Callable[[MutableMapping[str, Any], TableRowType, Dict[str, Any]], None]
ColumnConverter = Callable[[str], str]


def header_label(column: str) -> str:
    """Turn a column name into a header label.

    Example:
        >>> header_label("created_on")
        'Created on'
    """
    label = str(column).replace("-", " ").replace("_", " ")
    return label[:1].upper() + label[1:]


class HtmlTable(ResourceElement):
    """A ``<table>`` with optional headers, footers, URLs and selection checkboxes.

    Example:
        >>> HtmlTable().set_source({1: {"id": 1, "name": "Foo"}}).set_row_url("/plugins/:ROW")
    """

    element = "table"

    def __init__(self) -> None:
        super().__init__()
        self.add_class("table")
        self.null_status: Optional[str] = "Active"
        self.header_text: Optional[str] = None
        self.responsive = True
        self.full_width = True
        self.process_entities = True
        self.checkbox_selectors = TableIdColumn.hidden
        self.row_url: Optional[str] = None
        self.row_classes: Optional[str] = None
        self.column_classes: Optional[str] = None
        self.anchor_classes: Optional[str] = None
        self.column_urls: Dict[str, str] = {}
        self.column_data_attributes: Dict[str, Any] = {}
        self.anchor_data_attributes: Dict[str, Any] = {}
        self.convert_columns: Dict[str, ColumnConverter] = {}
        self.headers: Dict[str, str] = {}
        self.footers: Dict[str, Any] = {}
        self.callbacks: List[TableCallback] = []
        self.top_buttons = ElementsBlock()
        self.count = 0

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_null_status(self, null_status: Optional[str]) -> HtmlTable:
        """Label shown in ``status`` cells that hold ``None``."""
        self.null_status = null_status
        return self

    def set_header_text(self, header_text: Optional[str]) -> HtmlTable:
        self.header_text = header_text
        return self

    def set_responsive(self, responsive: bool) -> HtmlTable:
        self.responsive = bool(responsive)
        return self

    def set_full_width(self, full_width: bool) -> HtmlTable:
        self.full_width = bool(full_width)
        return self

    def set_process_entities(self, process_entities: bool) -> HtmlTable:
        """Escape cell values (newlines become ``<br>``)."""
        self.process_entities = bool(process_entities)
        return self

    def set_checkbox_selectors(self, checkbox_selectors: Union[TableIdColumn, str]) -> HtmlTable:
        try:
            self.checkbox_selectors = TableIdColumn(checkbox_selectors)
        except ValueError:
            raise OutOfBoundsError(
                f"Unknown id column mode '{checkbox_selectors}', use one of {', '.join(m.value for m in TableIdColumn)}"
            ) from None
        return self

    def set_row_url(self, row_url: Optional[str]) -> HtmlTable:
        """URL template for every cell. ``:ROW`` and ``:COLUMN`` are replaced per cell."""
        self.row_url = None if row_url is None else str(row_url)
        return self

    def set_column_url(self, column: str, url: Optional[str]) -> HtmlTable:
        if url is None:
            self.column_urls.pop(column, None)
        else:
            self.column_urls[column] = str(url)
        return self

    def set_row_classes(self, classes: Optional[str]) -> HtmlTable:
        self.row_classes = classes
        return self

    def set_column_classes(self, classes: Optional[str]) -> HtmlTable:
        self.column_classes = classes
        return self

    def set_anchor_classes(self, classes: Optional[str]) -> HtmlTable:
        self.anchor_classes = classes
        return self

    def set_column_data_attribute(self, key: str, value: Any) -> HtmlTable:
        self.column_data_attributes[key] = value
        return self

    def set_anchor_data_attribute(self, key: str, value: Any) -> HtmlTable:
        self.anchor_data_attributes[key] = value
        return self

    def set_convert_column(self, column: str, converter: Optional[ColumnConverter]) -> HtmlTable:
        """Convert the values of ``column`` with ``converter``. Converted values are not escaped."""
        if converter is None:
            self.convert_columns.pop(column, None)
        else:
            self.convert_columns[column] = converter
        return self

    def set_headers(self, headers: Optional[Mapping[str, str]]) -> HtmlTable:
        self.headers = dict(headers or {})
        return self

    def set_footers(self, footers: Optional[Mapping[str, Any]]) -> HtmlTable:
        self.footers = dict(footers or {})
        return self

    def add_callback(self, callback: TableCallback) -> HtmlTable:
        """Add a callback run as ``callback(row, row_type, params)`` for every row and the footer."""
        self.callbacks.append(callback)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _row_to_mapping(self, row: Any) -> Dict[str, Any]:
        if isinstance(row, Mapping):
            return dict(row)

        if hasattr(row, "get_source"):
            return row.get_source()

        if isinstance(row, BaseModel):
            return row.model_dump()

        raise OutOfBoundsError(
            "The table source is invalid, rows should be mappings, data entries or models, "
            f"a '{type(row).__name__}' was encountered instead"
        )

    def iterate_rows(self) -> Iterator[Tuple[Any, Dict[str, Any]]]:
        """Yield ``(key, row)`` pairs from the source query, then the source."""
        yield from self.iterate_query()

        source = self.source
        if not source:
            return

        items = source.items() if isinstance(source, Mapping) else enumerate(source)
        for key, row in items:
            row = self._row_to_mapping(row)
            if self.columns is not None:
                row = {column: row[column] for column in self.columns if column in row}
            yield key, row

    def _execute_callbacks(self, row: MutableMapping[str, Any], row_type: TableRowType, params: Dict[str, Any]) -> None:
        for callback in self.callbacks:
            callback(row, row_type, params)

    def render_body(self) -> Markup:
        self.count = 0
        rows = []
        for key, row in self.iterate_rows():
            params: Dict[str, Any] = {"process_entities": self.process_entities, "skip_escape": set()}
            self._execute_callbacks(row, TableRowType.row, params)
            rows.append(self.render_row(row, key, params))

        if not rows:
            return self.render_body_empty()

        body = Markup("<tbody>") + Markup("").join(rows) + Markup("</tbody>")
        return self.render_headers() + body + self.render_footers()

    def render_body_empty(self) -> Markup:
        if self.empty:
            return Markup("<tr><td>{}</td></tr>").format(self.empty)
        return Markup("")

    def render_headers(self) -> Markup:
        if not self.headers:
            return Markup("")

        cells = []
        for index, (column, header) in enumerate(self.headers.items()):
            if index == 0:
                if self.checkbox_selectors is TableIdColumn.hidden:
                    continue
                if self.checkbox_selectors is TableIdColumn.checkbox:
                    header = InputCheckbox().set_name(f"{column}[]").set_value(1).render()
            cells.append(Markup("<th>{}</th>").format(header))

        return Markup("<thead><tr>") + Markup("").join(cells) + Markup("</tr></thead>")

    def render_footers(self) -> Markup:
        if not self.footers:
            return Markup("")

        footers = dict(self.footers)
        self._execute_callbacks(footers, TableRowType.footer, {})

        cells = (Markup("<th>{}</th>").format(footer) for footer in footers.values())
        return Markup("<tfoot><tr>") + Markup("").join(cells) + Markup("</tr></tfoot>")

    def render_row(self, row: Mapping[str, Any], key: Any, params: Dict[str, Any]) -> Markup:
        if not self.headers:
            self.headers = {column: header_label(column) for column in row}

        self.count += 1
        row_id = next(iter(row.values()), None)

        attributes: Dict[str, Any] = {}
        if key in self.source_data:
            attributes[f"data-{key}"] = self.source_data[key]
        attributes["class"] = self.row_classes

        cells = []
        for index, (column, value) in enumerate(row.items()):
            if index == 0:
                value, made_checkbox = self.render_checkbox_column(column, value)
                params["no_url"] = made_checkbox or not value
                if value is None:
                    continue
            else:
                params["no_url"] = False
            cells.append(self.render_cell(row_id, column, value, params))

        return Markup(f"<tr{format_attributes(attributes)}>") + Markup("").join(cells) + Markup("</tr>")

    def render_checkbox_column(self, column: str, value: Any) -> Tuple[Optional[Any], bool]:
        """Return the first cell value, and whether it was made into a checkbox.

        A ``None`` value means the cell is not rendered.
        """
        if self.checkbox_selectors is TableIdColumn.hidden:
            return None, False

        if self.checkbox_selectors is TableIdColumn.visible:
            return "" if value is None else str(value), False

        return InputCheckbox().set_name(f"{column}[]").set_value(value).render(), True

    def render_cell(self, row_id: Any, column: str, value: Any, params: Mapping[str, Any]) -> Markup:
        if column == "status" and value is None:
            value = self.null_status

        url = self.column_urls.get(column) or self.row_url
        if params.get("no_url"):
            url = None

        converter = self.convert_columns.get(column)
        if converter is not None:
            converted = converter("" if value is None else str(value))
            if not isinstance(converted, str):
                raise OutOfBoundsError(f"Conversion for column '{column}' callback does not return a string as required")
            content = Markup(converted)
        elif isinstance(value, Markup):
            content = value
        elif params.get("process_entities") and column not in params.get("skip_escape", ()):
            content = Markup(str(escape("" if value is None else value)).replace("\n", "<br>"))
        else:
            content = Markup("" if value is None else str(value))

        if url:
            content = self.render_url(row_id, column, content, url)

        attributes = {f"data-{key}": data for key, data in self.column_data_attributes.items()}
        attributes["class"] = self.column_classes
        return Markup(f"<td{format_attributes(attributes)}>") + content + Markup("</td>")

    def render_url(self, row_id: Any, column: str, content: Markup, url: str) -> Markup:
        """Wrap ``content`` in an anchor, with ``:ROW`` and ``:COLUMN`` replaced in ``url``."""
        row_id = quote_plus("" if row_id is None else str(row_id))
        column = quote_plus(str(column))
        for marker, replacement in ((":ROW", row_id), ("%3AROW", row_id), (":COLUMN", column), ("%3ACOLUMN", column)):
            url = url.replace(marker, replacement)

        attributes: Dict[str, Any] = {"class": self.anchor_classes, "href": www(url)}
        for key, data in self.anchor_data_attributes.items():
            attributes[f"data-{key}"] = data
        return Markup(f"<a{format_attributes(attributes)}>") + content + Markup("</a>")

    def render(self) -> Markup:
        if self.full_width:
            self.add_class("w-100")

        table = super().render()
        if not table:
            return table

        if self.responsive:
            table = Markup('<div class="table-responsive">') + table + Markup("</div>")

        return self.top_buttons.render() + table
