"""
Elements rendered from a data source.

A resource element renders its body from either an in-memory ``source`` or a
database ``source_query`` (a SQLAlchemy result), never both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from markupsafe import Markup
from sqlalchemy.engine import Result

from recordkit.core.errors import HtmlError

from .elements import TagElement


class ResourceElement(TagElement, ABC):
    """Base class for selects and tables."""

    def __init__(self) -> None:
        super().__init__()
        self.none: Optional[str] = None
        self.empty: Optional[str] = None
        self.hide_empty = False
        self._source: Optional[Any] = None
        self._source_query: Optional[Result] = None
        self._columns: Optional[List[str]] = None
        self._source_data: Dict[Any, Any] = {}
        self._body: Markup = Markup("")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_none(self, none: Optional[str]):
        """Label of the "nothing selected" entry."""
        self.none = none
        return self

    def set_empty(self, empty: Optional[str]):
        """Label shown when the source holds no entries."""
        self.empty = empty
        return self

    def set_hide_empty(self, hide_empty: bool):
        """Render nothing at all when the source holds no entries."""
        self.hide_empty = bool(hide_empty)
        return self

    @property
    def source(self) -> Optional[Any]:
        return self._source

    def set_source(self, source: Optional[Any]):
        """Use an in-memory source.

        Raises:
            HtmlError: If a source query was set already
        """
        if source is not None and self._source_query is not None:
            raise HtmlError(f"Cannot set a source on {self!r}, it already has a source query")
        self._source = source
        return self

    @property
    def source_query(self) -> Optional[Result]:
        return self._source_query

    def set_source_query(self, source_query: Optional[Result]):
        """Use a database result as source.

        Raises:
            HtmlError: If an in-memory source was set already
        """
        if source_query is not None and self._source is not None:
            raise HtmlError(f"Cannot set a source query on {self!r}, it already has a source")
        self._source_query = source_query
        return self

    @property
    def columns(self) -> Optional[List[str]]:
        return self._columns

    def set_columns(self, columns: Optional[Sequence[str]]):
        """Restrict (and order) the columns that are used from each source row."""
        self._columns = None if columns is None else list(columns)
        return self

    @property
    def source_data(self) -> Dict[Any, Any]:
        return self._source_data

    def set_source_data(self, source_data: Mapping[Any, Any]):
        """Per source key values, rendered as ``data-<key>`` attributes."""
        self._source_data = dict(source_data)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def iterate_query(self) -> Iterator[Tuple[Any, Dict[str, Any]]]:
        """Yield ``(key, row)`` pairs from the source query, keyed by the first column."""
        if self._source_query is None:
            return

        for mapping in self._source_query.mappings():
            row = dict(mapping)
            if self._columns is not None:
                row = {column: row.get(column) for column in self._columns}
            yield next(iter(row.values()), None), row

    @abstractmethod
    def render_body(self) -> Markup:
        """Render the element body from the source."""

    def render_content(self) -> Markup:
        return self._body

    def render(self) -> Markup:
        """Render the body first; an empty body with ``hide_empty`` renders nothing."""
        self._body = self.render_body()
        if not self._body and self.hide_empty:
            return Markup("")
        return super().render()
