"""
Element attribute state.

``ElementAttributes`` keeps everything an element renders besides its tag:
id, name, classes, generic attributes, ``data-*`` and ``aria-*`` values,
content, and the wrappers (anchor, outer div, tooltip) around it. All setters
return the element so calls can be chained.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Union

from markupsafe import Markup, escape

from recordkit.core.errors import OutOfBoundsError
from recordkit.web.page import get_page

if TYPE_CHECKING:
    from .elements import A, Div
    from .tooltip import Tooltip


def to_markup(content: Any, make_safe: bool = False) -> Markup:
    """Convert element content to markup.

    Components (anything with ``__html__``) are rendered. Plain strings and
    numbers are taken as HTML, or escaped when ``make_safe`` is set.

    Raises:
        OutOfBoundsError: For content that is neither a component, a string nor a number
    """
    if content is None:
        return Markup("")

    if hasattr(content, "__html__"):
        return Markup(content.__html__())

    if isinstance(content, bool) or not isinstance(content, (str, int, float)):
        raise OutOfBoundsError(f"Cannot use content of type '{type(content).__name__}' as element content")

    if make_safe:
        return escape(str(content))

    return Markup(str(content))


def format_attributes(attributes: Mapping[str, Any]) -> Markup:
    """Render ``key="value"`` pairs, prefixed with a space when not empty.

    ``None``, ``False`` and empty strings are skipped, ``True`` renders as a
    bare attribute and lists are joined with spaces.
    """
    parts = []
    for key, value in attributes.items():
        if value is None or value is False or value == "":
            continue

        if value is True:
            parts.append(str(escape(key)))
            continue

        if isinstance(value, (list, tuple, set)):
            value = " ".join(str(item) for item in value)

        parts.append(f'{escape(key)}="{escape(value)}"')

    if not parts:
        return Markup("")

    return Markup(" " + " ".join(parts))


class ElementAttributes:
    """Attribute state shared by every element."""

    def __init__(self) -> None:
        self._id: Optional[str] = None
        self._name: Optional[str] = None
        self._classes: Dict[str, None] = {}
        self._attributes: Dict[str, Any] = {}
        self._data: Optional[Dict[str, Any]] = None
        self._aria: Optional[Dict[str, Any]] = None
        self._content: Markup = Markup("")
        self._extra: Markup = Markup("")
        self._height: Optional[int] = None
        self._width: Optional[int] = None
        self._disabled = False
        self._readonly = False
        self._required = False
        self._tabindex: Optional[int] = None
        self._anchor: Optional[A] = None
        self._outer_div: Optional[Div] = None
        self._tooltip: Optional[Tooltip] = None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def id(self) -> Optional[str]:
        return self._id

    def set_id(self, element_id: Optional[str], name_too: bool = True):
        """Set the id, and by default the name as well."""
        self._id = element_id
        if name_too:
            self._name = element_id
        return self

    @property
    def name(self) -> Optional[str]:
        return self._name

    def set_name(self, name: Optional[str], id_too: bool = False):
        self._name = name
        if id_too:
            self._id = name
        return self

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    @property
    def classes(self) -> list:
        return list(self._classes)

    @property
    def class_string(self) -> Optional[str]:
        return " ".join(self._classes) or None

    def add_class(self, *classes: str):
        """Add one or more classes. Space separated strings are split."""
        for value in classes:
            for name in str(value).split():
                self._classes[name] = None
        return self

    def add_classes(self, classes: Iterable[str]):
        return self.add_class(*classes)

    def set_class(self, *classes: str):
        self._classes = {}
        return self.add_class(*classes)

    def remove_class(self, name: str):
        self._classes.pop(name, None)
        return self

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def set_float_right(self, float_right: bool):
        return self.add_class("float-right") if float_right else self.remove_class("float-right")

    @property
    def float_right(self) -> bool:
        return self.has_class("float-right")

    # ------------------------------------------------------------------
    # Attributes, data-* and aria-*
    # ------------------------------------------------------------------

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._attributes

    def set_attribute(self, key: str, value: Any):
        self._attributes[key] = value
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def remove_attribute(self, key: str):
        self._attributes.pop(key, None)
        return self

    @property
    def data(self) -> Dict[str, Any]:
        """The ``data-*`` values, created on first access."""
        if self._data is None:
            self._data = {}
        return self._data

    def set_data(self, key: str, value: Any):
        self.data[key] = value
        return self

    def merge_data(self, data: Mapping[str, Any]):
        self.data.update(data)
        return self

    @property
    def aria(self) -> Dict[str, Any]:
        """The ``aria-*`` values, created on first access."""
        if self._aria is None:
            self._aria = {}
        return self._aria

    def set_aria(self, key: str, value: Any):
        self.aria[key] = value
        return self

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    @property
    def content(self) -> Markup:
        return self._content

    def set_content(self, content: Any, make_safe: bool = False):
        self._content = to_markup(content, make_safe)
        return self

    def append_content(self, content: Any, make_safe: bool = False):
        self._content += to_markup(content, make_safe)
        return self

    def prepend_content(self, content: Any, make_safe: bool = False):
        self._content = to_markup(content, make_safe) + self._content
        return self

    @property
    def extra(self) -> Markup:
        """HTML rendered directly after the element."""
        return self._extra

    def set_extra(self, extra: Any, make_safe: bool = False):
        self._extra = to_markup(extra, make_safe)
        return self

    # ------------------------------------------------------------------
    # Dimensions and state
    # ------------------------------------------------------------------

    @property
    def height(self) -> Optional[int]:
        return self._height

    def set_height(self, height: Optional[int]):
        if height is not None and height < 0:
            raise OutOfBoundsError(f"Invalid element height '{height}' specified, it should be 0 or more")
        self._height = height
        return self

    @property
    def width(self) -> Optional[int]:
        return self._width

    def set_width(self, width: Optional[int]):
        if width is not None and width < 0:
            raise OutOfBoundsError(f"Invalid element width '{width}' specified, it should be 0 or more")
        self._width = width
        return self

    @property
    def disabled(self) -> bool:
        return self._disabled

    def set_disabled(self, disabled: bool):
        self._disabled = bool(disabled)
        return self

    @property
    def readonly(self) -> bool:
        return self._readonly

    def set_readonly(self, readonly: bool):
        self._readonly = bool(readonly)
        return self

    @property
    def required(self) -> bool:
        return self._required

    def set_required(self, required: bool):
        self._required = bool(required)
        return self

    @property
    def tabindex(self) -> Optional[int]:
        """The tab index, suppressed while the element is disabled."""
        return None if self._disabled else self._tabindex

    def set_tabindex(self, tabindex: Optional[int]):
        self._tabindex = tabindex
        return self

    @property
    def autofocus(self) -> bool:
        return self._name is not None and get_page().autofocus == self._name

    def set_autofocus(self, autofocus: bool):
        """Give this element the page's single autofocus.

        Raises:
            OutOfBoundsError: If the element has no name, or another element owns autofocus
        """
        page = get_page()

        if autofocus:
            if not self._name:
                raise OutOfBoundsError("Cannot set autofocus on an element without a name")

            if page.autofocus is not None and page.autofocus != self._name:
                raise OutOfBoundsError(
                    f"Cannot set autofocus on element '{self._name}', element '{page.autofocus}' already has autofocus"
                )

            page.autofocus = self._name
        elif self.autofocus:
            page.autofocus = None

        return self

    # ------------------------------------------------------------------
    # Wrappers
    # ------------------------------------------------------------------

    @property
    def anchor(self) -> Optional[A]:
        return self._anchor

    def set_anchor(self, anchor: Union[A, str, None]):
        """Wrap the element in an anchor. A string is taken as the anchor URL."""
        if isinstance(anchor, str):
            from .elements import A

            anchor = A().set_href(anchor)
        self._anchor = anchor
        return self

    @property
    def outer_div(self) -> Div:
        """A div rendered around the element, created on first access."""
        if self._outer_div is None:
            from .elements import Div

            self._outer_div = Div()
        return self._outer_div

    def set_outer_div(self, outer_div: Optional[Div]):
        self._outer_div = outer_div
        return self

    @property
    def tooltip(self) -> Tooltip:
        """The element tooltip, created on first access."""
        if self._tooltip is None:
            from .tooltip import Tooltip

            self._tooltip = Tooltip(source_element=self)
        return self._tooltip

    def set_tooltip(self, tooltip: Optional[Tooltip]):
        if tooltip is not None:
            tooltip.set_source_element(self)
        self._tooltip = tooltip
        return self

    def set_tooltip_title(self, title: Optional[str]):
        self.tooltip.set_title(title)
        return self
