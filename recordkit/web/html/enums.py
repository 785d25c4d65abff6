"""
Enumerations used by the HTML components.
"""

from __future__ import annotations

from enum import Enum


class JavascriptWrapper(str, Enum):
    """How script content is wrapped before it is emitted."""

    dom_content = "dom_content"
    window = "window"
    function = "function"
    none = "none"


class AttachJavascript(str, Enum):
    """Where a script ends up in the document."""

    here = "here"
    header = "header"
    footer = "footer"


class TableIdColumn(str, Enum):
    """How the first (id) column of a table is rendered."""

    hidden = "hidden"
    visible = "visible"
    checkbox = "checkbox"


class TableRowType(str, Enum):
    row = "row"
    header = "header"
    footer = "footer"


class ButtonType(str, Enum):
    submit = "submit"
    button = "button"
    reset = "reset"


class FormMethod(str, Enum):
    get = "get"
    post = "post"


class InputType(str, Enum):
    text = "text"
    hidden = "hidden"
    number = "number"
    checkbox = "checkbox"
    email = "email"
    password = "password"
    url = "url"
    date = "date"
    datetime_local = "datetime-local"
    submit = "submit"


class TooltipPlacement(str, Enum):
    auto = "auto"
    top = "top"
    bottom = "bottom"
    left = "left"
    right = "right"


class TooltipTrigger(str, Enum):
    click = "click"
    hover = "hover"
    focus = "focus"
    manual = "manual"


class TooltipBoundary(str, Enum):
    clipping_parents = "clippingParents"
    viewport = "viewport"
    window = "window"
