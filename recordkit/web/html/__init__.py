"""HTML components.

Every component renders to ``markupsafe.Markup`` through ``render()`` and
supports ``__html__``, so components can be nested as content of each other
and used in any markupsafe aware template.
"""

from .attributes import ElementAttributes, format_attributes, to_markup
from .data_entry_form import DataEntryForm
from .element import VOID_ELEMENTS, Element
from .elements import A, Br, Button, Div, ElementsBlock, Hr, Img, Label, P, Span, TagElement
from .enums import (
    AttachJavascript,
    ButtonType,
    FormMethod,
    InputType,
    JavascriptWrapper,
    TableIdColumn,
    TableRowType,
    TooltipBoundary,
    TooltipPlacement,
    TooltipTrigger,
)
from .forms import CSRF_FIELD, Form, Input, InputCheckbox, InputHidden, InputNumber, InputText, InputTextArea
from .resource import ResourceElement
from .script import Script, wrap_javascript
from .select import InputSelect
from .table import HtmlTable
from .tooltip import Tooltip

__all__ = [
    "A",
    "AttachJavascript",
    "Br",
    "Button",
    "ButtonType",
    "CSRF_FIELD",
    "DataEntryForm",
    "Div",
    "Element",
    "ElementAttributes",
    "ElementsBlock",
    "Form",
    "FormMethod",
    "Hr",
    "HtmlTable",
    "Img",
    "Input",
    "InputCheckbox",
    "InputHidden",
    "InputNumber",
    "InputSelect",
    "InputText",
    "InputTextArea",
    "InputType",
    "JavascriptWrapper",
    "Label",
    "P",
    "ResourceElement",
    "Script",
    "Span",
    "TableIdColumn",
    "TableRowType",
    "TagElement",
    "Tooltip",
    "TooltipBoundary",
    "TooltipPlacement",
    "TooltipTrigger",
    "VOID_ELEMENTS",
    "format_attributes",
    "to_markup",
    "wrap_javascript",
]
