"""
Forms and input elements.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError
from recordkit.server.core.config import settings
from recordkit.web.page import get_page
from recordkit.web.url import www

from .elements import TagElement
from .enums import FormMethod, InputType

CSRF_FIELD = "__csrf"
FRAME_TARGETS = ("_blank", "_self", "_parent", "_top")


class Form(TagElement):
    """A form. POST forms carry a hidden CSRF input with the page token."""

    element = "form"

    def __init__(self, content: Any = None, make_safe: bool = False) -> None:
        super().__init__(content, make_safe)
        self.set_method(FormMethod.post)
        self.set_accept_charset(settings.html_encoding)

    @property
    def method(self) -> str:
        return self.get_attribute("method")

    def set_method(self, method: Union[FormMethod, str]) -> Form:
        try:
            method = FormMethod(method if isinstance(method, FormMethod) else str(method).lower())
        except ValueError:
            raise OutOfBoundsError(f"Unknown form method '{method}' specified, use get or post") from None
        return self.set_attribute("method", method.value)

    def set_action(self, action: Optional[str]) -> Form:
        return self.set_attribute("action", None if action is None else www(action))

    def set_target(self, target: Optional[str]) -> Form:
        """Set the target frame. Names starting with ``_`` must be one of the reserved targets."""
        if target and target.startswith("_") and target not in FRAME_TARGETS:
            raise OutOfBoundsError(f"Unknown form target '{target}' specified, use one of {', '.join(FRAME_TARGETS)}")
        return self.set_attribute("target", target)

    def set_no_validate(self, no_validate: bool) -> Form:
        return self.set_attribute("novalidate", bool(no_validate))

    def set_auto_complete(self, auto_complete: Optional[bool]) -> Form:
        if auto_complete is None:
            return self.remove_attribute("autocomplete")
        return self.set_attribute("autocomplete", "on" if auto_complete else "off")

    def set_accept_charset(self, charset: Optional[str]) -> Form:
        return self.set_attribute("accept-charset", charset)

    def set_rel(self, rel: Optional[str]) -> Form:
        return self.set_attribute("rel", rel)

    def render_content(self) -> Markup:
        content = super().render_content()
        if self.method == FormMethod.post.value:
            csrf = InputHidden().set_name(CSRF_FIELD).set_value(get_page().csrf_token)
            content = csrf.render() + content
        return content


class Input(TagElement):
    """A void ``<input>`` element."""

    element = "input"
    input_type: InputType = InputType.text

    def __init__(self) -> None:
        super().__init__()
        self.set_type(self.input_type)

    @property
    def type(self) -> str:
        return self.get_attribute("type")

    def set_type(self, input_type: Union[InputType, str]) -> Input:
        try:
            input_type = InputType(input_type)
        except ValueError:
            raise OutOfBoundsError(f"Unknown input type '{input_type}' specified") from None
        return self.set_attribute("type", input_type.value)

    @property
    def value(self) -> Any:
        return self.get_attribute("value")

    def set_value(self, value: Any) -> Input:
        return self.set_attribute("value", value)

    def set_placeholder(self, placeholder: Optional[str]) -> Input:
        return self.set_attribute("placeholder", placeholder)

    def set_auto_submit(self, auto_submit: bool) -> Input:
        return self.set_attribute("auto_submit", bool(auto_submit))


class InputText(Input):
    input_type = InputType.text

    def set_max_length(self, max_length: Optional[int]) -> InputText:
        if max_length is not None and max_length < 0:
            raise OutOfBoundsError(f"Invalid max length '{max_length}' specified, it should be 0 or more")
        return self.set_attribute("maxlength", max_length)


class InputHidden(Input):
    input_type = InputType.hidden


class InputNumber(Input):
    input_type = InputType.number

    def set_min(self, minimum: Optional[float]) -> InputNumber:
        return self.set_attribute("min", minimum)

    def set_max(self, maximum: Optional[float]) -> InputNumber:
        return self.set_attribute("max", maximum)

    def set_step(self, step: Optional[float]) -> InputNumber:
        if step is not None and step <= 0:
            raise OutOfBoundsError(f"Invalid step '{step}' specified, it should be more than 0")
        return self.set_attribute("step", step)


class InputCheckbox(Input):
    input_type = InputType.checkbox

    @property
    def checked(self) -> bool:
        return bool(self.get_attribute("checked"))

    def set_checked(self, checked: bool) -> InputCheckbox:
        return self.set_attribute("checked", bool(checked))


class InputTextArea(TagElement):
    element = "textarea"

    def set_value(self, value: Optional[str]) -> InputTextArea:
        """Set the text, always escaped."""
        return self.set_content(value, make_safe=True)

    def set_rows(self, rows: Optional[int]) -> InputTextArea:
        if rows is not None and rows < 1:
            raise OutOfBoundsError(f"Invalid row count '{rows}' specified, it should be 1 or more")
        return self.set_attribute("rows", rows)

    def set_cols(self, cols: Optional[int]) -> InputTextArea:
        if cols is not None and cols < 1:
            raise OutOfBoundsError(f"Invalid column count '{cols}' specified, it should be 1 or more")
        return self.set_attribute("cols", cols)
