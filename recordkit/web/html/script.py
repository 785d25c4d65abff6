"""
Script element.

Script content is javascript and is never escaped. Depending on the attach
mode the script renders in place, or is collected on the page to be emitted
in the document head or at the end of the body.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError
from recordkit.web.page import get_page
from recordkit.web.url import www

from .element import Element
from .enums import AttachJavascript, JavascriptWrapper


def _parse(enum, value):
    try:
        return enum(value)
    except ValueError:
        raise OutOfBoundsError(
            f"Unknown {enum.__name__} '{value}' specified, use one of {', '.join(member.value for member in enum)}"
        ) from None


def wrap_javascript(javascript: str, wrapper: JavascriptWrapper) -> str:
    """Wrap ``javascript`` so it runs at the moment ``wrapper`` describes."""
    if wrapper is JavascriptWrapper.dom_content:
        return f'document.addEventListener("DOMContentLoaded", function(e) {{\n{javascript}\n}});'
    if wrapper is JavascriptWrapper.window:
        return f'$(window).on("load", function(e) {{\n{javascript}\n}});'
    if wrapper is JavascriptWrapper.function:
        return f"$(function() {{\n{javascript}\n}});"
    return javascript


class Script(Element):
    element = "script"

    def __init__(self, javascript: Optional[str] = None) -> None:
        super().__init__()
        self._javascript = ""
        self.javascript_wrapper = JavascriptWrapper.dom_content
        self.attach = AttachJavascript.here
        if javascript is not None:
            self.set_content(javascript)

    @property
    def javascript(self) -> str:
        return self._javascript

    def set_content(self, content: Any, make_safe: bool = False) -> Script:
        """Set the javascript. ``make_safe`` is ignored, scripts are never escaped."""
        self._javascript = "" if content is None else str(content)
        return self

    def append_content(self, content: Any, make_safe: bool = False) -> Script:
        self._javascript += "" if content is None else str(content)
        return self

    def set_javascript_wrapper(self, wrapper: Union[JavascriptWrapper, str]) -> Script:
        self.javascript_wrapper = _parse(JavascriptWrapper, wrapper)
        return self

    def set_attach(self, attach: Union[AttachJavascript, str]) -> Script:
        self.attach = _parse(AttachJavascript, attach)
        return self

    def set_async(self, is_async: bool) -> Script:
        return self.set_attribute("async", bool(is_async))

    def set_defer(self, defer: bool) -> Script:
        return self.set_attribute("defer", bool(defer))

    def set_src(self, src: Optional[str]) -> Script:
        return self.set_attribute("src", None if src is None else www(src))

    def render_content(self) -> Markup:
        if self.get_attribute("src") or not self._javascript:
            return Markup("")
        return Markup(wrap_javascript(self._javascript, self.javascript_wrapper))

    def render(self) -> Markup:
        """Render the script, or collect it on the page for header and footer attachment."""
        html = super().render()

        if self.attach is AttachJavascript.here:
            return html

        page = get_page()
        if self.attach is AttachJavascript.header:
            page.add_header_script(html)
        else:
            page.add_footer_script(html)

        return Markup("")
