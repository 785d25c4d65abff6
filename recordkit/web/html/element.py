"""
The base HTML element.

``Element.render()`` builds the opening tag from the attribute state, adds the
content and the closing tag (void elements get none), and then applies the
tooltip, outer div and anchor wrappers.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError
from recordkit.core.logging_config import get_logger

from .attributes import ElementAttributes, format_attributes

logger = get_logger(__name__)

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

SYSTEM_ATTRIBUTES = (
    "id",
    "name",
    "class",
    "height",
    "width",
    "autofocus",
    "readonly",
    "disabled",
    "tabindex",
    "required",
)


class Element(ElementAttributes):
    """An HTML element.

    ``element`` is the tag name. ``None`` makes a null element that renders
    only its content and extra HTML.

    Example:
        >>> Element("section").add_class("card").set_content("Hi").render()
        Markup('<section class="card">Hi</section>')
    """

    element: Optional[str] = None

    def __init__(self, element: Optional[str] = None, content: Any = None, make_safe: bool = False) -> None:
        super().__init__()
        if element is not None:
            self.set_element(element)
        if content is not None:
            self.set_content(content, make_safe)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(element={self.element!r}, id={self.id!r})"

    def set_element(self, element: Optional[str]):
        if element == "":
            raise OutOfBoundsError("Cannot use an empty string as element type")
        self.element = element
        return self

    @property
    def requires_closing_tag(self) -> bool:
        return self.element not in VOID_ELEMENTS

    def render_content(self) -> Markup:
        """Return the markup placed between the tags. Subclasses generate it here."""
        return self.content

    def collect_attributes(self) -> Dict[str, Any]:
        """Return all attributes in render order.

        System attributes come first, then ``data-*``, then ``aria-*``, then the
        generic attributes. A generic attribute only fills in a system
        attribute that is not set.
        """
        attributes: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "class": self.class_string,
            "height": self.height,
            "width": self.width,
            "autofocus": self.autofocus,
            "readonly": self.readonly,
            "disabled": self.disabled,
            "tabindex": self.tabindex,
            "required": self.required,
        }

        for key, value in (self._data or {}).items():
            attributes[f"data-{key}"] = value

        for key, value in (self._aria or {}).items():
            attributes[f"aria-{key}"] = value

        for key, value in self._attributes.items():
            if key == "auto_submit":
                continue
            if key in SYSTEM_ATTRIBUTES and attributes.get(key) not in (None, False, ""):
                continue
            attributes[key] = value

        return attributes

    def render_attributes(self) -> Markup:
        return format_attributes(self.collect_attributes())

    def render(self) -> Markup:
        """Render the element.

        Raises:
            OutOfBoundsError: If the element type is empty
        """
        if self.element is None:
            return self.render_content() + self.extra

        if not self.element:
            logger.error(f"Cannot render {self!r}, no element type specified")
            raise OutOfBoundsError("Cannot render HTML element, no element type specified")

        postfix = Markup("")
        if self._attributes.get("auto_submit", False):
            from .script import Script

            postfix = (
                Script()
                .set_javascript_wrapper("window")
                .set_content(f'$("[name={self.name}]").change(function (e){{ $(e.target).closest("form").submit(); }});')
                .render()
            )

        if self._tooltip is not None:
            self._tooltip.decorate(self)

        html = f"<{self.element}{self.render_attributes()}"
        if self.requires_closing_tag:
            html += f">{self.render_content()}</{self.element}>"
        else:
            html += " />"

        render = Markup(html) + postfix

        if self._tooltip is not None:
            render = self._tooltip.render(render)

        if self._outer_div is not None:
            render = self._outer_div.set_content(render).render()

        if self._anchor is not None:
            return self._anchor.set_content(render).render() + self.extra

        return render + self.extra

    @classmethod
    def new(cls, *args: Any, **kwargs: Any):
        """Alternative constructor for fluent chains."""
        return cls(*args, **kwargs)
