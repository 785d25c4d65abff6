"""
Simple HTML elements and element blocks.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Union

from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError
from recordkit.web.url import www

from .attributes import to_markup
from .element import Element
from .enums import ButtonType


class TagElement(Element):
    """An element with a fixed tag. Takes the content as first argument."""

    def __init__(self, content: Any = None, make_safe: bool = False) -> None:
        super().__init__(None, content, make_safe)


class ElementsBlock:
    """An ordered list of components and HTML strings rendered one after the other."""

    def __init__(self, *items: Any) -> None:
        self._items: List[Any] = list(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def add(self, item: Any) -> ElementsBlock:
        self._items.append(item)
        return self

    def clear(self) -> ElementsBlock:
        self._items = []
        return self

    def render(self) -> Markup:
        return Markup("").join(to_markup(item) for item in self._items)


class Div(TagElement):
    element = "div"


class Span(TagElement):
    element = "span"


class P(TagElement):
    element = "p"


class Label(TagElement):
    element = "label"

    def set_for(self, for_id: Optional[str]) -> Label:
        return self.set_attribute("for", for_id)


class A(TagElement):
    """Anchor. ``href`` values are resolved with :func:`recordkit.web.url.www`."""

    element = "a"

    @property
    def href(self) -> Optional[str]:
        return self.get_attribute("href")

    def set_href(self, href: Optional[str]) -> A:
        return self.set_attribute("href", None if href is None else www(href))

    def set_target(self, target: Optional[str]) -> A:
        return self.set_attribute("target", target)


class Button(TagElement):
    element = "button"

    def __init__(self, content: Any = None, make_safe: bool = False) -> None:
        super().__init__(content, make_safe)
        self.add_class("btn")
        self.set_type(ButtonType.submit)

    @property
    def type(self) -> Optional[str]:
        return self.get_attribute("type")

    def set_type(self, button_type: Union[ButtonType, str]) -> Button:
        try:
            button_type = ButtonType(button_type)
        except ValueError:
            raise OutOfBoundsError(
                f"Unknown button type '{button_type}' specified, use one of {', '.join(t.value for t in ButtonType)}"
            ) from None
        return self.set_attribute("type", button_type.value)

    def set_value(self, value: Any) -> Button:
        return self.set_attribute("value", value)


class Img(TagElement):
    element = "img"

    def set_src(self, src: Optional[str]) -> Img:
        return self.set_attribute("src", None if src is None else www(src))

    def set_alt(self, alt: Optional[str]) -> Img:
        return self.set_attribute("alt", alt)

    def set_lazy_load(self, lazy: bool) -> Img:
        return self.set_attribute("loading", "lazy" if lazy else None)


class Hr(TagElement):
    element = "hr"


class Br(TagElement):
    element = "br"
