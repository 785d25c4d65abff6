"""
Bootstrap tooltips.

A tooltip either decorates its source element with ``data-*`` attributes, or
renders a separate icon carrying them. The bootstrap initialization script is
emitted once per page.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from markupsafe import Markup, escape

from recordkit.core.errors import OutOfBoundsError
from recordkit.server.core.config import settings
from recordkit.web.page import get_page

from .enums import JavascriptWrapper, TooltipBoundary, TooltipPlacement, TooltipTrigger

DEFAULT_TEMPLATE = (
    '<div class="tooltip" role="tooltip"><div class="tooltip-arrow"></div><div class="tooltip-inner"></div></div>'
)
DEFAULT_ICON_HTML = '<div class="tooltip-icon circle" :data>?</div>'
INIT_SCRIPT = "$('[data-tooltip=\"tooltip\"]').tooltip();"


def _data_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key}: {item}" for key, item in value.items())
    return str(value)


class Tooltip:
    """Tooltip configuration for an element.

    Defaults for placement, trigger, icon use and HTML titles come from
    ``settings.tooltips``.
    """

    def __init__(self, source_element: Any = None, title: Optional[str] = None) -> None:
        config = settings.tooltips

        self.source_element = source_element
        self.use_icon = config.use_icon
        self.render_before = config.icon_before
        self.icon_html = DEFAULT_ICON_HTML
        self._data: Dict[str, Any] = {"tooltip": "tooltip"}

        self.set_placement(TooltipPlacement.right)
        self.set_triggers([config.trigger])
        self.set_html(config.html)
        if title is not None:
            self.set_title(title)

    @property
    def data(self) -> Dict[str, Any]:
        return self._data

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_source_element(self, element: Any) -> Tooltip:
        self.source_element = element
        return self

    def set_use_icon(self, use_icon: bool) -> Tooltip:
        self.use_icon = bool(use_icon)
        return self

    def set_render_before(self, render_before: bool) -> Tooltip:
        self.render_before = bool(render_before)
        return self

    def set_icon_html(self, icon_html: Optional[str]) -> Tooltip:
        """Set the icon HTML. ``:data`` is replaced by the tooltip data attributes."""
        self.icon_html = icon_html or DEFAULT_ICON_HTML
        return self

    @property
    def title(self) -> Optional[str]:
        return self._data.get("title")

    def set_title(self, title: Optional[str]) -> Tooltip:
        return self._set("title", title)

    def set_placement(self, placement: Union[TooltipPlacement, str]) -> Tooltip:
        return self._set("placement", self._parse(TooltipPlacement, placement).value)

    def set_fallback_placements(self, placements: Optional[Sequence[Union[TooltipPlacement, str]]]) -> Tooltip:
        if placements is None:
            return self._set("fallbackPlacements", None)
        return self._set("fallbackPlacements", [self._parse(TooltipPlacement, p).value for p in placements])

    def set_triggers(self, triggers: Sequence[Union[TooltipTrigger, str]]) -> Tooltip:
        """Set the triggers. ``manual`` cannot be combined with other triggers."""
        parsed: List[str] = [self._parse(TooltipTrigger, trigger).value for trigger in triggers]
        if TooltipTrigger.manual.value in parsed and len(parsed) > 1:
            raise OutOfBoundsError("Cannot combine the manual tooltip trigger with other triggers")
        return self._set("trigger", parsed)

    def set_html(self, html: bool) -> Tooltip:
        return self._set("html", bool(html))

    def set_animation(self, animation: bool) -> Tooltip:
        return self._set("animation", bool(animation))

    def set_container(self, container: Union[str, bool, None]) -> Tooltip:
        return self._set("container", container)

    def set_delay(self, delay: Union[int, Mapping[str, int], None]) -> Tooltip:
        """Set the show/hide delay in milliseconds, or a ``{"show": x, "hide": y}`` mapping."""
        values = delay.values() if isinstance(delay, Mapping) else [] if delay is None else [delay]
        for value in values:
            if value < 0:
                raise OutOfBoundsError(f"Invalid tooltip delay '{value}' specified, it should be 0 or more")
        return self._set("delay", dict(delay) if isinstance(delay, Mapping) else delay)

    def set_offset(self, offset: Union[str, Sequence[int], None]) -> Tooltip:
        if offset is not None and not isinstance(offset, str):
            offset = ",".join(str(value) for value in offset)
        return self._set("offset", offset)

    def set_boundary(self, boundary: Union[TooltipBoundary, str, None]) -> Tooltip:
        """Set the overflow boundary, a ``TooltipBoundary`` or a CSS selector."""
        if isinstance(boundary, TooltipBoundary):
            boundary = boundary.value
        return self._set("boundary", boundary)

    def set_template(self, template: Optional[str]) -> Tooltip:
        return self._set("template", template or DEFAULT_TEMPLATE)

    def _set(self, key: str, value: Any) -> Tooltip:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value
        return self

    @staticmethod
    def _parse(enum, value):
        try:
            return enum(value)
        except ValueError:
            raise OutOfBoundsError(
                f"Unknown tooltip {enum.__name__} '{value}', use one of {', '.join(m.value for m in enum)}"
            ) from None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def decorate(self, element: Any) -> None:
        """Prepare ``element`` before its attributes render.

        With an icon the element gets a class telling on which side the icon
        sits. Without one the tooltip data is merged into the element data.
        """
        if self.use_icon:
            element.add_class("has-tooltip-icon-left" if self.render_before else "has-tooltip-icon-right")
        else:
            element.merge_data({key: _data_value(value) for key, value in self._data.items()})

    def render_data(self) -> Markup:
        """Render the ``data-*`` attributes for the icon."""
        parts = []
        for key, value in self._data.items():
            if isinstance(value, (list, tuple)):
                value = '"' + " ".join(str(escape(item)) for item in value) + '"'
            elif isinstance(value, bool):
                value = "true" if value else "false"
            else:
                value = f'"{escape(_data_value(value))}"'
            parts.append(f"data-{escape(key)}={value}")
        return Markup(" ".join(parts))

    def render_icon(self) -> Markup:
        return Markup(self.icon_html.replace(":data", self.render_data()))

    def render(self, html: Any = "") -> Markup:
        """Render the tooltip around ``html``, the already rendered source element.

        Raises:
            OutOfBoundsError: Without an icon and without a source element
        """
        from .script import Script

        html = Markup(html.__html__()) if hasattr(html, "__html__") else Markup(html)
        page = get_page()

        script = Markup("")
        if not page.tooltip_script_sent:
            page.tooltip_script_sent = True
            script = Script(INIT_SCRIPT).set_javascript_wrapper(JavascriptWrapper.window).render()

        if not self.use_icon:
            if self.source_element is None:
                raise OutOfBoundsError(
                    "Cannot render tooltip, neither 'use icon' nor a source element were specified"
                )
            return script + html

        icon = self.render_icon()
        if self.render_before:
            return script + icon + html
        return script + html + icon
