"""Unit tests for tooltips."""

from unittest.mock import patch

import pytest

from recordkit.core.errors import OutOfBoundsError
from recordkit.server.core.config import TooltipConfig
from recordkit.web.html import Span, Tooltip, TooltipBoundary, TooltipPlacement, TooltipTrigger
from recordkit.web.html.tooltip import DEFAULT_TEMPLATE, INIT_SCRIPT


class TestConfiguration:
    def test_defaults(self):
        tooltip = Tooltip()

        assert tooltip.data == {"tooltip": "tooltip", "placement": "right", "trigger": ["click"], "html": False}
        assert not tooltip.use_icon
        assert not tooltip.render_before

    def test_defaults_follow_settings(self):
        config = TooltipConfig(icon_before=True, trigger="hover", use_icon=True, html=True)

        with patch("recordkit.web.html.tooltip.settings") as settings:
            settings.tooltips = config
            tooltip = Tooltip()

        assert tooltip.use_icon and tooltip.render_before
        assert tooltip.data["trigger"] == ["hover"]
        assert tooltip.data["html"] is True

    def test_setters(self):
        tooltip = (
            Tooltip(title="Help")
            .set_placement(TooltipPlacement.top)
            .set_fallback_placements(["bottom", "left"])
            .set_animation(False)
            .set_container("body")
            .set_delay({"show": 100, "hide": 50})
            .set_offset([0, 8])
            .set_boundary(TooltipBoundary.viewport)
            .set_template(None)
        )

        assert tooltip.title == "Help"
        assert tooltip.data["placement"] == "top"
        assert tooltip.data["fallbackPlacements"] == ["bottom", "left"]
        assert tooltip.data["delay"] == {"show": 100, "hide": 50}
        assert tooltip.data["offset"] == "0,8"
        assert tooltip.data["boundary"] == "viewport"
        assert tooltip.data["template"] == DEFAULT_TEMPLATE

    def test_none_removes_a_key(self):
        tooltip = Tooltip(title="Help").set_title(None).set_boundary("#main").set_boundary(None)

        assert "title" not in tooltip.data
        assert "boundary" not in tooltip.data

    def test_manual_trigger_cannot_be_combined(self):
        assert Tooltip().set_triggers([TooltipTrigger.manual]).data["trigger"] == ["manual"]

        with pytest.raises(OutOfBoundsError, match="manual"):
            Tooltip().set_triggers(["manual", "hover"])

    @pytest.mark.parametrize(
        "method,value",
        [("set_placement", "middle"), ("set_triggers", ["tap"]), ("set_fallback_placements", ["up"])],
    )
    def test_unknown_values_raise(self, method, value):
        with pytest.raises(OutOfBoundsError, match="Unknown tooltip"):
            getattr(Tooltip(), method)(value)

    @pytest.mark.parametrize("delay", [-1, {"show": 10, "hide": -5}])
    def test_negative_delay_raises(self, delay):
        with pytest.raises(OutOfBoundsError, match="delay"):
            Tooltip().set_delay(delay)


class TestRendering:
    def test_element_is_decorated_without_icon(self):
        html = Span("Status").set_tooltip_title("Details").render()

        assert html.startswith("<script>$(window).on(\"load\"")
        assert INIT_SCRIPT in html
        assert html.endswith(
            '<span data-tooltip="tooltip" data-placement="right" data-trigger="click" '
            'data-html="false" data-title="Details">Status</span>'
        )

    def test_init_script_is_sent_once_per_page(self, page):
        first = Span("a").set_tooltip_title("A").render()
        second = Span("b").set_tooltip_title("B").render()

        assert INIT_SCRIPT in first
        assert "<script>" not in second
        assert page.tooltip_script_sent

    def test_icon_after_element(self):
        span = Span("Status").set_tooltip(Tooltip(title="Some <help>").set_use_icon(True))

        html = span.render()

        assert '<span class="has-tooltip-icon-right">Status</span><div class="tooltip-icon circle" ' in html
        assert 'data-title="Some &lt;help&gt;"' in html
        assert "data-trigger=\"click\"" in html
        assert "data-html=false" in html

    def test_icon_before_element(self):
        tooltip = Tooltip(title="Help").set_use_icon(True).set_render_before(True).set_icon_html("<i :data>?</i>")
        html = Span("Status").set_tooltip(tooltip).render()

        assert html.endswith('<span class="has-tooltip-icon-left">Status</span>')
        assert "<i data-tooltip=\"tooltip\"" in html

    def test_icon_data_rendering(self):
        tooltip = Tooltip().set_triggers(["hover", "focus"]).set_animation(True).set_delay({"show": 5})

        assert tooltip.render_data() == (
            'data-tooltip="tooltip" data-placement="right" data-trigger="hover focus" '
            'data-html=false data-animation=true data-delay="show: 5"'
        )

    def test_render_without_icon_needs_source_element(self):
        with pytest.raises(OutOfBoundsError, match="source element"):
            Tooltip(title="Help").render("<b>x</b>")

    def test_standalone_icon_render(self):
        html = Tooltip(title="Help").set_use_icon(True).render("<b>x</b>")

        assert html.endswith(f'<b>x</b><div class="tooltip-icon circle" {Tooltip(title="Help").render_data()}>?</div>')
