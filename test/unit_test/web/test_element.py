"""Unit tests for the base Element and its attribute state."""

import pytest
from markupsafe import Markup

from recordkit.core.errors import OutOfBoundsError
from recordkit.web.html import A, Div, Element, Span, format_attributes, to_markup
from recordkit.web.html.element import VOID_ELEMENTS


class TestToMarkup:
    @pytest.mark.parametrize(
        "content,expected",
        [
            (None, ""),
            ("<b>bold</b>", "<b>bold</b>"),
            (12, "12"),
            (1.5, "1.5"),
            (Span("x"), "<span>x</span>"),
        ],
    )
    def test_content_is_taken_as_html(self, content, expected):
        assert to_markup(content) == Markup(expected)

    def test_make_safe_escapes_strings(self):
        assert to_markup("<b>&</b>", make_safe=True) == "&lt;b&gt;&amp;&lt;/b&gt;"

    def test_make_safe_keeps_components(self):
        assert to_markup(Span("<i>x</i>"), make_safe=True) == "<span><i>x</i></span>"

    @pytest.mark.parametrize("content", [True, ["a"], {"a": 1}, object()])
    def test_unsupported_content_raises(self, content):
        with pytest.raises(OutOfBoundsError, match="as element content"):
            to_markup(content)


class TestFormatAttributes:
    def test_formatting_rules(self):
        html = format_attributes(
            {"id": "x", "hidden": None, "off": False, "empty": "", "required": True, "data-ids": [1, 2], "title": 'a"b'}
        )

        assert html == ' id="x" required data-ids="1 2" title="a&#34;b"'

    def test_nothing_to_render(self):
        assert format_attributes({"a": None}) == ""


class TestElementRender:
    def test_plain_element(self):
        assert Element("section", "Hi").render() == "<section>Hi</section>"

    def test_attribute_order(self):
        element = (
            Element("div")
            .set_attribute("title", "Tip")
            .set_aria("label", "Label")
            .set_data("id", 3)
            .set_tabindex(2)
            .set_id("main")
            .add_class("a b")
            .set_height(10)
        )

        assert element.render() == (
            '<div id="main" name="main" class="a b" height="10" tabindex="2" '
            'data-id="3" aria-label="Label" title="Tip"></div>'
        )

    def test_generic_attribute_fills_unset_system_attribute(self):
        assert Element("div").set_attribute("id", "x").render() == '<div id="x"></div>'
        assert Element("div").set_id("y", name_too=False).set_attribute("id", "x").render() == '<div id="y"></div>'

    def test_values_are_escaped(self):
        assert Element("div").set_data("v", '<"&>').render() == '<div data-v="&lt;&#34;&amp;&gt;"></div>'

    @pytest.mark.parametrize("tag", sorted(VOID_ELEMENTS))
    def test_void_elements_have_no_closing_tag(self, tag):
        html = Element(tag, "ignored").render()

        assert html == f"<{tag} />"

    def test_null_element_renders_content_and_extra(self):
        assert Element(None, "<b>x</b>").set_extra("!").render() == "<b>x</b>!"

    def test_empty_element_type_raises(self):
        with pytest.raises(OutOfBoundsError):
            Element("")

    def test_render_without_element_type_raises(self):
        element = Element("div")
        element.element = ""

        with pytest.raises(OutOfBoundsError, match="no element type"):
            element.render()

    def test_str_and_html_protocol(self):
        span = Span("x")

        assert str(span) == "<span>x</span>"
        assert Markup("<p>{}</p>").format(span) == "<p><span>x</span></p>"

    def test_disabled_suppresses_tabindex(self):
        html = Element("button").set_tabindex(1).set_disabled(True).render()

        assert html == "<button disabled></button>"

    def test_auto_submit_adds_script(self):
        select = Element("select").set_name("sort").set_attribute("auto_submit", True)
        html = select.render()

        assert html.startswith('<select name="sort"></select><script>$(window).on("load"')
        assert 'closest("form").submit()' in html
        assert select.render() == html


class TestContent:
    def test_append_and_prepend(self):
        div = Div("b").append_content("c").prepend_content("a")

        assert div.content == "abc"

    def test_make_safe_content(self):
        assert Div("<b>", make_safe=True).render() == "<div>&lt;b&gt;</div>"
        assert Div("<b>").render() == "<div><b></div>"

    def test_nested_components(self):
        assert Div(Span("x")).render() == "<div><span>x</span></div>"


class TestDimensionsAndClasses:
    @pytest.mark.parametrize("setter", ["set_height", "set_width"])
    def test_negative_dimensions_raise(self, setter):
        with pytest.raises(OutOfBoundsError):
            getattr(Div(), setter)(-1)

    def test_class_helpers(self):
        div = Div().add_class("a b", "c").remove_class("b")

        assert div.classes == ["a", "c"]
        assert div.has_class("c")

        div.set_class("z")
        assert div.class_string == "z"

    def test_float_right(self):
        div = Div().set_float_right(True)

        assert div.float_right
        assert not div.set_float_right(False).float_right

    def test_data_and_aria_are_created_lazily(self):
        div = Div()

        assert div._data is None
        assert div.data == {}
        assert div.merge_data({"a": 1}).data == {"a": 1}


class TestAutofocus:
    def test_single_winner(self):
        first = Div().set_name("first").set_autofocus(True)

        with pytest.raises(OutOfBoundsError, match="already has autofocus"):
            Div().set_name("second").set_autofocus(True)

        assert first.autofocus
        assert first.render() == '<div name="first" autofocus></div>'

    def test_setting_autofocus_twice_on_same_element(self):
        div = Div().set_name("first")

        div.set_autofocus(True).set_autofocus(True)

        assert div.autofocus

    def test_requires_a_name(self):
        with pytest.raises(OutOfBoundsError, match="without a name"):
            Div().set_autofocus(True)

    def test_release_only_by_owner(self, page):
        owner = Div().set_name("owner").set_autofocus(True)

        Div().set_name("other").set_autofocus(False)
        assert page.autofocus == "owner"

        owner.set_autofocus(False)
        assert page.autofocus is None

    def test_autofocus_is_per_page(self, page):
        Div().set_name("first").set_autofocus(True)

        from recordkit.web.page import page_context

        with page_context():
            assert Div().set_name("second").set_autofocus(True).autofocus


class TestWrappers:
    def test_outer_div(self):
        span = Span("x")
        span.outer_div.add_class("wrapper")

        assert span.render() == '<div class="wrapper"><span>x</span></div>'

    def test_anchor_wraps_and_extra_follows(self):
        html = Span("x").set_anchor("plugins/1").set_extra("!").render()

        assert html == '<a href="/plugins/1"><span>x</span></a>!'

    def test_anchor_component(self):
        html = Span("x").set_anchor(A().set_target("_blank").set_href("https://example.com")).render()

        assert html == '<a target="_blank" href="https://example.com"><span>x</span></a>'
