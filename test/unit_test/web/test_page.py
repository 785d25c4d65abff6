"""Unit tests for the request scoped page state."""

from markupsafe import Markup

from recordkit.web.html import Div, Script, Span
from recordkit.web.page import Page, get_page, page_context, render_document


class TestPageContext:
    def test_get_page_returns_active_page(self, page):
        assert get_page() is page
        assert page.csrf_token == "test-csrf-token"

    def test_nested_context_is_isolated(self, page):
        page.autofocus = "outer"

        with page_context() as inner:
            assert get_page() is inner
            assert inner.autofocus is None
            assert inner.csrf_token != "test-csrf-token"

        assert get_page() is page
        assert page.autofocus == "outer"

    def test_generated_tokens_differ(self):
        assert Page().csrf_token != Page().csrf_token

    def test_scripts_are_kept_as_markup(self):
        page = Page()
        page.add_header_script("<script></script>")

        assert isinstance(page.header_scripts[0], Markup)


class TestRenderDocument:
    def test_document_structure(self):
        html = render_document("Plugins & more", Div("Hello"))

        assert html.startswith('<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">')
        assert '<meta name="csrf-token" content="test-csrf-token">' in html
        assert "<title>Plugins &amp; more</title>" in html
        assert html.endswith("<body><div>Hello</div></body></html>")

    def test_plain_body_is_escaped(self):
        assert "<body>&lt;b&gt;</body>" in render_document("Title", "<b>")

    def test_collected_scripts_are_placed(self):
        body = Span("Body").set_extra(Script("head();").set_attach("header"))
        body.append_content(Script("foot();").set_attach("footer"))

        html = render_document("Title", body)

        head, _, rest = html.partition("</head>")
        assert "head();" in head
        assert rest.index("<span>") < rest.index("foot();") < rest.index("</body>")
