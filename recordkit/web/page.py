"""
Request scoped page state.

Components rendered during one request share a few pieces of state: which
element owns autofocus, whether the tooltip bootstrap script was emitted, the
scripts collected for the document head and foot, and the CSRF token. That
state lives on a ``Page`` held in a context variable, so concurrent requests
never see each other's page.
"""

from __future__ import annotations

import secrets
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from markupsafe import Markup, escape

from recordkit.server.core.config import settings


@dataclass
class Page:
    """Render state of one HTML document."""

    csrf_token: str = field(default_factory=lambda: secrets.token_urlsafe(32))
    autofocus: Optional[str] = None
    tooltip_script_sent: bool = False
    header_scripts: List[Markup] = field(default_factory=list)
    footer_scripts: List[Markup] = field(default_factory=list)

    def add_header_script(self, script: Markup) -> None:
        self.header_scripts.append(Markup(script))

    def add_footer_script(self, script: Markup) -> None:
        self.footer_scripts.append(Markup(script))


_current_page: ContextVar[Optional[Page]] = ContextVar("recordkit_page", default=None)


def get_page() -> Page:
    """Return the active page, starting one if none is active yet."""
    page = _current_page.get()
    if page is None:
        page = Page()
        _current_page.set(page)
    return page


@contextmanager
def page_context(csrf_token: Optional[str] = None) -> Iterator[Page]:
    """Render a block of components against a fresh page.

    Example:
        with page_context() as page:
            html = render_document("Plugins", table)
    """
    page = Page(csrf_token=csrf_token) if csrf_token else Page()
    token = _current_page.set(page)
    try:
        yield page
    finally:
        _current_page.reset(token)


def render_document(title: str, body: object, lang: str = "en") -> Markup:
    """Wrap ``body`` into a complete HTML document.

    ``body`` is rendered before the head is built, so that scripts the
    components attach to the header or footer are included.
    """
    body_html = body.__html__() if hasattr(body, "__html__") else escape(body)
    page = get_page()

    head = Markup("").join(page.header_scripts)
    foot = Markup("").join(page.footer_scripts)

    return Markup(
        "<!DOCTYPE html>"
        f'<html lang="{escape(lang)}">'
        "<head>"
        f'<meta charset="{escape(settings.html_encoding)}">'
        f'<meta name="csrf-token" content="{escape(page.csrf_token)}">'
        f"<title>{escape(title)}</title>"
        f"{head}"
        "</head>"
        f"<body>{body_html}{foot}</body>"
        "</html>"
    )
