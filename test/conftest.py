from __future__ import annotations

import os
from typing import Iterable

import httpx
import pytest

# Settings are built on first import, point the application at a throwaway
# database before anything imports recordkit
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENABLE_FILE_LOGGING", "false")

from recordkit.web.page import page_context  # noqa: E402


@pytest.fixture(autouse=True)
def page():
    """Render every test against a fresh page, so autofocus and the tooltip script never leak between tests."""
    with page_context(csrf_token="test-csrf-token") as page:
        yield page


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)
