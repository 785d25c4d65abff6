"""
URL helpers.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from recordkit.server.core.config import settings


def www(url: Optional[str] = None) -> str:
    """Return an absolute URL for ``url``.

    Absolute URLs (with a scheme, or protocol relative) are returned as is.
    Relative paths, with or without a leading slash, are placed under the
    configured web root.

    Example:
        >>> www("plugins/3")  # with RECORDKIT_WEB_ROOT=https://example.com/admin/
        'https://example.com/admin/plugins/3'
    """
    root = settings.web_root
    if not root.endswith("/"):
        root += "/"

    if not url:
        return root

    if urlsplit(url).scheme or url.startswith("//"):
        return url

    return root + url.lstrip("/")
