"""
SEO name generation.

SEO names are URL safe slugs derived from human readable values such as entry
names. ``unique`` adds a numeric suffix until the slug is not taken yet; the
caller supplies the lookup so the same rules work for database columns and for
in-memory collections.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Callable, Mapping, Optional

from recordkit.core.logging_config import get_logger

logger = get_logger(__name__)

_TAGS = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def seo_string(source: object, replace: str = "-") -> str:
    """Normalize ``source`` into a slug.

    Example:
        >>> seo_string("  Foo <b>Bär</b>'s  page! ")
        'foo-bars-page'
    """
    value = _TAGS.sub("", str(source)).strip().lower()
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"['\"\\]", "", value)
    value = _WHITESPACE.sub(" ", value)

    if not replace:
        return _NON_ALNUM.sub("", value)

    value = _NON_ALNUM.sub(replace, value)
    value = re.sub(f"(?:{re.escape(replace)})+", replace, value)
    return value.strip(replace)


def unique(
    source: object,
    exists: Callable[[str], bool],
    first_suffix: Optional[str] = None,
    replace: str = "-",
) -> Optional[str]:
    """Return the first variant of the slug of ``source`` for which ``exists`` is false.

    The bare slug is tried first, then the slug with ``first_suffix`` (when
    given), then the slug with ``1``, ``2``, ... appended.

    Args:
        source: Human readable value to derive the slug from
        exists: Callback reporting whether a candidate is already taken
        first_suffix: Optional suffix to try before the numeric ones
        replace: Separator used for non alphanumeric characters

    Returns:
        The unique slug, or ``None`` for an empty source
    """
    if source is None or str(source).strip() == "":
        return None

    base = seo_string(source, replace)
    if not exists(base):
        return base

    if first_suffix:
        candidate = base + seo_string(first_suffix, replace)
        if not exists(candidate):
            logger.debug(f"SEO name '{base}' is taken, using '{candidate}'")
            return candidate

    counter = 1
    while True:
        candidate = f"{base}{counter}"
        if not exists(candidate):
            logger.debug(f"SEO name '{base}' is taken, using '{candidate}'")
            return candidate
        counter += 1


def unique_across(
    sources: Mapping[str, object],
    exists: Callable[[Mapping[str, str]], bool],
    first_suffix: Optional[str] = None,
    replace: str = "-",
) -> Optional[str]:
    """Multi column variant of :func:`unique`.

    All values are normalized, only the first column gets a suffix, and
    ``exists`` receives the full column -> value combination.

    Returns:
        The final value of the first column, or ``None`` for an empty first source
    """
    if not sources:
        return None

    columns = list(sources)
    first = columns[0]
    normalized = {column: seo_string(value, replace) for column, value in sources.items() if value is not None}
    if not normalized.get(first):
        return None

    def first_exists(candidate: str) -> bool:
        return exists({**normalized, first: candidate})

    return unique(normalized[first], first_exists, first_suffix=first_suffix, replace=replace)
