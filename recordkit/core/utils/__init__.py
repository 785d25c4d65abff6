"""Small helpers shared across the core package."""

from .typesafe import coerce, parse_types, typesafe

__all__ = ["coerce", "parse_types", "typesafe"]
