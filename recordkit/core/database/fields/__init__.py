"""
Typed field accessor mixins for data entries.

Mix these into a ``DataEntry`` subclass whose entity defines the matching
columns. Bounds are class attributes, so an entry can narrow them.
"""

from .contact import EmailMixin, UrlMixin
from .exception import ExceptionMixin
from .json_columns import DataMixin, DetailsMixin
from .numeric import PRIORITY_MAX, PRIORITY_MIN, PriorityMixin
from .relations import CreatedByMixin
from .severity import Severity, SeverityMixin
from .text import (
    BodyMixin,
    CodeMixin,
    DescriptionMixin,
    FirstNamesMixin,
    LastNamesMixin,
    NameDescriptionMixin,
    NameMixin,
    NicknameMixin,
    TitleMixin,
    TypeMixin,
)

__all__ = [
    "PRIORITY_MAX",
    "PRIORITY_MIN",
    "BodyMixin",
    "CodeMixin",
    "CreatedByMixin",
    "DataMixin",
    "DescriptionMixin",
    "DetailsMixin",
    "EmailMixin",
    "ExceptionMixin",
    "FirstNamesMixin",
    "LastNamesMixin",
    "NameDescriptionMixin",
    "NameMixin",
    "NicknameMixin",
    "PriorityMixin",
    "Severity",
    "SeverityMixin",
    "TitleMixin",
    "TypeMixin",
    "UrlMixin",
]
