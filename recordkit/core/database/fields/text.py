"""
Plain text field accessors.

Each mixin adds a ``get_*`` / ``set_*`` pair for one column. Setters validate
the length before writing and return the entry so calls can be chained.
"""

from __future__ import annotations

import re
from typing import ClassVar, Optional

from recordkit.core.errors import OutOfBoundsError
from recordkit.core.seo import seo_string

_CODE = re.compile(r"^[A-Za-z0-9_-]+$")


class NameMixin:
    """``name`` column with a derived ``seo_name``."""

    name_max_length: ClassVar[int] = 128

    def get_name(self) -> Optional[str]:
        return self.get_typesafe("str|null", "name")

    def set_name(self, name: Optional[str]):
        """Set the name and derive the SEO name from it.

        The SEO name is made unique against the database when the entry is
        saved. Clearing the name clears the SEO name too.
        """
        if name is not None:
            name = name.strip() or None

        self._check_length("name", name, self.name_max_length)

        if "seo_name" in self.definitions():
            self.set((seo_string(name) or None) if name else None, "seo_name")

        return self.set(name, "name")

    def get_seo_name(self) -> Optional[str]:
        return self.get_typesafe("str|null", "seo_name")


class DescriptionMixin:
    description_max_length: ClassVar[int] = 65_535

    def get_description(self) -> Optional[str]:
        return self.get_typesafe("str|null", "description")

    def set_description(self, description: Optional[str]):
        self._check_length("description", description, self.description_max_length)
        return self.set(description, "description")


class NameDescriptionMixin(NameMixin, DescriptionMixin):
    """Convenience combination of :class:`NameMixin` and :class:`DescriptionMixin`."""


class TitleMixin:
    title_min_length: ClassVar[int] = 4
    title_max_length: ClassVar[int] = 255

    def get_title(self) -> Optional[str]:
        return self.get_typesafe("str|null", "title")

    def set_title(self, title: Optional[str]):
        self._check_length("title", title, self.title_max_length, self.title_min_length)
        return self.set(title, "title")


class BodyMixin:
    body_max_length: ClassVar[int] = 65_535

    def get_body(self) -> Optional[str]:
        return self.get_typesafe("str|null", "body")

    def set_body(self, body: Optional[str]):
        self._check_length("body", body, self.body_max_length)
        return self.set(body, "body")


class CodeMixin:
    """Short machine readable code, letters, digits, dashes and underscores only."""

    code_max_length: ClassVar[int] = 64

    def get_code(self) -> Optional[str]:
        return self.get_typesafe("str|null", "code")

    def set_code(self, code: Optional[str]):
        self._check_length("code", code, self.code_max_length)

        if code is not None and not _CODE.match(code):
            raise OutOfBoundsError(f"Specified code '{code}' is invalid, it may only contain letters, digits, - and _")

        return self.set(code, "code")


class TypeMixin:
    type_max_length: ClassVar[int] = 64
    type_default: ClassVar[Optional[str]] = "Unknown"

    def get_type(self) -> Optional[str]:
        return self.get_typesafe("str|null", "type", self.type_default)

    def set_type(self, type: Optional[str]):
        self._check_length("type", type, self.type_max_length)
        return self.set(type, "type")


class NicknameMixin:
    nickname_max_length: ClassVar[int] = 64

    def get_nickname(self) -> Optional[str]:
        return self.get_typesafe("str|null", "nickname")

    def set_nickname(self, nickname: Optional[str]):
        self._check_length("nickname", nickname, self.nickname_max_length)
        return self.set(nickname, "nickname")


class FirstNamesMixin:
    first_names_max_length: ClassVar[int] = 127

    def get_first_names(self) -> Optional[str]:
        return self.get_typesafe("str|null", "first_names")

    def set_first_names(self, first_names: Optional[str]):
        self._check_length("first_names", first_names, self.first_names_max_length)
        return self.set(first_names, "first_names")


class LastNamesMixin:
    last_names_max_length: ClassVar[int] = 127

    def get_last_names(self) -> Optional[str]:
        return self.get_typesafe("str|null", "last_names")

    def set_last_names(self, last_names: Optional[str]):
        self._check_length("last_names", last_names, self.last_names_max_length)
        return self.set(last_names, "last_names")
