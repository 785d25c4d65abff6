"""
URL and email field accessors.

Values are validated with pydantic types so the same rules apply to entries
and to the API schemas.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import AnyHttpUrl, EmailStr, TypeAdapter, ValidationError

from recordkit.core.errors import OutOfBoundsError

_URL = TypeAdapter(AnyHttpUrl)
_EMAIL = TypeAdapter(EmailStr)


class UrlMixin:
    """``url`` column holding an absolute http(s) URL or a site relative path."""

    url_max_length: ClassVar[int] = 2048

    def get_url(self) -> Optional[str]:
        return self.get_typesafe("str|null", "url")

    def set_url(self, url: Optional[str]):
        self._check_length("url", url, self.url_max_length)

        if url and not url.startswith("/"):
            try:
                _URL.validate_python(url)
            except ValidationError as e:
                raise OutOfBoundsError(f"Specified URL '{url}' is invalid: {e.errors()[0]['msg']}") from e

        return self.set(url or None, "url")


class EmailMixin:
    email_max_length: ClassVar[int] = 128

    def get_email(self) -> Optional[str]:
        return self.get_typesafe("str|null", "email")

    def set_email(self, email: Optional[str]):
        """Validate and store a lowercased email address."""
        if email is not None:
            email = email.strip().lower() or None

        self._check_length("email", email, self.email_max_length)

        if email is not None:
            try:
                _EMAIL.validate_python(email)
            except ValidationError as e:
                raise OutOfBoundsError(f"Specified email address '{email}' is invalid") from e

        return self.set(email, "email")
