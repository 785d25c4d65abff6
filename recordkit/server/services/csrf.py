"""
CSRF protection for server rendered forms.

Pages that render a POST form also set the page token as a cookie. A form
submission is only accepted when the posted token matches that cookie.
"""

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from starlette.datastructures import FormData

from recordkit.core.logging_config import get_logger
from recordkit.web.html import CSRF_FIELD

logger = get_logger(__name__)

CSRF_COOKIE = "recordkit_csrf"


def set_csrf_cookie(response: Response, token: str) -> Response:
    response.set_cookie(CSRF_COOKIE, token, httponly=True, samesite="strict")
    return response


async def get_verified_form(request: Request) -> FormData:
    """Return the submitted form data once its CSRF token checks out.

    Raises:
        HTTPException: 403 if the token is missing or does not match the cookie
    """
    form = await request.form()
    posted = form.get(CSRF_FIELD)
    expected = request.cookies.get(CSRF_COOKIE)

    if not posted or not expected or not secrets.compare_digest(str(posted), expected):
        logger.warning(f"Rejected form submission to {request.url.path}, invalid CSRF token")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid CSRF token")

    return form


VerifiedFormDep = Annotated[FormData, Depends(get_verified_form)]
