"""Anonymous visitor identity carried in a cookie.

The source id scopes favourites to a browser without requiring a login.
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import Request, Response

SOURCE_ID_COOKIE = "sourceId"
SOURCE_ID_MAX_AGE = 60 * 60 * 24 * 365


def get_source_id(request: Request) -> str | None:
    """Return the visitor's source id if the cookie is present. Never sets it."""
    return request.cookies.get(SOURCE_ID_COOKIE) or None


def get_or_create_source_id(request: Request, response: Response) -> str:
    """
    Return the visitor's source id, minting one when absent.

    A newly minted id is set on ``response`` as an HTTP-only cookie.
    """
    existing = get_source_id(request)
    if existing:
        return existing

    source_id = uuid4().hex
    response.set_cookie(
        key=SOURCE_ID_COOKIE,
        value=source_id,
        max_age=SOURCE_ID_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    return source_id
