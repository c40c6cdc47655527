"""
Session cookie transport.
"""

from typing import Optional

from fastapi import Request, Response


SESSION_COOKIE_NAME = "access_token"


def get_session_token(request: Request) -> Optional[str]:
    """Return the raw session token from the request cookie, if any."""
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def set_session_cookie(response: Response, token: str, secure: bool = False) -> None:
    """
    Place the session token in the response cookie.

    No max_age: the cookie lives for the browser session, while the token
    inside it expires on its own schedule.
    """
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,  # Not accessible via JavaScript
        samesite="strict",
        secure=secure,
    )


def clear_session_cookie(response: Response, secure: bool = False) -> None:
    """Tell the client to drop the session cookie."""
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        httponly=True,
        samesite="strict",
        secure=secure,
    )
