"""
Authentication routes - register/login/logout.
"""

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..auth import Outcome, clear_session_cookie, get_session_token, set_session_cookie
from ..db import LoginRequest, RegisterRequest
from ..dependencies import get_auth_manager, get_settings

router = APIRouter(prefix="/api/auth")

INTERNAL_ERROR = {"error": "Internal server error"}


@router.post("/register")
async def register(body: Optional[RegisterRequest] = None):
    """Create a new account."""
    body = body or RegisterRequest()
    result = await get_auth_manager().register(body.username, body.email, body.password)

    if result.outcome is Outcome.CREATED:
        return JSONResponse(
            {"message": "User created successfully", "user": result.user_id},
            status_code=201
        )
    if result.outcome is Outcome.MISSING_FIELD:
        return JSONResponse({"error": "All fields are required"}, status_code=400)
    if result.outcome is Outcome.STORE_FAILURE:
        return JSONResponse({"error": "Error registering user"}, status_code=500)
    return JSONResponse(INTERNAL_ERROR, status_code=500)


@router.post("/login")
async def login(body: Optional[LoginRequest] = None):
    """Check credentials and set the session cookie."""
    body = body or LoginRequest()
    result = await get_auth_manager().login(body.email, body.password)

    if result.outcome is Outcome.AUTHENTICATED:
        response = JSONResponse({"message": "Login successful"})
        set_session_cookie(response, result.token, secure=get_settings().cookie_secure)
        return response
    if result.outcome is Outcome.MISSING_FIELD:
        return JSONResponse({"message": "All the fields are required!"}, status_code=401)
    if result.outcome is Outcome.USER_NOT_FOUND:
        return JSONResponse({"message": "Error, User not found"}, status_code=404)
    if result.outcome is Outcome.BAD_CREDENTIALS:
        return JSONResponse({"message": "Incorrect password"}, status_code=401)
    return JSONResponse(INTERNAL_ERROR, status_code=500)


@router.post("/logout")
async def logout(request: Request):
    """Clear the session cookie."""
    result = await get_auth_manager().logout(get_session_token(request))

    if result.outcome is Outcome.NO_SESSION:
        return JSONResponse({"message": "No token provided"}, status_code=401)

    response = JSONResponse({"message": "Logout successful"}, status_code=201)
    clear_session_cookie(response, secure=get_settings().cookie_secure)
    return response
