"""
Admin Authentication API
Hub token validation, PIN activation, session check and logout.
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from valencio.database import get_db
from valencio.dependencies import get_session_cookie
from valencio.exceptions import ExpiredTokenError, InvalidTokenError, ValencioError
from valencio.schemas.auth import (
    ActivateRequest,
    ActivateResponse,
    AuthCheckResponse,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from valencio.services.auth_gateway import AuthGateway
from valencio.utils import session_cookie

logger = logging.getLogger(__name__)

router = APIRouter()

# Every activation failure looks the same to the caller.
ACTIVATION_FAILED = "activation_failed"


@router.get("/auth/check", response_model=AuthCheckResponse)
def check_auth(request: Request, db: Session = Depends(get_db)):
    """Is this browser the store admin? Cookie-credentialed, no side effects."""
    return AuthGateway.check_auth(db, get_session_cookie(request))


@router.post(
    "/auth/validate-token",
    response_model=ValidateTokenResponse,
    response_model_exclude_none=True,
)
def validate_token(body: ValidateTokenRequest, db: Session = Depends(get_db)):
    try:
        return AuthGateway.validate_token(db, body.token)
    except ValencioError as e:
        logger.warning("Rejected hub token: %s", e.code)
        return JSONResponse(status_code=e.status_code, content={"valid": False, "error": e.code})


@router.post("/auth/activate", response_model=ActivateResponse, response_model_exclude_none=True)
def activate(body: Any = Body(None), db: Session = Depends(get_db)):
    """
    Activate admin access with hub token + PIN.
    On success the response carries the session Set-Cookie header.
    Malformed bodies fail exactly like a wrong PIN.
    """
    data = ActivateRequest.model_validate(body) if isinstance(body, dict) else ActivateRequest()
    try:
        set_cookie = AuthGateway.activate_admin(db, data.token, data.pin)
    except ValencioError as e:
        logger.warning("Admin activation failed (%s)", e.code)
        return _activation_failed()

    response = JSONResponse(content={"success": True})
    response.headers.append("Set-Cookie", set_cookie)
    return response


def _activation_failed() -> JSONResponse:
    return JSONResponse(status_code=401, content={"success": False, "error": ACTIVATION_FAILED})


@router.post("/auth/logout", response_model=ActivateResponse)
def logout():
    """Clear the admin session cookie (JSON reply for the client)"""
    response = JSONResponse(content={"success": True})
    response.headers.append("Set-Cookie", session_cookie.clear())
    return response


@router.api_route("/logout", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
def logout_redirect():
    """Browser logout link: clear the cookie and go back to the storefront as a guest"""
    response = RedirectResponse(url="/", status_code=302)
    response.headers.append("Set-Cookie", session_cookie.clear())
    return response


@router.get("/hub-login")
def hub_login(hub_token: str = "", db: Session = Depends(get_db)):
    """
    Direct login from the hub: verify the token signature, set the session
    cookie and redirect admins to /admin, everyone else to the storefront.
    """
    if not hub_token:
        return JSONResponse(status_code=400, content={"error": "Token required"})

    try:
        role_value = AuthGateway.hub_login(db, hub_token)
    except ExpiredTokenError:
        return JSONResponse(status_code=401, content={"error": "Token expired"})
    except InvalidTokenError:
        logger.warning("[Hub Login] Rejected hub token")
        return JSONResponse(status_code=401, content={"error": "Invalid token"})

    redirect_path = "/admin" if role_value == session_cookie.ADMIN_ROLE_VALUE else "/"
    response = RedirectResponse(url=redirect_path, status_code=302)
    response.headers.append("Set-Cookie", session_cookie.issue(role_value))
    return response
