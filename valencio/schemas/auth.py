"""
Admin activation schemas
"""
from typing import Any, Optional
from pydantic import BaseModel
from valencio.schemas.store import CamelModel


class ValidateTokenRequest(BaseModel):
    token: str = ""


class ValidateTokenResponse(CamelModel):
    valid: Optional[bool] = None
    already_associated: Optional[bool] = None
    error: Optional[str] = None


class ActivateRequest(BaseModel):
    """
    Hub token plus the 4-digit PIN typed by the owner.
    Any JSON value is accepted here; the gateway rejects bad ones with the
    same generic failure as a wrong PIN.
    """
    token: Any = ""
    pin: Any = ""


class ActivateResponse(BaseModel):
    success: Optional[bool] = None
    error: Optional[str] = None


class AuthCheckResponse(CamelModel):
    is_admin: bool = False
    onboarding_pending: bool = False
