"""
Pydantic schemas for Valencio
"""
from .store import (
    CustomColors,
    ElementColors,
    SaveResponse,
    SocialLinks,
    StoreData,
    StoreDataUpdate,
    StoreSettings,
    ThemeColors,
)
from .auth import (
    ActivateRequest,
    ActivateResponse,
    AuthCheckResponse,
    ValidateTokenRequest,
    ValidateTokenResponse,
)

__all__ = [
    "CustomColors",
    "ElementColors",
    "SaveResponse",
    "SocialLinks",
    "StoreData",
    "StoreDataUpdate",
    "StoreSettings",
    "ThemeColors",
    "ActivateRequest",
    "ActivateResponse",
    "AuthCheckResponse",
    "ValidateTokenRequest",
    "ValidateTokenResponse",
]
