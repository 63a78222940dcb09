"""
Admin Activation Service
Validates hub tokens, checks the activation PIN and reads the session cookie.
"""
import logging
import re
import secrets
from typing import Any, Optional

import bcrypt
from sqlalchemy.orm import Session

from valencio.config import settings
from valencio.exceptions import ExpiredTokenError, InvalidTokenError, WrongPinError
from valencio.services.store_service import StoreService
from valencio.utils import session_cookie, token_codec

logger = logging.getLogger(__name__)

PIN_PATTERN = re.compile(r"[0-9]{4}")


class AuthGateway:
    """Service for hub-token activation and admin session checks"""

    @staticmethod
    def decode_valid_payload(token: Optional[str]) -> dict:
        """
        Decode a hub token and enforce the validity rules.
        Raises InvalidTokenError (undecodable or no role) or ExpiredTokenError.
        """
        payload = token_codec.decode(token)
        if not payload or not payload.get(token_codec.CLAIM_ROLE):
            raise InvalidTokenError("Invalid token")
        if token_codec.is_expired(payload):
            raise ExpiredTokenError("Token expired")
        return payload

    @staticmethod
    def validate_token(db: Session, token: Optional[str]) -> dict:
        """
        Validate an incoming hub token. Returns {"valid": True, "alreadyAssociated": bool}.
        Repeated calls with the same token give the same verdict.
        """
        AuthGateway.decode_valid_payload(token)
        return {
            "valid": True,
            "alreadyAssociated": StoreService.is_admin_associated(db),
        }

    @staticmethod
    def verify_pin(pin: Any) -> bool:
        """Check the PIN against ADMIN_PIN_HASH (bcrypt) or, failing that, ADMIN_PIN."""
        if not isinstance(pin, str) or not PIN_PATTERN.fullmatch(pin):
            return False
        if settings.ADMIN_PIN_HASH:
            try:
                return bcrypt.checkpw(pin.encode("utf-8"), settings.ADMIN_PIN_HASH.encode("ascii"))
            except ValueError:
                logger.error("ADMIN_PIN_HASH is not a valid bcrypt hash")
                return False
        if settings.ADMIN_PIN:
            return secrets.compare_digest(pin, settings.ADMIN_PIN)
        logger.warning("No ADMIN_PIN or ADMIN_PIN_HASH configured; activation is impossible")
        return False

    @staticmethod
    def activate_admin(db: Session, token: Any, pin: Any) -> str:
        """
        Re-validate the token and check the PIN.
        Returns the Set-Cookie header for the new session. Raises on any failure.
        """
        payload = AuthGateway.decode_valid_payload(token)
        if not AuthGateway.verify_pin(pin):
            raise WrongPinError("Wrong PIN")

        role = str(payload[token_codec.CLAIM_ROLE])
        role_value = session_cookie.role_value_for(role)
        if role_value == session_cookie.ADMIN_ROLE_VALUE and not StoreService.is_admin_associated(db):
            StoreService.mark_admin_associated(db)
        logger.info("[Activate] Session issued for role: %s", role)
        return session_cookie.issue(role_value)

    @staticmethod
    def hub_login(db: Session, token: Optional[str]) -> str:
        """
        Sign in straight from a hub link, without the PIN.
        Only a token carrying a valid HS256 signature under HUB_JWT_SECRET is
        accepted here, whatever HUB_VERIFY_SIGNATURE says. Returns the role value
        of the new session; raises InvalidTokenError or ExpiredTokenError.
        """
        payload = token_codec.decode(token, verify_signature=True)
        if not payload or not payload.get(token_codec.CLAIM_ROLE):
            raise InvalidTokenError("Invalid token")
        if token_codec.is_expired(payload):
            raise ExpiredTokenError("Token expired")

        role = str(payload[token_codec.CLAIM_ROLE])
        role_value = session_cookie.role_value_for(role)
        if role_value == session_cookie.ADMIN_ROLE_VALUE and not StoreService.is_admin_associated(db):
            StoreService.mark_admin_associated(db)
        logger.info("[Hub Login] User authenticated with role: %s", role)
        return role_value

    @staticmethod
    def is_admin(cookie_value: Optional[str]) -> bool:
        return session_cookie.read(cookie_value) == session_cookie.ADMIN_ROLE_VALUE

    @staticmethod
    def check_auth(db: Session, cookie_value: Optional[str]) -> dict:
        """Report whether the caller's cookie proves an activated admin. No side effects."""
        return {
            "isAdmin": AuthGateway.is_admin(cookie_value),
            "onboardingPending": not StoreService.is_admin_associated(db),
        }
