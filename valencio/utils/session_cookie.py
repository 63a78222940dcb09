"""
Admin session cookie.

The cookie value is an HS256-signed JWT holding the role value
("admin_active", "role_<role>"). It has no exp claim and no Max-Age:
the session ends when the browser does.
"""
from typing import Optional

from jose import JWTError, jwt

from valencio.config import settings

CLAIM_ROLE_VALUE = "rv"

ADMIN_ROLE_VALUE = "admin_active"


def role_value_for(role: str) -> str:
    """Map an external hub role to the value stored in the cookie."""
    return ADMIN_ROLE_VALUE if role == "admin" else f"role_{role}"


def sign(role_value: str) -> str:
    return jwt.encode(
        {CLAIM_ROLE_VALUE: role_value},
        settings.COOKIE_SECRET,
        algorithm=settings.COOKIE_ALGORITHM,
    )


def read(cookie_value: Optional[str]) -> Optional[str]:
    """Verify a cookie value and return the role value it carries, or None."""
    if not cookie_value:
        return None
    try:
        payload = jwt.decode(
            cookie_value,
            settings.COOKIE_SECRET,
            algorithms=[settings.COOKIE_ALGORITHM],
            options={"verify_aud": False, "verify_iss": False},
        )
    except JWTError:
        return None
    value = payload.get(CLAIM_ROLE_VALUE)
    return value if isinstance(value, str) else None


def issue(role_value: str) -> str:
    """Set-Cookie header value for a fresh admin session (session-scoped, no Max-Age)."""
    return f"{settings.COOKIE_NAME}={sign(role_value)}; Path=/; HttpOnly; Secure; SameSite=Lax"


def clear() -> str:
    """Set-Cookie header value that expires the session immediately."""
    return f"{settings.COOKIE_NAME}=; Path=/; HttpOnly; Secure; SameSite=Strict; Max-Age=0"
