"""
Auth client: talks to /api/auth/* and handles the admin_token URL parameter.
"""
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from valencio.client.base import ApiClient

ADMIN_TOKEN_PARAM = "admin_token"


class AuthClient(ApiClient):
    """Admin activation calls. Every method returns a dict and never raises."""

    def validate_token(self, token: str) -> dict:
        """Validate a token taken from the URL"""
        return self.call("POST", "/auth/validate-token", {"token": token})

    def activate_admin(self, token: str, pin: str) -> dict:
        """Activate admin with token + PIN; on success the session cookie lands in the jar"""
        return self.call("POST", "/auth/activate", {"token": token, "pin": pin})

    def check_auth(self) -> dict:
        """Check if the current browser session is admin (via cookie)"""
        return self.call(
            "GET",
            "/auth/check",
            fallback={"isAdmin": False, "onboardingPending": False},
        )

    def logout(self) -> dict:
        return self.call("POST", "/auth/logout")


def get_token_from_url(url: str) -> Optional[str]:
    values = parse_qs(urlsplit(url).query).get(ADMIN_TOKEN_PARAM)
    return values[0] if values else None


def clear_token_from_url(url: str) -> str:
    """Return `url` without the admin_token parameter, everything else untouched."""
    parts = urlsplit(url)
    query = [
        (key, value)
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
        for value in values
        if key != ADMIN_TOKEN_PARAM
    ]
    return urlunsplit(parts._replace(query=urlencode(query)))
