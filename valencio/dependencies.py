"""
Request dependencies: session cookie extraction and the admin gate for mutating routes.
"""
import logging
from typing import Optional

from fastapi import Request

from valencio.config import settings
from valencio.exceptions import UnauthorizedError
from valencio.services.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)


def get_session_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(settings.COOKIE_NAME)


def require_admin(request: Request) -> None:
    """
    Gate for admin-only routes. The cookie is verified on every request;
    a missing, forged or non-admin cookie raises UnauthorizedError.
    """
    if not AuthGateway.is_admin(get_session_cookie(request)):
        logger.warning("Rejected admin request to %s without a valid session", request.url.path)
        raise UnauthorizedError("Admin session required")
