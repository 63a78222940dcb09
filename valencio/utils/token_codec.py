"""
Hub token codec.

Hub tokens are JWT-shaped (header.payload.signature). By default only the
payload is decoded and the signature is NOT checked: the hub is trusted to
have signed what it hands out. Set HUB_VERIFY_SIGNATURE=true (with
HUB_JWT_SECRET) to require a valid HS256 signature as well.
"""
import json
import logging
import math
import time
from typing import Optional

from jose import JWTError, jwt
from jose.utils import base64url_decode

from valencio.config import settings

logger = logging.getLogger(__name__)

# JWT claim names
CLAIM_ROLE = "role"
CLAIM_EXP = "exp"

TOKEN_SEGMENTS = 3


def _signature_ok(token: str, secret: str) -> bool:
    try:
        jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_aud": False, "verify_iss": False},
        )
        return True
    except JWTError:
        return False


def decode(token: Optional[str], verify_signature: Optional[bool] = None) -> Optional[dict]:
    """
    Decode the payload of a hub token. Returns the payload dict or None.
    Never raises: any structural, base64 or JSON problem yields None.
    """
    if not token or not isinstance(token, str):
        return None
    parts = token.split(".")
    if len(parts) != TOKEN_SEGMENTS:
        return None
    try:
        payload = json.loads(base64url_decode(parts[1].encode("ascii")))
    except (ValueError, TypeError):
        return None
    if not isinstance(payload, dict):
        return None

    if verify_signature is None:
        verify_signature = settings.HUB_VERIFY_SIGNATURE
    if verify_signature:
        if not settings.HUB_JWT_SECRET:
            logger.warning("HUB_VERIFY_SIGNATURE is on but HUB_JWT_SECRET is empty; rejecting hub token")
            return None
        if not _signature_ok(token, settings.HUB_JWT_SECRET):
            return None
    return payload


def is_expired(payload: dict, now: Optional[float] = None) -> bool:
    """
    True iff the payload's exp lies in the past. No exp never expires.
    Numeric strings count as numbers; any other exp value is treated as expired.
    """
    if CLAIM_EXP not in payload or payload[CLAIM_EXP] is None:
        return False
    exp = payload[CLAIM_EXP]
    if isinstance(exp, bool):
        return True
    try:
        exp = float(exp)
    except (TypeError, ValueError):
        return True
    if not math.isfinite(exp):
        return True
    now_ms = (time.time() if now is None else now) * 1000
    return exp * 1000 < now_ms
