"""
Shared HTTP plumbing for the client services.

Any session object with requests-style get/post (requests.Session,
FastAPI's TestClient) can be injected. Network failures never escape:
they come back as {"error": "Network error"}.
"""
import logging
from typing import Any, Optional

import requests

from valencio.config import settings
from valencio.exceptions import NetworkError

logger = logging.getLogger(__name__)

API_BASE = "/api"
NETWORK_ERROR = NetworkError.code


class ApiClient:
    """Thin JSON client for the storefront API"""

    def __init__(self, session: Optional[Any] = None, base_url: Optional[str] = None):
        self.session = session if session is not None else requests.Session()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}{API_BASE}{path}"

    def request_json(self, method: str, path: str, payload: Optional[dict] = None) -> dict:
        """
        Send a request and return the decoded JSON body, whatever the status code.
        Raises NetworkError when the call fails or the body is not a JSON object.
        """
        try:
            if method == "GET":
                response = self.session.get(self.url(path))
            else:
                response = self.session.post(self.url(path), json=payload)
            body = response.json()
        except Exception as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e
        if not isinstance(body, dict):
            raise NetworkError(f"{method} {path} returned a non-object body")
        return body

    def call(self, method: str, path: str, payload: Optional[dict] = None, fallback: Optional[dict] = None) -> dict:
        """Like request_json, but a NetworkError becomes `fallback` (default {"error": "Network error"})."""
        try:
            return self.request_json(method, path, payload)
        except NetworkError as e:
            logger.error("API call error: %s", e.message)
            return dict(fallback) if fallback is not None else {"error": NETWORK_ERROR}
