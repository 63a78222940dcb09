"""
Error taxonomy. Services raise these; API routers and client services
convert them into structured {"error": ...} results at the boundary.
"""


class ValencioError(Exception):
    """Base error. `code` is what goes on the wire, never the message."""

    code = "error"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)
        self.message = message or self.code


class InvalidTokenError(ValencioError):
    """Token is malformed, undecodable, or carries no role."""
    code = "invalid_token"
    status_code = 401


class ExpiredTokenError(ValencioError):
    code = "expired"
    status_code = 401


class WrongPinError(ValencioError):
    """Never sent as-is: activation failures are reported generically."""
    code = "wrong_pin"
    status_code = 401


class UnauthorizedError(ValencioError):
    code = "unauthorized"
    status_code = 401


class PersistenceError(ValencioError):
    code = "persistence_error"
    status_code = 500


class NetworkError(ValencioError):
    """Client side: the API could not be reached or answered garbage."""
    code = "Network error"
    status_code = 503
