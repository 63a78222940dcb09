"""
Client side of the storefront: API services and admin state machines
"""
from .admin_session import AdminSession
from .auth_client import AuthClient, clear_token_from_url, get_token_from_url
from .pending_changes import PendingChangesStore, SaveResult
from .pin_entry import PinEntry, PinState
from .store_client import StoreClient, default_store_data

__all__ = [
    "AdminSession",
    "AuthClient",
    "clear_token_from_url",
    "get_token_from_url",
    "PendingChangesStore",
    "SaveResult",
    "PinEntry",
    "PinState",
    "StoreClient",
    "default_store_data",
]
