"""
Business logic services for Valencio
"""
from .auth_gateway import AuthGateway
from .kv_store import KVStore
from .store_service import StoreService

__all__ = [
    "AuthGateway",
    "KVStore",
    "StoreService",
]
