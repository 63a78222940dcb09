"""
API routes for Valencio
"""
from .auth import router as auth_router
from .store import router as store_router

__all__ = [
    "auth_router",
    "store_router",
]
