"""
Database models for Valencio
"""
from valencio.database import Base
from .kv import KVEntry

__all__ = [
    "Base",
    "KVEntry",
]
