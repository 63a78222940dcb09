"""
Key-value entry model
"""
from sqlalchemy import Column, String, JSON
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from valencio.database import Base


class KVEntry(Base):
    """One key of the persisted store. Values are arbitrary JSON documents."""
    __tablename__ = "kv_entries"

    key = Column(String(100), primary_key=True)
    value = Column(JSON, nullable=True)
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())
