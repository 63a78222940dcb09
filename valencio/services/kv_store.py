"""
Persisted key-value store backed by a single SQLAlchemy table.
Reads and writes are wholesale: put_many writes every key in one transaction.
"""
import logging
from typing import Any, Dict, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from valencio.exceptions import PersistenceError
from valencio.models.kv import KVEntry

logger = logging.getLogger(__name__)


class KVStore:
    """Opaque durable map of string keys to JSON values"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str, default: Any = None) -> Any:
        try:
            entry = self.db.get(KVEntry, key)
        except SQLAlchemyError as e:
            logger.error("KV read failed for %s: %s", key, e)
            raise PersistenceError("Failed to read store data") from e
        return default if entry is None else entry.value

    def get_many(self, keys: Iterable[str]) -> Dict[str, Any]:
        """Return the stored values for the keys that exist."""
        keys = list(keys)
        try:
            rows = self.db.query(KVEntry).filter(KVEntry.key.in_(keys)).all()
        except SQLAlchemyError as e:
            logger.error("KV bulk read failed: %s", e)
            raise PersistenceError("Failed to read store data") from e
        return {row.key: row.value for row in rows}

    def put_many(self, values: Dict[str, Any]) -> None:
        """Write all values atomically: either every key is stored or none is."""
        if not values:
            return
        try:
            for key, value in values.items():
                entry = self.db.get(KVEntry, key)
                if entry is None:
                    self.db.add(KVEntry(key=key, value=value))
                else:
                    entry.value = value
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("KV write failed for keys %s: %s", sorted(values), e)
            raise PersistenceError("Failed to save store data") from e

    def put(self, key: str, value: Any) -> None:
        self.put_many({key: value})
