"""
Store Data Service
Loads and saves the admin-editable storefront aggregate.
"""
import logging

from pydantic import ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from valencio.schemas.store import StoreData, StoreDataUpdate
from valencio.services.kv_store import KVStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "store:"
ADMIN_ASSOCIATED_KEY = "admin:associated"

# Wire (camelCase) names double as the KV keys, one key per top-level field.
STORE_FIELDS = tuple(to_camel(name) for name in StoreData.model_fields)


def _key(field: str) -> str:
    return f"{KEY_PREFIX}{field}"


class StoreService:
    """Service for the persisted store aggregate"""

    @staticmethod
    def load(db: Session) -> StoreData:
        """
        Read every stored field and fill the rest with defaults.
        A stored value that no longer validates is dropped in favour of its default.
        """
        stored = KVStore(db).get_many(_key(f) for f in STORE_FIELDS)
        raw = {}
        for field in STORE_FIELDS:
            key = _key(field)
            if key in stored and stored[key] is not None:
                raw[field] = stored[key]
        try:
            return StoreData.model_validate(raw)
        except ValidationError as e:
            bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
            logger.warning("Ignoring invalid stored fields %s", sorted(map(str, bad)))
            return StoreData.model_validate({k: v for k, v in raw.items() if k not in bad})

    @staticmethod
    def save(db: Session, update: StoreDataUpdate) -> list:
        """
        Write the fields present in the update as one atomic operation.
        Concurrent saves are last-write-wins per field.
        Returns the list of fields written.
        """
        data = update.model_dump(by_alias=True, exclude_none=True)
        KVStore(db).put_many({_key(field): value for field, value in data.items()})
        logger.info("Store data saved: %s", ", ".join(sorted(data)) or "(nothing)")
        return sorted(data)

    @staticmethod
    def is_admin_associated(db: Session) -> bool:
        return bool(KVStore(db).get(ADMIN_ASSOCIATED_KEY, False))

    @staticmethod
    def mark_admin_associated(db: Session) -> None:
        KVStore(db).put(ADMIN_ASSOCIATED_KEY, True)
