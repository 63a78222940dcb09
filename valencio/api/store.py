"""
Store Data API
Public read of the storefront aggregate, admin-only batch save.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from valencio.database import get_db
from valencio.dependencies import require_admin
from valencio.schemas.store import SaveResponse, StoreData, StoreDataUpdate
from valencio.services.store_service import StoreService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/store/data", response_model=StoreData, response_model_by_alias=True)
def get_store_data(db: Session = Depends(get_db)):
    return StoreService.load(db)


@router.post(
    "/store/settings",
    response_model=SaveResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
def save_store_settings(update: StoreDataUpdate, db: Session = Depends(get_db)):
    """
    Save a partial or full StoreData. Every field sent is written in one
    transaction; a PersistenceError leaves the stored data untouched.
    """
    StoreService.save(db, update)
    return SaveResponse(success=True)
