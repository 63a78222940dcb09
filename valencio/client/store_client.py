"""
Store client: load and save the StoreData aggregate.

Reads never block the storefront: any failure returns the defaults.
Writes report failures explicitly through {"error": ...}.
"""
import logging
from typing import Union

from pydantic import ValidationError

from valencio.client.base import ApiClient
from valencio.exceptions import NetworkError
from valencio.schemas.store import StoreData

logger = logging.getLogger(__name__)


def default_store_data() -> StoreData:
    return StoreData()


class StoreClient(ApiClient):

    def load_store_data(self) -> StoreData:
        """Load all store data; falls back to defaults on any error"""
        try:
            body = self.request_json("GET", "/store/data")
        except NetworkError as e:
            logger.error("Error loading store data: %s", e.message)
            return default_store_data()
        if "error" in body:
            logger.error("Error loading store data: %s", body["error"])
            return default_store_data()
        try:
            return StoreData.model_validate(body)
        except ValidationError as e:
            logger.error("Store data did not validate, using defaults: %s", e.error_count())
            return default_store_data()

    def save_store_data(self, data: Union[StoreData, dict]) -> dict:
        """Save store data (requires the admin cookie)"""
        if isinstance(data, StoreData):
            data = data.model_dump(by_alias=True)
        result = self.call("POST", "/store/settings", data)
        if not result.get("success") and not result.get("error"):
            return {"error": "Unknown error"}
        return result
