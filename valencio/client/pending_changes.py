"""
Pending-changes store.

Holds a working copy of every admin-editable field, shadowing the persisted
StoreData. Edits are applied locally and flagged dirty; save() commits the
whole aggregate in one request, discard() reverts to the persisted values.
The dirty flag is only touched by _commit_local, _mark_saved and _reset.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic.alias_generators import to_camel

from valencio.catalog import (
    PRODUCTS,
    Product,
    apply_prices,
    default_stock,
    resolve_price,
    section_categories,
    sort_by_stock,
)
from valencio.client.store_client import StoreClient
from valencio.schemas.store import ElementColors, StoreData, StoreSettings

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = tuple(StoreData.model_fields)
SETTING_NAMES = tuple(StoreSettings.model_fields)

SAVE_OK_MESSAGE = "¡Cambios aplicados correctamente!"
SAVE_ERROR_MESSAGE = "Error al guardar: "


def _python_name(name: str, fields) -> str:
    """Accept wire (camelCase) names wherever a Python field name is expected."""
    return {to_camel(f): f for f in fields}.get(name, name)


@dataclass
class SaveResult:
    success: bool
    error: Optional[str] = None


def _never() -> bool:
    return False


class PendingChangesStore:
    """
    Working copy of StoreData plus a dirty flag.

    `can_edit` is the authority on whether edits are allowed (admin and in
    edit mode); the store holds no authority of its own. `on_alert` receives
    the user-facing result message of a save.
    """

    def __init__(
        self,
        store_client: StoreClient,
        can_edit: Callable[[], bool] = _never,
        catalog: Sequence[Product] = PRODUCTS,
        on_alert: Optional[Callable[[str], None]] = None,
    ):
        self.store_client = store_client
        self.can_edit = can_edit
        self.catalog = tuple(catalog)
        self.on_alert = on_alert
        self.persisted = self._with_catalog_stock(StoreData())
        self.state = self.persisted.model_copy(deep=True)
        self.dirty = False

    def _with_catalog_stock(self, data: StoreData) -> StoreData:
        stock = default_stock(self.catalog)
        stock.update(data.stock)
        return data.model_copy(update={"stock": stock}, deep=True)

    def _reset(self, data: StoreData) -> StoreData:
        self.persisted = self._with_catalog_stock(data)
        self.state = self.persisted.model_copy(deep=True)
        self.dirty = False
        return self.state

    def _mark_saved(self) -> None:
        self.persisted = self.state.model_copy(deep=True)
        self.dirty = False

    def _commit_local(self, field: str, value: Any) -> None:
        raw = self.state.model_dump()
        raw[field] = value
        self.state = StoreData.model_validate(raw)
        self.dirty = True

    # -- persisted round-trips -------------------------------------------

    def hydrate(self) -> StoreData:
        """Replace the working copy with the persisted data (defaults if the load fails)."""
        return self._reset(self.store_client.load_store_data())

    def discard(self) -> StoreData:
        """Drop every pending edit by reloading the last saved values."""
        logger.info("Discarding pending changes")
        return self.hydrate()

    def save(self) -> SaveResult:
        """
        Send the whole working copy in one request. On failure every pending
        edit stays in place (still dirty) so the admin can retry.
        """
        if not self.can_edit():
            return SaveResult(success=False, error="Not authorized")
        result = self.store_client.save_store_data(self.state)
        if result.get("success"):
            self._mark_saved()
            self._alert(SAVE_OK_MESSAGE)
            return SaveResult(success=True)
        error = result.get("error") or "Unknown error"
        logger.warning("Saving store data failed: %s", error)
        self._alert(SAVE_ERROR_MESSAGE + error)
        return SaveResult(success=False, error=error)

    def _alert(self, message: str) -> None:
        if self.on_alert is not None:
            self.on_alert(message)

    # -- local edits ------------------------------------------------------

    def mutate(self, field: str, value: Any) -> bool:
        """
        Replace one field of the working copy. Returns False (no change) when
        editing is not allowed, before anything is validated. Raises ValueError
        for unknown fields or values that do not validate.
        """
        if not self.can_edit():
            return False
        field = _python_name(field, EDITABLE_FIELDS)
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {field}")
        self._commit_local(field, value)
        return True

    def toggle_stock(self, product_id: str) -> bool:
        stock = dict(self.state.stock)
        stock[product_id] = not stock.get(product_id, True)
        return self.mutate("stock", stock)

    def set_price(self, product_id: str, price: int) -> bool:
        if not self.can_edit():
            return False
        if isinstance(price, bool) or not isinstance(price, int) or price < 0:
            raise ValueError("Price must be a non-negative integer")
        return self.mutate("prices", {**self.state.prices, product_id: price})

    def toggle_setting(self, name: str) -> bool:
        if not self.can_edit():
            return False
        name = _python_name(name, SETTING_NAMES)
        if name not in SETTING_NAMES:
            raise ValueError(f"Unknown setting: {name}")
        current = self.state.settings.model_dump()
        current[name] = not current[name]
        return self.mutate("settings", current)

    def set_offer(self, offer: str) -> bool:
        return self.mutate("offer", offer)

    def toggle_section_order(self) -> bool:
        flipped = "water-first" if self.state.section_order == "milky-first" else "milky-first"
        return self.mutate("section_order", flipped)

    def set_social_link(self, key: str, value: str) -> bool:
        if not self.can_edit():
            return False
        links = self.state.social_links.model_dump()
        if key not in links:
            raise ValueError(f"Unknown social link: {key}")
        links[key] = value
        return self.mutate("social_links", links)

    def set_custom_color(self, key: str, value: str) -> bool:
        if not self.can_edit():
            return False
        colors = self.state.custom_colors.model_dump()
        key = _python_name(key, colors)
        if key not in colors:
            raise ValueError(f"Unknown color: {key}")
        colors[key] = value
        return self.mutate("custom_colors", colors)

    def set_theme_color(self, theme: str, key: str, value: Any) -> bool:
        if not self.can_edit():
            return False
        themes = self.state.theme_colors.model_dump()
        key = _python_name(key, ElementColors.model_fields)
        if theme not in themes or key not in themes[theme]:
            raise ValueError(f"Unknown theme color: {theme}.{key}")
        themes[theme][key] = value
        return self.mutate("theme_colors", themes)

    # -- derived views ----------------------------------------------------

    def effective_price(self, product_id: str) -> int:
        product = next((p for p in self.catalog if p.id == product_id), None)
        if product is None:
            raise KeyError(product_id)
        return resolve_price(product, self.state.prices)

    def products(self) -> List[Product]:
        """Catalog with the current price overrides applied"""
        return apply_prices(self.catalog, self.state.prices)

    def sorted_category(self, category: str) -> List[Product]:
        return sort_by_stock(
            [p for p in self.products() if p.category == category],
            self.state.stock,
        )

    def ordered_sections(self) -> Dict[str, List[Product]]:
        """Categories in display order, each sorted in-stock first"""
        return {category: self.sorted_category(category) for category in section_categories(self.state.section_order)}
