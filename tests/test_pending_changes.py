"""Pending-changes store: local edits, dirty tracking, save and discard."""

import pytest
import requests

from valencio.client.pending_changes import PendingChangesStore
from valencio.client.store_client import StoreClient
from valencio.schemas.store import StoreData

BASE_URL = "https://testserver"


class FakeStoreClient:
    """In-memory stand-in for StoreClient"""

    def __init__(self, data=None, save_result=None):
        self.data = data or StoreData()
        self.save_result = save_result or {"success": True}
        self.saved = []

    def load_store_data(self):
        return self.data.model_copy(deep=True)

    def save_store_data(self, data):
        self.saved.append(data.model_copy(deep=True))
        if self.save_result.get("success"):
            self.data = data.model_copy(deep=True)
        return self.save_result


class DownSession:
    def get(self, *args, **kwargs):
        raise requests.ConnectionError("offline")

    post = get


def editable(client, **kwargs):
    store = PendingChangesStore(client, can_edit=lambda: True, **kwargs)
    store.hydrate()
    return store


@pytest.fixture()
def api_store(admin_client):
    return editable(StoreClient(session=admin_client, base_url=BASE_URL))


# ── dirty tracking ──

@pytest.mark.parametrize(
    "edit",
    [
        lambda s: s.toggle_stock("w1"),
        lambda s: s.set_price("m2", 20000),
        lambda s: s.toggle_setting("isOpen"),
        lambda s: s.toggle_setting("pickup_available"),
        lambda s: s.set_offer("2x1_water"),
        lambda s: s.toggle_section_order(),
        lambda s: s.set_social_link("tiktok", "@valencio"),
        lambda s: s.set_custom_color("cardBg", "#EEEEEE"),
        lambda s: s.set_theme_color("dark", "navbarOpacity", 0.5),
        lambda s: s.mutate("sectionOrder", "water-first"),
    ],
)
def test_every_edit_sets_dirty(edit):
    store = editable(FakeStoreClient())
    assert store.dirty is False
    assert edit(store) is True
    assert store.dirty is True


def test_edits_are_noops_outside_edit_mode():
    store = PendingChangesStore(FakeStoreClient(), can_edit=lambda: False)
    store.hydrate()
    before = store.state.model_copy(deep=True)
    assert store.toggle_stock("w1") is False
    assert store.set_price("m1", 1) is False
    assert store.state == before
    assert store.dirty is False


def test_edits_update_working_state():
    store = editable(FakeStoreClient())
    store.toggle_stock("w1")
    store.set_price("m2", 20000)
    store.toggle_setting("deliveryAvailable")
    store.set_theme_color("light", "navbar_color", "#123456")

    assert store.state.stock["w1"] is False
    assert store.state.prices == {"m2": 20000}
    assert store.state.settings.delivery_available is False
    assert store.state.theme_colors.light.navbar_color == "#123456"
    assert store.effective_price("m2") == 20000


@pytest.mark.parametrize(
    "edit",
    [
        lambda s: s.set_price("m1", -1),
        lambda s: s.set_offer("3x1"),
        lambda s: s.set_theme_color("light", "navbarOpacity", 1.5),
        lambda s: s.set_theme_color("sepia", "text", "#000"),
        lambda s: s.set_social_link("myspace", "x"),
        lambda s: s.toggle_setting("isOnFire"),
        lambda s: s.mutate("cart", []),
    ],
)
def test_invalid_edits_raise_and_change_nothing(edit):
    store = editable(FakeStoreClient())
    before = store.state.model_copy(deep=True)
    with pytest.raises(ValueError):
        edit(store)
    assert store.state == before
    assert store.dirty is False


@pytest.mark.parametrize(
    "edit",
    [
        lambda s: s.set_price("m1", -1),
        lambda s: s.set_offer("3x1"),
        lambda s: s.set_theme_color("sepia", "text", "#000"),
        lambda s: s.set_social_link("myspace", "x"),
        lambda s: s.set_custom_color("glitter", "#FFF"),
        lambda s: s.toggle_setting("isOnFire"),
        lambda s: s.mutate("cart", []),
    ],
)
def test_invalid_edits_outside_edit_mode_are_silent_noops(edit):
    store = PendingChangesStore(FakeStoreClient(), can_edit=lambda: False)
    store.hydrate()
    before = store.state.model_copy(deep=True)
    assert edit(store) is False
    assert store.state == before
    assert store.dirty is False


# ── hydrate ──

def test_hydrate_merges_stock_over_catalog_defaults():
    store = editable(FakeStoreClient(StoreData(stock={"w2": False})))
    assert store.state.stock["w2"] is False
    assert store.state.stock["w1"] is True
    assert set(store.state.stock) >= {"w1", "w2", "w3", "w4", "m1", "m2", "m3", "m4"}


def test_hydrate_falls_back_to_defaults_when_api_is_down():
    store = editable(StoreClient(session=DownSession(), base_url=BASE_URL))
    assert store.state.offer == "none"
    assert store.state.section_order == "milky-first"
    assert store.state.theme_colors.light.navbar_color == "#FFB9D2"
    assert store.dirty is False


# ── save / discard against the API ──

def test_save_clears_dirty_and_persists(api_store, admin_client):
    api_store.set_price("m1", 12000)
    api_store.set_offer("2x1_all")

    result = api_store.save()
    assert result.success is True
    assert api_store.dirty is False

    fresh = editable(StoreClient(session=admin_client, base_url=BASE_URL))
    assert fresh.state.prices == {"m1": 12000}
    assert fresh.state.offer == "2x1_all"
    assert fresh.effective_price("m1") == 12000


def test_discard_restores_last_hydrated_state(api_store):
    hydrated = api_store.state.model_copy(deep=True)
    api_store.toggle_section_order()
    api_store.set_social_link("instagram", "nuevo")

    api_store.discard()
    assert api_store.state == hydrated
    assert api_store.dirty is False


def test_discard_before_save_scenario(api_store):
    original_m2 = api_store.effective_price("m2")

    api_store.toggle_stock("w1")
    api_store.set_price("m2", 20000)
    assert api_store.state.stock["w1"] is False
    assert api_store.effective_price("m2") == 20000

    api_store.discard()
    assert api_store.state.stock["w1"] is True
    assert api_store.effective_price("m2") == original_m2 == 18000
    assert api_store.dirty is False


def test_out_of_stock_products_sort_last(api_store):
    api_store.toggle_stock("w1")
    assert [p.id for p in api_store.sorted_category("water")] == ["w2", "w3", "w4", "w1"]


def test_ordered_sections_follow_section_order(api_store):
    assert list(api_store.ordered_sections()) == ["milky", "water"]
    api_store.toggle_section_order()
    assert list(api_store.ordered_sections()) == ["water", "milky"]


# ── save failures ──

def test_failed_save_keeps_pending_edits_and_alerts():
    alerts = []
    client = FakeStoreClient(save_result={"error": "unauthorized"})
    store = editable(client, on_alert=alerts.append)
    store.set_price("m1", 12000)

    result = store.save()
    assert result.success is False
    assert result.error == "unauthorized"
    assert store.dirty is True
    assert store.state.prices == {"m1": 12000}
    assert alerts == ["Error al guardar: unauthorized"]

    client.save_result = {"success": True}
    assert store.save().success is True
    assert store.dirty is False
    assert alerts[-1] == "¡Cambios aplicados correctamente!"


def test_save_over_dead_network_reports_network_error():
    store = editable(StoreClient(session=DownSession(), base_url=BASE_URL))
    store.toggle_stock("m3")
    result = store.save()
    assert result.error == "Network error"
    assert store.dirty is True


def test_save_without_admin_session_is_rejected_by_server(client):
    store = editable(StoreClient(session=client, base_url=BASE_URL))
    store.set_offer("2x1_all")
    result = store.save()
    assert result.success is False
    assert result.error == "unauthorized"
    assert store.dirty is True


def test_save_sends_whole_aggregate_once():
    client = FakeStoreClient()
    store = editable(client)
    store.toggle_stock("w1")
    store.set_offer("2x1_milky")
    store.save()
    assert len(client.saved) == 1
    assert client.saved[0] == store.state


def test_save_outside_edit_mode_does_nothing():
    client = FakeStoreClient()
    store = PendingChangesStore(client)
    assert store.save().success is False
    assert client.saved == []
