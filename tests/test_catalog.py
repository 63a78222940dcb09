"""Price resolution and stock ordering."""

from valencio.catalog import (
    PRODUCTS,
    Product,
    apply_prices,
    resolve_price,
    section_categories,
    sort_by_stock,
)

M1 = next(p for p in PRODUCTS if p.id == "m1")


def test_override_wins_over_catalog_price():
    assert M1.price == 15000
    assert resolve_price(M1, {"m1": 12000}) == 12000


def test_no_override_uses_catalog_price():
    assert resolve_price(M1, {}) == 15000
    assert resolve_price(M1, {"m2": 1}) == 15000


def test_invalid_overrides_are_ignored():
    assert resolve_price(M1, {"m1": -1}) == 15000
    assert resolve_price(M1, {"m1": "12000"}) == 15000
    assert resolve_price(M1, {"m1": True}) == 15000
    assert resolve_price(M1, {"m1": 0}) == 0


def test_apply_prices_leaves_catalog_untouched():
    priced = apply_prices(PRODUCTS, {"m1": 12000})
    assert next(p for p in priced if p.id == "m1").price == 12000
    assert M1.price == 15000


def test_in_stock_items_come_first_and_order_is_stable():
    a = Product("A", "A", "", 1, "water")
    b = Product("B", "B", "", 1, "water")
    c = Product("C", "C", "", 1, "water")
    ordered = sort_by_stock([a, b, c], {"A": False, "B": True, "C": True})
    assert [p.id for p in ordered] == ["B", "C", "A"]


def test_unknown_stock_counts_as_in_stock():
    a = Product("A", "A", "", 1, "water")
    b = Product("B", "B", "", 1, "water")
    c = Product("C", "C", "", 1, "water")
    ordered = sort_by_stock([a, b, c], {"B": False})
    assert [p.id for p in ordered] == ["A", "C", "B"]


def test_section_order():
    assert section_categories("milky-first") == ("milky", "water")
    assert section_categories("water-first") == ("water", "milky")
