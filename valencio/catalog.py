"""
Static product catalog with default prices.

Internal categories: "water" holds the pantalones, "milky" the remeras.
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Tuple

CATEGORY_WATER = "water"
CATEGORY_MILKY = "milky"


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    price: int
    category: str


PRODUCTS: Tuple[Product, ...] = (
    # Pantalones
    Product("w1", "Pantalón Cargo Negro", "Estilo urbano, múltiples bolsillos.", 35000, CATEGORY_WATER),
    Product("w2", "Jeans Clásico Azul", "El jean que no puede faltar en tu ropero.", 32000, CATEGORY_WATER),
    Product("w3", "Pantalón Jogger Gris", "Comodidad extrema para tu día a día.", 28000, CATEGORY_WATER),
    Product("w4", "Pantalón Chino Beige", "Elegancia y confort para ocasiones casuales.", 34000, CATEGORY_WATER),
    # Remeras
    Product("m1", "Remera Básica Blanca", "100% Algodón peinado. Un must-have.", 15000, CATEGORY_MILKY),
    Product("m2", "Remera Oversize Negra", "Corte amplio y moderno.", 18000, CATEGORY_MILKY),
    Product("m3", "Remera Estampada Rock", "Diseño exclusivo con vibras vintage.", 19500, CATEGORY_MILKY),
    Product("m4", "Musculosa Deportiva", "Tela respirable, ideal para entrenar.", 13000, CATEGORY_MILKY),
)


def default_stock(products: Iterable[Product] = PRODUCTS) -> Dict[str, bool]:
    """Everything starts in stock."""
    return {p.id: True for p in products}


def resolve_price(product: Product, prices: Mapping[str, int]) -> int:
    """Override from `prices` when it is a non-negative integer, else the catalog price."""
    override = prices.get(product.id)
    if isinstance(override, int) and not isinstance(override, bool) and override >= 0:
        return override
    return product.price


def apply_prices(products: Iterable[Product], prices: Mapping[str, int]) -> List[Product]:
    return [replace(p, price=resolve_price(p, prices)) for p in products]


def is_in_stock(product_id: str, stock: Mapping[str, bool]) -> bool:
    return stock.get(product_id) is not False


def sort_by_stock(products: Iterable[Product], stock: Mapping[str, bool]) -> List[Product]:
    """In-stock first, out-of-stock last; relative order kept inside each group."""
    return sorted(products, key=lambda p: 0 if is_in_stock(p.id, stock) else 1)


def section_categories(section_order: str) -> Tuple[str, str]:
    if section_order == "water-first":
        return (CATEGORY_WATER, CATEGORY_MILKY)
    return (CATEGORY_MILKY, CATEGORY_WATER)
