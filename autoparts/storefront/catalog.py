"""
Static storefront catalog and catalog filtering.

The seed list is both the storefront's built-in catalog and the initial
content of the admin product store.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .models import ALL_CATEGORIES, Category, Product

_CDN = "https://cdn.poehali.dev/projects/c83f47bd-a908-4a14-9fde-752a62506983/files"

BRAKES_IMAGE = f"{_CDN}/3e49715f-e2c0-4381-b926-8f27dba2e7d3.jpg"
FILTERS_IMAGE = f"{_CDN}/da726a92-fe29-4088-a9f0-19e7f87232c6.jpg"
ENGINE_IMAGE = f"{_CDN}/0a7b622b-0ffc-4240-881b-95d78761629d.jpg"

# Image preselected in the admin "new product" form.
DEFAULT_IMAGE = ENGINE_IMAGE

CATEGORY_LABELS = {
    ALL_CATEGORIES: "Все категории",
    Category.BRAKES.value: "Тормозная система",
    Category.ENGINE.value: "Двигатель",
    Category.FILTERS.value: "Фильтры",
}

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Тормозные колодки", category=Category.BRAKES, price=3500, image=BRAKES_IMAGE, brand="Brembo", stock=True, discount=15),
    Product(id=2, name="Масляный фильтр", category=Category.FILTERS, price=450, image=FILTERS_IMAGE, brand="Mann", stock=True),
    Product(id=3, name="Комплект двигателя", category=Category.ENGINE, price=25000, image=ENGINE_IMAGE, brand="Bosch", stock=True, discount=20),
    Product(id=4, name="Воздушный фильтр", category=Category.FILTERS, price=550, image=FILTERS_IMAGE, brand="Mann", stock=True),
    Product(id=5, name="Тормозные диски", category=Category.BRAKES, price=5200, image=BRAKES_IMAGE, brand="Brembo", stock=True),
    Product(id=6, name="Свечи зажигания", category=Category.ENGINE, price=800, image=ENGINE_IMAGE, brand="NGK", stock=False),
)


def seed_products() -> List[Product]:
    """Return a fresh list holding the six seed products in catalog order."""
    return list(SEED_PRODUCTS)


def category_label(category: str) -> str:
    value = category.value if isinstance(category, Category) else category
    return CATEGORY_LABELS.get(value, value)


def filter_products(products: Iterable[Product], query: str = "", category: str = ALL_CATEGORIES) -> Iterator[Product]:
    """Lazily yield products matching a search query and a category selector.

    A product matches when its name contains ``query`` case-insensitively
    and its category equals ``category`` (or ``category`` is "all"). Source
    order is preserved; an empty query matches everything.
    """
    needle = (query or "").lower()
    selector = category.value if isinstance(category, Category) else category
    for product in products:
        if needle not in product.name.lower():
            continue
        if selector != ALL_CATEGORIES and product.category.value != selector:
            continue
        yield product
