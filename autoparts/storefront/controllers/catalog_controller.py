"""Controller for the storefront page: catalog search and the cart sheet."""
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Sequence

from autoparts.error_handler import ErrorHandler
from autoparts.integrations.contracts.interfaces import Notifier
from autoparts.storefront.cart import Cart
from autoparts.storefront.catalog import seed_products, filter_products
from autoparts.storefront.errors import StorefrontError
from autoparts.storefront.models import ALL_CATEGORIES, CartLine, Product


class CatalogController:
    def __init__(self, notifier: Notifier, cart: Optional[Cart] = None, products: Optional[Sequence[Product]] = None):
        self.notifier = notifier
        self.errors = ErrorHandler(notifier)
        self.cart = cart if cart is not None else Cart()
        self.products: List[Product] = list(products) if products is not None else seed_products()
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES

    def set_search_query(self, query: str) -> List[Product]:
        self.search_query = query
        return self.visible_products()

    def select_category(self, category: str) -> List[Product]:
        self.selected_category = category
        return self.visible_products()

    def visible_products(self) -> List[Product]:
        return list(filter_products(self.products, self.search_query, self.selected_category))

    def add_to_cart(self, product: Product) -> CartLine:
        line = self.cart.add(product)
        self.notifier.notify("Добавлено в корзину", f"{product.name} добавлен в корзину")
        return line

    def remove_from_cart(self, product_id: int) -> None:
        self.cart.remove(product_id)

    def update_quantity(self, product_id: int, quantity: int) -> Optional[CartLine]:
        try:
            return self.cart.update_quantity(product_id, quantity)
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"product_id": product_id, "quantity": quantity})
            return None

    def total(self) -> Decimal:
        return self.cart.total()
