"""Controller for the admin product management page."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from autoparts.error_handler import ErrorHandler
from autoparts.integrations.contracts.interfaces import Navigator, Notifier
from autoparts.storefront.admin_catalog import FORM_DEFAULTS, AdminProductStore
from autoparts.storefront.errors import AccessDeniedError, StorefrontError
from autoparts.storefront.models import Product


class AdminController:
    def __init__(self, store: AdminProductStore, notifier: Notifier, navigator: Navigator):
        self.store = store
        self.notifier = notifier
        self.navigator = navigator
        self.errors = ErrorHandler(notifier)
        self.products: List[Product] = []

    def open(self) -> bool:
        """Load the admin catalog; anonymous and non-admin users go to login."""
        try:
            self.products = self.store.load()
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return False
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"action": "load"})
            return False
        return True

    def new_form(self) -> Dict[str, Any]:
        return dict(FORM_DEFAULTS)

    def edit_form(self, product_id: int) -> Optional[Dict[str, Any]]:
        try:
            product = self.store.get(product_id)
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return None
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"product_id": product_id})
            return None
        form = dict(FORM_DEFAULTS)
        form.update(product.to_dict())
        return form

    def submit_create(self, form: Dict[str, Any]) -> Optional[Product]:
        try:
            product = self.store.create(form)
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return None
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"action": "create"})
            return None
        self.products = self.store.products
        self.notifier.notify("Товар добавлен", f"{product.name} добавлен в каталог")
        return product

    def submit_update(self, product_id: int, form: Dict[str, Any]) -> Optional[Product]:
        try:
            product = self.store.update(product_id, form)
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return None
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"action": "update", "product_id": product_id})
            return None
        if product is None:
            return None
        self.products = self.store.products
        self.notifier.notify("Товар обновлен", f"{product.name} успешно обновлен")
        return product

    def delete(self, product_id: int) -> bool:
        try:
            removed = self.store.delete(product_id)
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return False
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"action": "delete", "product_id": product_id})
            return False
        self.products = self.store.products
        self.notifier.notify("Товар удален", "Товар удален из каталога")
        return removed
