"""
Admin product store.

A durable, mutable product list for the admin screen. The list is kept in
storage under a single key and rewritten in full on every change; the first
load seeds it with the storefront catalog when the key is absent.

Every operation requires the current session to belong to an administrator.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from autoparts.database.storage import KeyValueStorage
from autoparts.utils.id_generator import IdGenerator

from .catalog import DEFAULT_IMAGE, seed_products
from .errors import NotFoundError, PersistenceError
from .models import Category, Product
from .session import SessionManager
from .validation import validate_product_fields

logger = logging.getLogger(__name__)

# Defaults of an empty "new product" form.
FORM_DEFAULTS: Dict[str, Any] = {
    "name": "",
    "category": Category.BRAKES.value,
    "price": 0,
    "image": DEFAULT_IMAGE,
    "brand": "",
    "stock": True,
    "discount": 0,
}


class AdminProductStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        session: SessionManager,
        storage_key: str = "products",
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        self.storage = storage
        self.session = session
        self.storage_key = storage_key
        self.ids = id_generator or IdGenerator()
        self._products: Optional[List[Product]] = None

    @property
    def products(self) -> List[Product]:
        self.session.require_admin()
        if self._products is None:
            return self.load()
        return list(self._products)

    # ------------------------------------------------------------------ #
    # Read
    # ------------------------------------------------------------------ #
    def load(self) -> List[Product]:
        """Read the durable product list, seeding it on first access."""
        self.session.require_admin()

        data = self.storage.get_json(self.storage_key)
        if data is None:
            products = seed_products()
            self._save(products)
            logger.info("Seeded admin catalog with %d products", len(products))
            return list(products)

        if not isinstance(data, list):
            raise PersistenceError("Stored product list is not a JSON array", key=self.storage_key)
        try:
            products = [Product.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Stored product record is malformed: {e}", key=self.storage_key) from e
        self._products = products
        return list(products)

    def get(self, product_id: int) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise NotFoundError("Product", product_id)

    # ------------------------------------------------------------------ #
    # Write
    # ------------------------------------------------------------------ #
    def create(self, fields: Dict[str, Any]) -> Product:
        """
        Validate a new-product form and append it to the catalog

        Raises:
            ValidationError: If name or brand is empty or price is missing/0
            PersistenceError: If the updated list cannot be written
        """
        self.session.require_admin()
        products = self.products

        values = validate_product_fields({**FORM_DEFAULTS, **fields})
        if values["discount"] is None:
            values["discount"] = 0

        floor = max((p.id for p in products), default=0)
        product = Product(id=self.ids.next_id(floor=floor), **values)

        self._save([*products, product])
        logger.info("Admin created product id=%s name=%s", product.id, product.name)
        return product

    def update(self, product_id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """
        Merge ``fields`` over an existing product and persist

        Returns:
            The updated product, or None when no product has ``product_id``
        """
        self.session.require_admin()
        products = self.products

        existing = next((p for p in products if p.id == product_id), None)
        if existing is None:
            logger.debug("Admin update ignored: product id=%s not found", product_id)
            return None

        merged = {**existing.to_dict(), **{k: v for k, v in fields.items() if k != "id"}}
        values = validate_product_fields(merged)
        updated = existing.merged(values)

        self._save([updated if p.id == product_id else p for p in products])
        logger.info("Admin updated product id=%s", product_id)
        return updated

    def delete(self, product_id: int) -> bool:
        """Remove a product; returns False when it did not exist."""
        self.session.require_admin()
        products = self.products

        remaining = [p for p in products if p.id != product_id]
        self._save(remaining)
        if len(remaining) == len(products):
            logger.debug("Admin delete ignored: product id=%s not found", product_id)
            return False
        logger.info("Admin deleted product id=%s", product_id)
        return True

    def _save(self, products: List[Product]) -> None:
        # Write before replacing the in-memory copy so a failed write
        # leaves both unchanged.
        self.storage.set_json(self.storage_key, [p.to_dict() for p in products])
        self._products = list(products)
