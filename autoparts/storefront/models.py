"""
Storefront data models.

Products, cart lines and users are plain dataclasses. Each model knows how
to turn itself into the JSON-compatible dict kept in durable storage and how
to rebuild itself from one, so a record written and read back compares equal
field for field.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Category(str, Enum):
    BRAKES = "brakes"
    ENGINE = "engine"
    FILTERS = "filters"


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


ALL_CATEGORIES = "all"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category: Category
    price: int                           # whole currency units, >= 0
    image: str
    brand: str
    stock: bool = True                   # availability flag
    discount: Optional[int] = None       # percent, 0..100; None = no discount

    @property
    def has_discount(self) -> bool:
        # A zero discount is the same as no discount.
        return bool(self.discount)

    @property
    def original_price(self) -> int:
        return self.price

    @property
    def effective_price(self) -> Decimal:
        """Unit price after the optional percentage discount."""
        if not self.has_discount:
            return Decimal(self.price)
        return Decimal(self.price) * (Decimal(100) - Decimal(self.discount)) / Decimal(100)

    def merged(self, updates: Dict[str, Any]) -> "Product":
        """Return a copy with ``updates`` applied; the identifier never changes."""
        fields = {k: v for k, v in updates.items() if k != "id"}
        if "category" in fields:
            fields["category"] = Category(fields["category"])
        return replace(self, **fields)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "price": self.price,
            "image": self.image,
            "brand": self.brand,
            "stock": self.stock,
        }
        if self.discount is not None:
            data["discount"] = self.discount
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            category=Category(data["category"]),
            price=int(data["price"]),
            image=str(data.get("image", "")),
            brand=str(data["brand"]),
            stock=bool(data.get("stock", True)),
            discount=data.get("discount"),
        )


@dataclass(frozen=True)
class CartLine:
    """A product snapshot taken when it entered the cart, plus a quantity.

    Lines are immutable; the cart swaps in a new line when the quantity
    changes.
    """

    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def unit_price(self) -> Decimal:
        return self.product.effective_price

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> "CartLine":
        return replace(self, quantity=quantity)


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class User:
    id: int
    email: str
    name: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=int(data["id"]),
            email=str(data["email"]),
            name=str(data["name"]),
            role=Role(data.get("role", Role.USER.value)),
        )


@dataclass
class OrderItem:
    name: str
    quantity: int
    price: int


@dataclass
class Order:
    id: int
    date: str                            # ISO format: YYYY-MM-DD
    total: int
    status: str                          # pending / processing / delivered
    items: list[OrderItem] = field(default_factory=list)
