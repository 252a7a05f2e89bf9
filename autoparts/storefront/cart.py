"""
In-memory shopping cart.

The cart lives for one session only and is never persisted. It holds at most
one line per product, in the order products were first added; each line
keeps the product snapshot taken when it was added.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from .errors import InvalidQuantityError, NotFoundError
from .models import CartLine, Product

logger = logging.getLogger(__name__)


class Cart:
    def __init__(self) -> None:
        self._lines: List[CartLine] = []

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        """Number of distinct products (the cart badge counter)."""
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, product_id: int) -> Optional[CartLine]:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def get_line_or_raise(self, product_id: int) -> CartLine:
        line = self.get_line(product_id)
        if line is None:
            raise NotFoundError("Cart line", product_id)
        return line

    def add(self, product: Product) -> CartLine:
        """Add one unit of ``product``, merging with an existing line."""
        line = self.get_line(product.id)
        if line is not None:
            line = self._replace_line(line.with_quantity(line.quantity + 1))
        else:
            line = CartLine(product=product, quantity=1)
            self._lines.append(line)
        logger.debug("Cart add: product=%s quantity=%d", product.id, line.quantity)
        return line

    def remove(self, product_id: int) -> bool:
        """Drop the line for ``product_id``. Returns False when there was none."""
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.product_id != product_id]
        removed = len(self._lines) != before
        logger.debug("Cart remove: product=%s removed=%s", product_id, removed)
        return removed

    def update_quantity(self, product_id: int, quantity: int) -> Optional[CartLine]:
        """
        Set the quantity of an existing line

        Args:
            product_id: Product whose line is updated
            quantity: New quantity; 0 removes the line

        Returns:
            The updated line, or None when the line was removed or the
            product is not in the cart (no line is ever created here)

        Raises:
            InvalidQuantityError: If quantity is negative
        """
        if quantity < 0:
            raise InvalidQuantityError(quantity)
        if quantity == 0:
            self.remove(product_id)
            return None
        line = self.get_line(product_id)
        if line is None:
            logger.debug("Cart update ignored: product=%s not in cart", product_id)
            return None
        return self._replace_line(line.with_quantity(quantity))

    def _replace_line(self, new_line: CartLine) -> CartLine:
        self._lines = [new_line if line.product_id == new_line.product_id else line for line in self._lines]
        return new_line

    def clear(self) -> None:
        self._lines = []

    def total(self) -> Decimal:
        """Sum of effective price x quantity over all lines."""
        return sum((line.line_total for line in self._lines), Decimal(0))
