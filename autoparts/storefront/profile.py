"""Profile view data: demo order history and order status labels."""

from __future__ import annotations

from typing import Dict, List

from .models import Order, OrderItem

ORDER_STATUS_LABELS: Dict[str, str] = {
    "pending": "Ожидает",
    "processing": "В обработке",
    "delivered": "Доставлен",
}


def order_status_label(status: str) -> str:
    return ORDER_STATUS_LABELS.get(status, status)


def demo_order_history() -> List[Order]:
    """Orders shown on every profile page; there is no order backend."""
    return [
        Order(
            id=1001,
            date="2024-11-10",
            total=5950,
            status="delivered",
            items=[
                OrderItem(name="Тормозные колодки", quantity=1, price=2975),
                OrderItem(name="Масляный фильтр", quantity=1, price=450),
                OrderItem(name="Воздушный фильтр", quantity=1, price=550),
            ],
        ),
        Order(
            id=1002,
            date="2024-11-13",
            total=20000,
            status="processing",
            items=[OrderItem(name="Комплект двигателя", quantity=1, price=20000)],
        ),
    ]
