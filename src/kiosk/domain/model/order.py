"""Order aggregate: a persisted order over catalog products.

The Order owns its OrderProduct lines.  Each line references exactly one
Product; products never reference orders back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from kiosk.domain.model.product import Product
from kiosk.domain.model.value_objects import Timestamps


class OrderStatus(Enum):
    INIT = "INIT"
    CANCELED = "CANCELED"
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    RECEIVED = "RECEIVED"
    COMPLETED = "COMPLETED"

    @property
    def text(self) -> str:
        return _ORDER_STATUS_TEXT[self]


_ORDER_STATUS_TEXT = {
    OrderStatus.INIT: "Order created",
    OrderStatus.CANCELED: "Order canceled",
    OrderStatus.PAYMENT_COMPLETED: "Payment completed",
    OrderStatus.PAYMENT_FAILED: "Payment failed",
    OrderStatus.RECEIVED: "Order received",
    OrderStatus.COMPLETED: "Order completed",
}


@dataclass
class OrderProduct:
    """One line of an order, pointing at a single catalog product."""

    product: Product
    id: int | None = None

    @property
    def product_id(self) -> int | None:
        return self.product.id


@dataclass
class Order:
    """Aggregate root for persisted orders.

    Use ``Order.create()`` for new orders.  The plain ``__init__`` lets
    the repository reconstitute stored orders without recomputing them.
    """

    id: int | None
    order_status: OrderStatus
    total_price: int
    registered_at: datetime
    order_products: list[OrderProduct] = field(default_factory=list)
    timestamps: Timestamps | None = None

    @staticmethod
    def create(products: list[Product], registered_at: datetime) -> Order:
        return Order(
            id=None,
            order_status=OrderStatus.INIT,
            total_price=calculate_total_price(products),
            registered_at=registered_at,
            order_products=[OrderProduct(product=p) for p in products],
        )

    @property
    def products(self) -> list[Product]:
        return [line.product for line in self.order_products]


def calculate_total_price(products: list[Product]) -> int:
    return sum(product.price for product in products)
