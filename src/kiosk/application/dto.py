"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals (repositories, order lines, timestamps).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from kiosk.domain.model.order import Order
from kiosk.domain.model.product import Product, ProductSellingStatus, ProductType


@dataclass(frozen=True)
class OrderCreateRequest:
    """Input: the product numbers picked by the customer, in tap order."""

    product_numbers: list[str]


@dataclass(frozen=True)
class ProductResponse:
    """Output: a catalog entry as shown on the kiosk menu."""

    id: int | None
    product_number: str
    product_type: ProductType
    selling_status: ProductSellingStatus
    name: str
    price: int

    @staticmethod
    def of(product: Product) -> ProductResponse:
        return ProductResponse(
            id=product.id,
            product_number=product.product_number,
            product_type=product.product_type,
            selling_status=product.selling_status,
            name=product.name,
            price=product.price,
        )


@dataclass(frozen=True)
class OrderResponse:
    """Output: a placed order with the products it resolved to."""

    id: int
    total_price: int
    registered_at: datetime
    products: list[ProductResponse]

    @staticmethod
    def of(order: Order) -> OrderResponse:
        return OrderResponse(
            id=order.id,  # type: ignore[arg-type]
            total_price=order.total_price,
            registered_at=order.registered_at,
            products=[ProductResponse.of(p) for p in order.products],
        )
