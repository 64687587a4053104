"""Product aggregate: an entry in the cafe's catalog.

Products live independently of orders.  Catalog management creates them;
the order flow only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.value_objects import Timestamps


class ProductType(Enum):
    HANDMADE = "HANDMADE"
    BOTTLE = "BOTTLE"
    BAKERY = "BAKERY"
    CANNED = "CANNED"

    @property
    def text(self) -> str:
        return _PRODUCT_TYPE_TEXT[self]


_PRODUCT_TYPE_TEXT = {
    ProductType.HANDMADE: "Handmade beverage",
    ProductType.BOTTLE: "Bottled beverage",
    ProductType.BAKERY: "Bakery",
    ProductType.CANNED: "Canned beverage",
}


class ProductSellingStatus(Enum):
    SELLING = "SELLING"
    HOLD = "HOLD"
    STOP_SELLING = "STOP_SELLING"

    @property
    def text(self) -> str:
        return _SELLING_STATUS_TEXT[self]

    @classmethod
    def for_display(cls) -> tuple[ProductSellingStatus, ...]:
        """Statuses shown on the kiosk menu (stopped products are hidden)."""
        return (cls.SELLING, cls.HOLD)


_SELLING_STATUS_TEXT = {
    ProductSellingStatus.SELLING: "On sale",
    ProductSellingStatus.HOLD: "On hold",
    ProductSellingStatus.STOP_SELLING: "Sale stopped",
}


@dataclass
class Product:
    """A catalog entry.

    ``product_number`` is the business key shown to customers, but the
    catalog does not enforce its uniqueness; ``id`` is the surrogate key
    assigned by the repository.
    """

    id: int | None
    product_number: str
    product_type: ProductType
    selling_status: ProductSellingStatus
    name: str
    price: int
    timestamps: Timestamps | None = None

    @staticmethod
    def create(
        product_number: str,
        product_type: ProductType,
        selling_status: ProductSellingStatus,
        name: str,
        price: int,
    ) -> Product:
        """Create a new (unsaved) catalog entry, enforcing its invariants."""
        if not product_number or not product_number.strip():
            raise ValidationError("Product number is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price < 0:
            raise ValidationError(f"Product price cannot be negative, got {price}")
        return Product(
            id=None,
            product_number=product_number.strip(),
            product_type=product_type,
            selling_status=selling_status,
            name=name.strip(),
            price=price,
        )
