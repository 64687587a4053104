"""Small builders so tests only spell out the fields they care about."""

from __future__ import annotations

from kiosk.domain.model.product import Product, ProductSellingStatus, ProductType


def make_product(
    product_number: str = "001",
    price: int = 4000,
    name: str = "Menu item",
    selling_status: ProductSellingStatus = ProductSellingStatus.SELLING,
    product_type: ProductType = ProductType.HANDMADE,
) -> Product:
    return Product.create(
        product_number=product_number,
        product_type=product_type,
        selling_status=selling_status,
        name=name,
        price=price,
    )
