"""Application service: Add Product use case."""

from __future__ import annotations

from kiosk.application.dto import ProductResponse
from kiosk.domain.model.product import Product, ProductSellingStatus, ProductType
from kiosk.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_number: str,
        product_type: ProductType,
        selling_status: ProductSellingStatus,
        name: str,
        price: int,
    ) -> ProductResponse:
        """Add a new entry to the catalog.

        Product numbers are not checked for uniqueness; the catalog
        allows several entries to share one.
        """
        product = Product.create(
            product_number=product_number,
            product_type=product_type,
            selling_status=selling_status,
            name=name,
            price=price,
        )
        product = self._product_repo.save(product)
        return ProductResponse.of(product)
