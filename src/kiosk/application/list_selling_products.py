"""Application service: list the products shown on the kiosk menu (query)."""

from __future__ import annotations

from kiosk.application.dto import ProductResponse
from kiosk.domain.model.product import ProductSellingStatus
from kiosk.domain.repository.product_repository import ProductRepository


class ListSellingProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductResponse]:
        products = self._product_repo.find_all_by_selling_status_in(
            ProductSellingStatus.for_display()
        )
        return [ProductResponse.of(p) for p in products]
