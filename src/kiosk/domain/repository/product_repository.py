"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from kiosk.domain.model.product import Product, ProductSellingStatus


class ProductRepository(ABC):

    @abstractmethod
    def find_all_by_selling_status_in(
        self, statuses: Iterable[ProductSellingStatus]
    ) -> list[Product]:
        """Return products whose status is in *statuses*, in storage order."""

    @abstractmethod
    def find_all_by_product_number_in(self, numbers: Iterable[str]) -> list[Product]:
        """Return every product whose number is in *numbers*, in storage order.

        Duplicated product numbers in the catalog come back as separate
        entries.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product, assigning its id if needed."""

    def save_all(self, products: Iterable[Product]) -> list[Product]:
        return [self.save(product) for product in products]
