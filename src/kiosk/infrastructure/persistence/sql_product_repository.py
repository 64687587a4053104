"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from kiosk.domain.exceptions import EntityNotFoundError
from kiosk.domain.model.product import Product, ProductSellingStatus
from kiosk.domain.model.value_objects import Timestamps
from kiosk.domain.repository.product_repository import ProductRepository
from kiosk.infrastructure.persistence.orm import ProductRecord


class SqlProductRepository(ProductRepository):

    def __init__(
        self,
        session: Session,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session = session
        self._clock = clock

    # --- ProductRepository interface ------------------------------------------

    def find_all_by_selling_status_in(
        self, statuses: Iterable[ProductSellingStatus]
    ) -> list[Product]:
        stmt = (
            select(ProductRecord)
            .where(ProductRecord.selling_status.in_(list(statuses)))
            .order_by(ProductRecord.id)
        )
        return [to_domain(r) for r in self._session.scalars(stmt)]

    def find_all_by_product_number_in(self, numbers: Iterable[str]) -> list[Product]:
        stmt = (
            select(ProductRecord)
            .where(ProductRecord.product_number.in_(list(numbers)))
            .order_by(ProductRecord.id)
        )
        return [to_domain(r) for r in self._session.scalars(stmt)]

    def list_all(self) -> list[Product]:
        stmt = select(ProductRecord).order_by(ProductRecord.id)
        return [to_domain(r) for r in self._session.scalars(stmt)]

    def save(self, product: Product) -> Product:
        if product.id is None:
            record = ProductRecord(timestamps=Timestamps.now(self._clock))
            self._session.add(record)
        else:
            record = self._session.get(ProductRecord, product.id)
            if record is None:
                raise EntityNotFoundError(f"Product with ID {product.id} not found")
            record.timestamps = record.timestamps.touched(self._clock())

        record.product_number = product.product_number
        record.product_type = product.product_type
        record.selling_status = product.selling_status
        record.name = product.name
        record.price = product.price
        self._session.flush()

        product.id = record.id
        product.timestamps = record.timestamps
        return product


# --- Mapping -------------------------------------------------------------------


def to_domain(record: ProductRecord) -> Product:
    return Product(
        id=record.id,
        product_number=record.product_number,
        product_type=record.product_type,
        selling_status=record.selling_status,
        name=record.name,
        price=record.price,
        timestamps=record.timestamps,
    )
