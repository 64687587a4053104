"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy.orm import Session

from kiosk.domain.exceptions import EntityNotFoundError, ValidationError
from kiosk.domain.model.order import Order, OrderProduct
from kiosk.domain.model.value_objects import Timestamps
from kiosk.domain.repository.order_repository import OrderRepository
from kiosk.infrastructure.persistence import sql_product_repository
from kiosk.infrastructure.persistence.orm import OrderProductRecord, OrderRecord


class SqlOrderRepository(OrderRepository):

    def __init__(
        self,
        session: Session,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session = session
        self._clock = clock

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        record = self._session.get(OrderRecord, order_id)
        if record is None:
            return None
        return self._to_domain(record)

    def save(self, order: Order) -> Order:
        if order.id is None:
            record = self._insert(order)
        else:
            record = self._session.get(OrderRecord, order.id)
            if record is None:
                raise EntityNotFoundError(f"Order #{order.id} not found")
            record.timestamps = record.timestamps.touched(self._clock())

        record.order_status = order.order_status
        record.total_price = order.total_price
        record.registered_at = order.registered_at
        self._session.flush()

        order.id = record.id
        order.timestamps = record.timestamps
        for line, line_record in zip(order.order_products, record.order_products):
            line.id = line_record.id
        return order

    def _insert(self, order: Order) -> OrderRecord:
        stamps = Timestamps.now(self._clock)
        lines: list[OrderProductRecord] = []
        for line in order.order_products:
            if line.product_id is None:
                raise ValidationError(
                    f"Product '{line.product.product_number}' must be saved before it is ordered"
                )
            lines.append(OrderProductRecord(product_id=line.product_id, timestamps=stamps))

        record = OrderRecord(timestamps=stamps, order_products=lines)
        self._session.add(record)
        return record

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        return Order(
            id=record.id,
            order_status=record.order_status,
            total_price=record.total_price,
            registered_at=record.registered_at,
            order_products=[
                OrderProduct(
                    product=sql_product_repository.to_domain(line.product),
                    id=line.id,
                )
                for line in record.order_products
            ],
            timestamps=record.timestamps,
        )
