"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.  This
is the only place that coordinates multiple aggregates (Product lookup
+ Order creation).
"""

from __future__ import annotations

import logging
from datetime import datetime

from kiosk.application.dto import OrderCreateRequest, OrderResponse
from kiosk.domain.model.order import Order
from kiosk.domain.repository.order_repository import OrderRepository
from kiosk.domain.repository.product_repository import ProductRepository
from kiosk.domain.service.product_selection import select_products

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, request: OrderCreateRequest, registered_at: datetime) -> OrderResponse:
        """Create an order from a list of product numbers.

        Steps:
        1. Fetch every catalog entry carrying one of the requested numbers.
        2. Keep the first entry per distinct number (unknown numbers drop out).
        3. Let the Order aggregate compute its total.
        4. Persist and return a DTO.
        """
        product_numbers = request.product_numbers
        candidates = self._product_repo.find_all_by_product_number_in(product_numbers)
        products = select_products(candidates, product_numbers)

        missing = set(product_numbers) - {p.product_number for p in products}
        if missing:
            logger.info("Ignoring unknown product numbers: %s", sorted(missing))

        order = Order.create(products=products, registered_at=registered_at)
        order = self._order_repo.save(order)
        logger.info(
            "Created order #%s with %d product(s), total %d",
            order.id, len(order.order_products), order.total_price,
        )
        return OrderResponse.of(order)
