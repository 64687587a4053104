"""Cafe Kiosk HTTP API (FastAPI).

Routes:
  GET  /api/v1/products/selling   products shown on the kiosk menu
  POST /api/v1/orders/new         place an order from product numbers
  GET  /api/v1/orders/{order_id}  look up a placed order
  GET  /health

Each request gets its own SQLAlchemy session, committed when the
handler returns and rolled back when it raises.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from kiosk.application.create_order import CreateOrderHandler
from kiosk.application.dto import OrderCreateRequest
from kiosk.application.list_selling_products import ListSellingProductsHandler
from kiosk.application.show_order import ShowOrderHandler
from kiosk.domain.exceptions import (
    BusinessHoursError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from kiosk.infrastructure import bootstrap
from kiosk.infrastructure.api.schemas import (
    OrderCreatePayload,
    OrderPayload,
    ProductPayload,
)
from kiosk.infrastructure.config import get_settings
from kiosk.infrastructure.log_setup import configure_logging

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, 404),
    (BusinessHoursError, 409),
    (ValidationError, 400),
]


def create_app(
    session_factory: sessionmaker[Session] | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    factory = session_factory or bootstrap.default_session_factory()

    app = FastAPI(title="Cafe Kiosk")

    def get_session() -> Iterator[Session]:
        with factory.begin() as session:
            yield session

    @app.exception_handler(DomainException)
    async def handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
        status = next(
            (code for error, code in _STATUS_BY_ERROR if isinstance(exc, error)), 400
        )
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, status, exc)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    # ── Products ─────────────────────────────────

    @app.get("/api/v1/products/selling", response_model=list[ProductPayload])
    def list_selling_products(session: Session = Depends(get_session)):
        handler = ListSellingProductsHandler(bootstrap.product_repository(session))
        return [ProductPayload.model_validate(p) for p in handler.handle()]

    # ── Orders ───────────────────────────────────

    @app.post("/api/v1/orders/new", response_model=OrderPayload)
    def create_order(payload: OrderCreatePayload, session: Session = Depends(get_session)):
        handler = CreateOrderHandler(
            order_repo=bootstrap.order_repository(session),
            product_repo=bootstrap.product_repository(session),
        )
        request = OrderCreateRequest(product_numbers=payload.product_numbers)
        return OrderPayload.of(handler.handle(request, registered_at=clock()))

    @app.get("/api/v1/orders/{order_id}", response_model=OrderPayload)
    def show_order(order_id: int, session: Session = Depends(get_session)):
        handler = ShowOrderHandler(bootstrap.order_repository(session))
        return OrderPayload.of(handler.handle(order_id))

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "cafe-kiosk"}

    return app
