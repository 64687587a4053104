"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from kiosk.infrastructure.config import get_settings
from kiosk.infrastructure.persistence.database import (
    create_engine_from_settings,
    create_schema,
    session_factory,
)
from kiosk.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from kiosk.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@lru_cache(maxsize=1)
def engine() -> Engine:
    return create_engine_from_settings(get_settings())


def default_session_factory() -> sessionmaker[Session]:
    create_schema(engine())
    return session_factory(engine())


def product_repository(session: Session) -> SqlProductRepository:
    return SqlProductRepository(session)


def order_repository(session: Session) -> SqlOrderRepository:
    return SqlOrderRepository(session)
