"""ORM records for the catalog and orders.

Records are persistence shapes only; repositories translate them to and
from the domain dataclasses.  Audit timestamps are mapped as a composite
of two columns onto the ``Timestamps`` value object.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from kiosk.domain.model.order import OrderStatus
from kiosk.domain.model.product import ProductSellingStatus, ProductType
from kiosk.domain.model.value_objects import Timestamps
from kiosk.infrastructure.persistence.database import Base


def _timestamps_column() -> Mapped[Timestamps]:
    return composite(
        Timestamps,
        mapped_column("created_at", DateTime, nullable=False),
        mapped_column("modified_at", DateTime, nullable=False),
    )


class ProductRecord(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_number: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    product_type: Mapped[ProductType] = mapped_column(
        Enum(ProductType, native_enum=False, length=20), nullable=False
    )
    selling_status: Mapped[ProductSellingStatus] = mapped_column(
        Enum(ProductSellingStatus, native_enum=False, length=20), nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamps: Mapped[Timestamps] = _timestamps_column()


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20), nullable=False
    )
    total_price: Mapped[int] = mapped_column(Integer, nullable=False)
    registered_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    timestamps: Mapped[Timestamps] = _timestamps_column()

    order_products: Mapped[list[OrderProductRecord]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderProductRecord.id",
    )


class OrderProductRecord(Base):
    __tablename__ = "order_product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), nullable=False)
    timestamps: Mapped[Timestamps] = _timestamps_column()

    order: Mapped[OrderRecord] = relationship(back_populates="order_products")
    product: Mapped[ProductRecord] = relationship()
