"""Request / response bodies for the HTTP API.

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kiosk.application.dto import OrderResponse
from kiosk.domain.model.product import ProductSellingStatus, ProductType


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OrderCreatePayload(_Schema):
    product_numbers: list[str] = Field(default_factory=list)


class ProductPayload(_Schema):
    id: int | None
    product_number: str
    product_type: ProductType
    selling_status: ProductSellingStatus
    name: str
    price: int


class OrderPayload(_Schema):
    id: int
    total_price: int
    registered_date_time: datetime
    products: list[ProductPayload]

    @staticmethod
    def of(order: OrderResponse) -> OrderPayload:
        return OrderPayload(
            id=order.id,
            total_price=order.total_price,
            registered_date_time=order.registered_at,
            products=[ProductPayload.model_validate(p) for p in order.products],
        )
