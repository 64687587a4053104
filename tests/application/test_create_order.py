"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no database.
"""

from datetime import datetime

from kiosk.application.create_order import CreateOrderHandler
from kiosk.application.dto import OrderCreateRequest
from kiosk.domain.model.order import OrderStatus
from kiosk.domain.model.product import Product, ProductType
from tests.factories import make_product
from tests.fakes import FakeOrderRepository, FakeProductRepository

REGISTERED_AT = datetime(2024, 3, 15, 11, 0)


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            make_product("001", 4000, name="Americano"),
            make_product("002", 4100, name="Latte"),
            make_product("003", 3000, name="Muffin", product_type=ProductType.BAKERY),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    handler = CreateOrderHandler(order_repo, product_repo)
    return handler, order_repo, product_repo


def _request(*numbers: str) -> OrderCreateRequest:
    return OrderCreateRequest(product_numbers=list(numbers))


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_total(self):
        handler, _, _ = _setup()

        response = handler.handle(_request("001", "002"), REGISTERED_AT)

        assert response.total_price == 8100
        assert response.registered_at == REGISTERED_AT
        assert [(p.product_number, p.name, p.price) for p in response.products] == [
            ("001", "Americano", 4000),
            ("002", "Latte", 4100),
        ]

    def test_assigns_order_id(self):
        handler, _, _ = _setup()
        response = handler.handle(_request("001"), REGISTERED_AT)
        assert response.id == 1

    def test_persists_order_in_init_status(self):
        handler, order_repo, _ = _setup()

        response = handler.handle(_request("001"), REGISTERED_AT)

        saved = order_repo.get_by_id(response.id)
        assert saved is not None
        assert saved.order_status == OrderStatus.INIT
        assert saved.total_price == 4000

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle(_request("001"), REGISTERED_AT)
        second = handler.handle(_request("002"), REGISTERED_AT)
        assert second.id == first.id + 1


class TestCreateOrderSelection:

    def test_unknown_numbers_are_ignored(self):
        handler, _, _ = _setup(
            [make_product("001", 4000), make_product("002", 4100)]
        )

        response = handler.handle(_request("001", "002", "003"), REGISTERED_AT)

        assert response.total_price == 8100
        assert [p.product_number for p in response.products] == ["001", "002"]

    def test_repeated_number_counts_once(self):
        handler, _, _ = _setup()

        response = handler.handle(_request("001", "001"), REGISTERED_AT)

        assert response.total_price == 4000
        assert len(response.products) == 1

    def test_first_catalog_entry_wins_for_duplicate_numbers(self):
        handler, _, _ = _setup([
            make_product("001", 4000),
            make_product("001", 4100),
            make_product("001", 4200),
        ])

        response = handler.handle(_request("001"), REGISTERED_AT)

        assert response.total_price == 4000
        assert [p.price for p in response.products] == [4000]

    def test_products_follow_catalog_order(self):
        handler, _, _ = _setup()

        response = handler.handle(_request("003", "001"), REGISTERED_AT)

        assert [p.product_number for p in response.products] == ["001", "003"]

    def test_empty_request_creates_empty_order(self):
        handler, order_repo, _ = _setup()

        response = handler.handle(_request(), REGISTERED_AT)

        assert response.total_price == 0
        assert response.products == []
        assert order_repo.get_by_id(response.id) is not None

    def test_logs_dropped_numbers(self, caplog):
        handler, _, _ = _setup()

        with caplog.at_level("INFO", logger="kiosk.application.create_order"):
            handler.handle(_request("001", "999"), REGISTERED_AT)

        assert "999" in caplog.text
