"""Unit tests for the beverage value objects."""

from kiosk.domain.model.beverage import Americano, Latte


class TestBeverage:

    def test_americano_price(self):
        assert Americano().price == 4000

    def test_latte_price(self):
        assert Latte().price == 4500

    def test_equal_by_name(self):
        assert Americano() == Americano()
        assert Americano() != Latte()
        assert hash(Latte()) == hash(Latte())

    def test_repr_mentions_name_and_price(self):
        assert repr(Latte()) == "Latte(name='Latte', price=4500)"
