"""Beverages sold by the in-memory cafe kiosk.

A beverage is a value object: two beverages are the same beverage when
they have the same name, regardless of which instance the caller holds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Beverage(ABC):
    """Anything the kiosk can put in a cart has a name and a price."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name, also used as the beverage's identity."""

    @property
    @abstractmethod
    def price(self) -> int:
        """Unit price in the currency's minor unit (e.g. won)."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Beverage):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, price={self.price})"


class Americano(Beverage):

    @property
    def name(self) -> str:
        return "Americano"

    @property
    def price(self) -> int:
        return 4000


class Latte(Beverage):

    @property
    def name(self) -> str:
        return "Latte"

    @property
    def price(self) -> int:
        return 4500
