"""CafeKiosk: an in-memory ordering session used to practise unit testing.

The kiosk owns a cart (an ordered list of beverages, where quantity is
expressed by repetition) and turns it into an immutable ``KioskOrder``
snapshot at checkout, provided the shop is open.

A kiosk is a single-user session.  It holds no locks; callers sharing one
instance across threads must serialize access themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time

from kiosk.domain.exceptions import BusinessHoursError, ValidationError
from kiosk.domain.model.beverage import Beverage

SHOP_OPEN_TIME = time(10, 0)
SHOP_CLOSE_TIME = time(22, 0)


@dataclass(frozen=True)
class KioskOrder:
    """Snapshot of the cart at checkout time.  Never mutated afterwards."""

    ordered_at: datetime
    beverages: tuple[Beverage, ...]


class CafeKiosk:

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        open_time: time = SHOP_OPEN_TIME,
        close_time: time = SHOP_CLOSE_TIME,
    ) -> None:
        self._clock = clock
        self._open_time = open_time
        self._close_time = close_time
        self._beverages: list[Beverage] = []

    @property
    def beverages(self) -> tuple[Beverage, ...]:
        return tuple(self._beverages)

    # --- Cart operations ------------------------------------------------------

    def add(self, beverage: Beverage, count: int = 1) -> None:
        """Append *beverage* to the cart *count* times.

        Raises ValidationError (and leaves the cart untouched) when
        ``count`` is zero or negative.
        """
        if count <= 0:
            raise ValidationError("Beverage count must be at least 1")
        self._beverages.extend([beverage] * count)

    def remove(self, beverage: Beverage) -> None:
        """Remove the first matching beverage; do nothing if absent."""
        if beverage in self._beverages:
            self._beverages.remove(beverage)

    def clear(self) -> None:
        self._beverages.clear()

    def calculate_total_price(self) -> int:
        return sum(beverage.price for beverage in self._beverages)

    # --- Checkout -------------------------------------------------------------

    def is_open_at(self, moment: datetime) -> bool:
        """Opening and closing times themselves are inside business hours."""
        return self._open_time <= moment.time() <= self._close_time

    def create_order(self) -> KioskOrder:
        """Snapshot the cart as a KioskOrder.

        The cart is left as it is; call ``clear()`` to start a new order.
        """
        now = self._clock()
        if not self.is_open_at(now):
            raise BusinessHoursError(
                f"The cafe is closed at {now:%H:%M}. "
                f"Business hours are {self._open_time:%H:%M}-{self._close_time:%H:%M}"
            )
        return KioskOrder(ordered_at=now, beverages=tuple(self._beverages))
