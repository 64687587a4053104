"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Timestamps:
    """Audit timestamps embedded in every persisted aggregate.

    ``created_at`` is fixed on first save; ``modified_at`` moves forward
    on every subsequent save.
    """

    created_at: datetime
    modified_at: datetime

    @staticmethod
    def now(clock: Callable[[], datetime] = datetime.now) -> Timestamps:
        moment = clock()
        return Timestamps(created_at=moment, modified_at=moment)

    def touched(self, at: datetime) -> Timestamps:
        return replace(self, modified_at=at)
