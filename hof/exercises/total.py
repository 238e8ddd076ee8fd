from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hof.models import TotalState


@dataclass(frozen=True, slots=True)
class Total:
    discount: Callable[[float], float]
    snapshot: Callable[[], TotalState]


def total(amount: float) -> Total:
    """Return a price whose `discount(rate)` never changes the original amount.

    Example:
        tot = total(20)
        tot.discount(0.50)  # 10
        tot.discount(0.20)  # 16
    """

    def discount(rate: float) -> float:
        return amount - rate * amount

    def snapshot() -> TotalState:
        return TotalState(amount=amount)

    return Total(discount=discount, snapshot=snapshot)
