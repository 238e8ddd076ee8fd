from __future__ import annotations

from collections.abc import Callable


def multiply(val: float) -> Callable[[float], float]:
    """Return a function that multiplies its argument by `val`.

    Example:
        multiply(3)(5)  # 15
    """

    def by(x: float) -> float:
        return x * val

    return by
