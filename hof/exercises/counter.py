from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hof.models import CounterState


@dataclass(frozen=True, slots=True)
class Counter:
    next: Callable[[], int]
    snapshot: Callable[[], CounterState]


def counter(start: int = 0) -> Counter:
    """Return a counter whose `next()` is one higher each time it is called.

    Example:
        c = counter(2)
        c.next()  # 3
    """

    value = start

    def next_() -> int:
        nonlocal value
        value += 1
        return value

    def snapshot() -> CounterState:
        return CounterState(value=value)

    return Counter(next=next_, snapshot=snapshot)
