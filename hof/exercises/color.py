from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from hof.models import ColorState
from hof.settings import ExerciseSettings, get_settings


logger = logging.getLogger(__name__)

CHANNELS: tuple[str, ...] = ("red", "green", "blue")


@dataclass(frozen=True, slots=True)
class Color:
    incr_red: Callable[[int], int]
    incr_green: Callable[[int], int]
    incr_blue: Callable[[int], int]
    red: Callable[[], int]
    green: Callable[[], int]
    blue: Callable[[], int]
    snapshot: Callable[[], ColorState]


def clamp(value: int, *, low: int, high: int) -> int:
    return max(low, min(high, value))


def color(r: int, g: int, b: int, *, settings: ExerciseSettings | None = None) -> Color:
    """Return an RGB color whose channels stay within the configured range.

    Increments may be negative; a result past either bound sticks at the bound.

    Example:
        c = color(150, 200, 18)
        c.incr_red(12)
        c.incr_green(30)
        c.incr_blue(-9)
        (c.red(), c.green(), c.blue())  # (162, 230, 9)
    """

    cfg = settings or get_settings()
    low, high = cfg.color_min, cfg.color_max

    channels: dict[str, int] = {}
    for name, value in zip(CHANNELS, (r, g, b)):
        if not low <= value <= high:
            raise ValueError(f"{name} must be within [{low}, {high}], got {value}")
        channels[name] = value

    def _incr(name: str) -> Callable[[int], int]:
        def incr(amount: int) -> int:
            wanted = channels[name] + amount
            channels[name] = clamp(wanted, low=low, high=high)
            if channels[name] != wanted:
                logger.debug("Clamped %s from %s to %s", name, wanted, channels[name])
            return channels[name]

        return incr

    def _read(name: str) -> Callable[[], int]:
        def read() -> int:
            return channels[name]

        return read

    def snapshot() -> ColorState:
        return ColorState(**channels)

    return Color(
        incr_red=_incr("red"),
        incr_green=_incr("green"),
        incr_blue=_incr("blue"),
        red=_read("red"),
        green=_read("green"),
        blue=_read("blue"),
        snapshot=snapshot,
    )
