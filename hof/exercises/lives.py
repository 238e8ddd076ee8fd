from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from hof.models import LivesState


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Lives:
    left: Callable[[], int]
    died: Callable[[], int]
    restart: Callable[[], int]
    snapshot: Callable[[], LivesState]


def lives(start: int) -> Lives:
    """Track the number of lives remaining in a game.

    Example:
        l = lives(5)
        l.died()
        l.left()     # 4
        l.restart()
        l.left()     # 5
    """

    if start < 0:
        raise ValueError("start must be >= 0")

    current = start

    def left() -> int:
        return current

    def died() -> int:
        nonlocal current
        if current == 0:
            logger.debug("died() with no lives left")
            return 0
        current -= 1
        return current

    def restart() -> int:
        nonlocal current
        current = start
        return current

    def snapshot() -> LivesState:
        return LivesState(start=start, left=current)

    return Lives(left=left, died=died, restart=restart, snapshot=snapshot)
