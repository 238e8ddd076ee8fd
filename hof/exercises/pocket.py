from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from hof.models import PocketState
from hof.settings import ExerciseSettings, get_settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Pocket:
    buy: Callable[[], bool]
    sell: Callable[[], bool]
    coins: Callable[[], int]
    trinkets: Callable[[], int]
    snapshot: Callable[[], PocketState]


def pocket(start: int, *, settings: ExerciseSettings | None = None) -> Pocket:
    """Return a pocket holding coins and trinkets.

    Trinkets are bought for 10 coins and sold for 5 (see ExerciseSettings).
    A trade that would leave either count negative is refused and returns False.

    Example:
        p = pocket(50)
        p.buy()
        p.buy()
        (p.coins(), p.trinkets())  # (30, 2)
        p.sell()
        (p.coins(), p.trinkets())  # (35, 1)
    """

    if start < 0:
        raise ValueError("start must be >= 0")

    cfg = settings or get_settings()
    buy_price, sell_price = cfg.pocket_buy_price, cfg.pocket_sell_price

    coins = start
    trinkets = 0

    def buy() -> bool:
        nonlocal coins, trinkets
        if coins < buy_price:
            logger.debug("buy() refused: %s coins, price %s", coins, buy_price)
            return False
        coins -= buy_price
        trinkets += 1
        return True

    def sell() -> bool:
        nonlocal coins, trinkets
        if trinkets < 1:
            logger.debug("sell() refused: no trinkets")
            return False
        coins += sell_price
        trinkets -= 1
        return True

    def coins_() -> int:
        return coins

    def trinkets_() -> int:
        return trinkets

    def snapshot() -> PocketState:
        return PocketState(coins=coins, trinkets=trinkets)

    return Pocket(buy=buy, sell=sell, coins=coins_, trinkets=trinkets_, snapshot=snapshot)
