from __future__ import annotations

import logging

import pytest

from hof import pocket
from hof.models import PocketState
from hof.settings import ExerciseSettings


def test_buy_and_sell_trinkets() -> None:
    p = pocket(50)
    assert p.buy() is True
    assert (p.coins(), p.trinkets()) == (40, 1)
    assert p.buy() is True
    assert (p.coins(), p.trinkets()) == (30, 2)
    assert p.sell() is True
    assert (p.coins(), p.trinkets()) == (35, 1)


def test_sell_without_trinkets_is_a_noop() -> None:
    p = pocket(50)
    assert p.sell() is False
    assert (p.coins(), p.trinkets()) == (50, 0)


def test_buy_without_enough_coins_is_a_noop() -> None:
    p = pocket(9)
    assert p.buy() is False
    assert (p.coins(), p.trinkets()) == (9, 0)


def test_buy_with_exact_price_empties_pocket() -> None:
    p = pocket(10)
    assert p.buy() is True
    assert (p.coins(), p.trinkets()) == (0, 1)
    assert p.buy() is False


def test_negative_start_is_rejected() -> None:
    with pytest.raises(ValueError):
        pocket(-5)


def test_custom_prices() -> None:
    p = pocket(30, settings=ExerciseSettings(pocket_buy_price=20, pocket_sell_price=15))
    assert p.buy() is True
    assert p.buy() is False
    assert p.sell() is True
    assert p.snapshot() == PocketState(coins=25, trinkets=0)


def test_refused_trade_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    p = pocket(0)
    with caplog.at_level(logging.DEBUG, logger="hof.exercises.pocket"):
        p.buy()
        p.sell()
    text = caplog.text
    assert "buy() refused" in text
    assert "sell() refused" in text
