"""Replay the usage example of every exercise.

Usage:
    python -m hof.walkthrough

Set HOF_LOG_LEVEL=DEBUG to also see operations the exercises refused or
saturated.
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from hof.registry import ExerciseName, make_exercise
from hof.settings import get_settings


logger = logging.getLogger(__name__)


def run_walkthrough() -> list[str]:
    lines: list[str] = []

    c = make_exercise(ExerciseName.counter, 2)
    lines.append(f"counter(2).next() -> {c.next()}")

    lines.append(f"multiply(3)(5) -> {make_exercise(ExerciseName.multiply, 3)(5)}")

    tot = make_exercise(ExerciseName.total, 20)
    lines.append(f"total(20).discount(0.5) -> {tot.discount(0.5):g}")
    lines.append(f"total(20).discount(0.2) -> {tot.discount(0.2):g}")

    u = make_exercise(ExerciseName.user)
    lines.append(f"set_name('Francis Bacon') -> {u.set_name('Francis Bacon')}")
    lines.append(f"set_name('123 hi') -> {u.set_name('123 hi')}")
    lines.append(f"get_name() -> {u.get_name()!r}")

    col = make_exercise(ExerciseName.color, 150, 200, 18)
    col.incr_red(12)
    col.incr_green(30)
    col.incr_blue(-9)
    lines.append(f"color -> {col.red()}, {col.green()}, {col.blue()} ({col.snapshot().as_hex()})")

    lv = make_exercise(ExerciseName.lives, 5)
    lv.died()
    lines.append(f"lives after died() -> {lv.left()}")
    lv.died()
    lines.append(f"lives after died() -> {lv.left()}")
    lv.restart()
    lines.append(f"lives after restart() -> {lv.left()}")

    log = make_exercise(ExerciseName.messages)
    lines.append(log.record("first message"))
    lines.append(log.record("second message"))

    p = make_exercise(ExerciseName.pocket, 50)
    p.buy()
    lines.append(f"pocket after buy() -> coins={p.coins()} trinkets={p.trinkets()}")
    p.buy()
    lines.append(f"pocket after buy() -> coins={p.coins()} trinkets={p.trinkets()}")
    p.sell()
    lines.append(f"pocket after sell() -> coins={p.coins()} trinkets={p.trinkets()}")

    logger.debug("Walkthrough produced %d lines", len(lines))
    return lines


def main() -> None:
    # Local .env may carry HOF_* overrides; real environment variables win.
    load_dotenv(override=False)
    logging.basicConfig(level=get_settings().log_level)
    for line in run_walkthrough():
        print(line)


if __name__ == "__main__":
    main()
