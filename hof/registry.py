from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from hof.exercises.color import color
from hof.exercises.counter import counter
from hof.exercises.lives import lives
from hof.exercises.messages import messages
from hof.exercises.multiply import multiply
from hof.exercises.pocket import pocket
from hof.exercises.total import total
from hof.exercises.user import user


class ExerciseName(StrEnum):
    counter = "counter"
    multiply = "multiply"
    total = "total"
    user = "user"
    color = "color"
    lives = "lives"
    messages = "messages"
    pocket = "pocket"


@dataclass(frozen=True, slots=True)
class ExerciseSpec:
    name: ExerciseName
    factory: Callable[..., Any]
    summary: str


EXERCISE_SPECS: dict[ExerciseName, ExerciseSpec] = {
    ExerciseName.counter: ExerciseSpec(ExerciseName.counter, counter, "next() is one higher each call"),
    ExerciseName.multiply: ExerciseSpec(ExerciseName.multiply, multiply, "function multiplying by a captured factor"),
    ExerciseName.total: ExerciseSpec(ExerciseName.total, total, "discount(rate) without touching the original amount"),
    ExerciseName.user: ExerciseSpec(ExerciseName.user, user, "name setter that only accepts letters and spaces"),
    ExerciseName.color: ExerciseSpec(ExerciseName.color, color, "RGB channels held within [0, 255]"),
    ExerciseName.lives: ExerciseSpec(ExerciseName.lives, lives, "lives counter with floor at zero and restart"),
    ExerciseName.messages: ExerciseSpec(ExerciseName.messages, messages, "messages prefixed with an increasing id"),
    ExerciseName.pocket: ExerciseSpec(ExerciseName.pocket, pocket, "coins and trinkets, buy for 10 and sell for 5"),
}


def get_exercise(name: ExerciseName | str) -> ExerciseSpec:
    try:
        exercise = ExerciseName(name)
    except ValueError:
        raise ValueError(f"Unknown exercise: {name}") from None
    return EXERCISE_SPECS[exercise]


def make_exercise(name: ExerciseName | str, *args: Any, **kwargs: Any) -> Any:
    """Create a handle for the named exercise.

    Example:
        make_exercise("lives", 3).left()  # 3
    """

    return get_exercise(name).factory(*args, **kwargs)
