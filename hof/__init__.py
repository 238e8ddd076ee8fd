"""Closure and factory-function exercises.

Every factory returns a fresh handle whose operations close over private state.
"""

from __future__ import annotations

from hof.exercises.color import color
from hof.exercises.counter import counter
from hof.exercises.lives import lives
from hof.exercises.messages import messages
from hof.exercises.multiply import multiply
from hof.exercises.pocket import pocket
from hof.exercises.total import total
from hof.exercises.user import user

__all__ = ["color", "counter", "lives", "messages", "multiply", "pocket", "total", "user"]
