from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hof.models import MessagesState


@dataclass(frozen=True, slots=True)
class Messages:
    record: Callable[[str], str]
    snapshot: Callable[[], MessagesState]


def messages() -> Messages:
    """Prefix each recorded message with its 1-based message id.

    Example:
        log = messages()
        log.record("first message")   # "[1] first message"
        log.record("second message")  # "[2] second message"
    """

    count = 0

    def record(text: str) -> str:
        nonlocal count
        count += 1
        return f"[{count}] {text}"

    def snapshot() -> MessagesState:
        return MessagesState(count=count)

    return Messages(record=record, snapshot=snapshot)
