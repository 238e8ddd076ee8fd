from __future__ import annotations

from hof import messages


def test_messages_are_prefixed_with_increasing_id() -> None:
    log = messages()
    assert log.record("a") == "[1] a"
    assert log.record("b") == "[2] b"
    assert log.record("") == "[3] "


def test_snapshot_counts_recorded_messages() -> None:
    log = messages()
    assert log.snapshot().count == 0
    log.record("first message")
    log.record("second message")
    assert log.snapshot().count == 2
