from __future__ import annotations

import logging

import pytest

from hof import user
from hof.exercises.user import is_valid_name


def test_new_user_has_empty_name() -> None:
    assert user().get_name() == ""


def test_valid_name_is_stored() -> None:
    u = user()
    assert u.set_name("Ann Lee") is True
    assert u.get_name() == "Ann Lee"


def test_invalid_name_is_rejected_and_previous_kept() -> None:
    u = user()
    assert u.set_name("123") is False
    assert u.get_name() == ""

    assert u.set_name("Francis Bacon") is True
    assert u.set_name("123 hi") is False
    assert u.get_name() == "Francis Bacon"


@pytest.mark.parametrize(
    "candidate",
    ["", "Anne-Marie", "Zoë", "tab\tname", "trailing newline\n", None, 42],
)
def test_names_outside_letters_and_spaces_are_rejected(candidate: object) -> None:
    assert is_valid_name(candidate) is False
    assert user().set_name(candidate) is False  # type: ignore[arg-type]


def test_spaces_only_is_a_valid_name() -> None:
    u = user()
    assert u.set_name("   ") is True
    assert u.get_name() == "   "


def test_rejected_name_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    u = user()
    with caplog.at_level(logging.DEBUG, logger="hof.exercises.user"):
        u.set_name("R2D2")
    assert any("Rejected name" in r.getMessage() for r in caplog.records)


def test_snapshot_reflects_stored_name() -> None:
    u = user()
    u.set_name("Ada")
    assert u.snapshot().name == "Ada"
