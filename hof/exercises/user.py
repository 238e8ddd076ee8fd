from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hof.models import UserState


logger = logging.getLogger(__name__)

# One or more ASCII letters or spaces, whole string.
VALID_NAME = re.compile(r"[A-Za-z ]+")


def is_valid_name(candidate: Any) -> bool:
    return isinstance(candidate, str) and VALID_NAME.fullmatch(candidate) is not None


@dataclass(frozen=True, slots=True)
class User:
    set_name: Callable[[str], bool]
    get_name: Callable[[], str]
    snapshot: Callable[[], UserState]


def user() -> User:
    """Return a user whose name can only be set to valid values.

    Example:
        u = user()
        u.set_name("Francis Bacon")  # True
        u.get_name()                 # "Francis Bacon"
        u.set_name("123 hi")         # False
        u.get_name()                 # "Francis Bacon"
    """

    name = ""

    def set_name(candidate: str) -> bool:
        nonlocal name
        if not is_valid_name(candidate):
            logger.debug("Rejected name %r; keeping %r", candidate, name)
            return False
        name = candidate
        return True

    def get_name() -> str:
        return name

    def snapshot() -> UserState:
        return UserState(name=name)

    return User(set_name=set_name, get_name=get_name, snapshot=snapshot)
