from __future__ import annotations

from collections.abc import Generator

import pytest

from hof.settings import ExerciseSettings, init_settings, reset_settings_for_tests


@pytest.fixture(autouse=True)
def _default_settings() -> Generator[ExerciseSettings, None, None]:
    """Pin every test to default settings.

    This keeps tests hermetic: HOF_* variables in the developer's shell or .env
    must not change prices or channel bounds under test.
    """

    reset_settings_for_tests()
    settings = init_settings(ExerciseSettings())
    yield settings
    reset_settings_for_tests()
