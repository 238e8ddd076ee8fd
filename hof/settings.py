from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


ENV_PREFIX = "HOF_"


class SettingsError(ValueError):
    pass


class ExerciseSettings(BaseModel):
    """Tunables shared by the exercises that have any."""

    model_config = ConfigDict(frozen=True)

    # Inclusive channel bounds for color().
    color_min: int = Field(default=0, ge=0, le=255)
    color_max: int = Field(default=255, ge=0, le=255)

    pocket_buy_price: int = Field(default=10, ge=1)
    pocket_sell_price: int = Field(default=5, ge=0)

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def _ordered_color_bounds(self) -> "ExerciseSettings":
        if self.color_min > self.color_max:
            raise ValueError("color_min must not exceed color_max")
        return self


def load_settings(environ: Mapping[str, str] | None = None) -> ExerciseSettings:
    """Build settings from `HOF_*` environment variables.

    Example:
        HOF_POCKET_BUY_PRICE=20 -> pocket_buy_price=20
    """

    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for name in ExerciseSettings.model_fields:
        value = env.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value.strip():
            raw[name] = value.strip()
    try:
        return ExerciseSettings.model_validate(raw)
    except ValidationError as e:
        raise SettingsError(f"Invalid {ENV_PREFIX}* settings: {e}") from e


_SETTINGS: ExerciseSettings | None = None


def init_settings(settings: ExerciseSettings | None = None) -> ExerciseSettings:
    """Install the process-wide settings.

    Without an argument, loads them from the environment.
    """

    global _SETTINGS
    _SETTINGS = settings if settings is not None else load_settings()
    return _SETTINGS


def get_settings() -> ExerciseSettings:
    if _SETTINGS is None:
        return init_settings()
    return _SETTINGS


def reset_settings_for_tests() -> None:
    global _SETTINGS
    _SETTINGS = None
