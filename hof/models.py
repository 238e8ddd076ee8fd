from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Same character class user().set_name accepts, widened to allow the initial "".
NAME_PATTERN = r"^[A-Za-z ]*$"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class CounterState(_Snapshot):
    value: int


class TotalState(_Snapshot):
    amount: float


class UserState(_Snapshot):
    name: str = Field(default="", pattern=NAME_PATTERN)


class ColorState(_Snapshot):
    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)

    def as_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class LivesState(_Snapshot):
    start: int = Field(..., ge=0)
    left: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _left_within_start(self) -> "LivesState":
        if self.left > self.start:
            raise ValueError("left must not exceed start")
        return self


class MessagesState(_Snapshot):
    # Number of messages recorded so far; the next id is count + 1.
    count: int = Field(default=0, ge=0)


class PocketState(_Snapshot):
    coins: int = Field(..., ge=0)
    trinkets: int = Field(default=0, ge=0)
