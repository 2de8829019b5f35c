from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import InvalidDuration


@dataclass(frozen=True)
class Remaining:
    """Years of life left on a finite budget item."""

    years: int

    def __post_init__(self) -> None:
        if isinstance(self.years, bool) or not isinstance(self.years, int) or self.years < 1:
            raise InvalidDuration(f"Remaining duration must be a positive integer, got {self.years!r}")

    def tick(self) -> Duration:
        if self.years == 1:
            return EXPIRED
        return Remaining(self.years - 1)


@dataclass(frozen=True)
class _Infinite:
    def __repr__(self) -> str:
        return "INFINITE"


@dataclass(frozen=True)
class _Expired:
    def __repr__(self) -> str:
        return "EXPIRED"


INFINITE = _Infinite()
EXPIRED = _Expired()

Duration = Union[Remaining, _Infinite, _Expired]

_NAMED = {"infinite": INFINITE, "expired": EXPIRED}


def as_duration(value: object) -> Duration:
    """Coerce a positive int, "infinite"/"expired" or a Duration into a Duration."""
    if isinstance(value, (Remaining, _Infinite, _Expired)):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _NAMED:
            return _NAMED[key]
        if key.isdigit():
            return Remaining(int(key))
        raise InvalidDuration(f"Unknown duration {value!r}")
    if isinstance(value, int) and not isinstance(value, bool):
        return Remaining(value)
    # spreadsheet and JSON sources hand back whole numbers as floats
    if isinstance(value, float) and value.is_integer():
        return Remaining(int(value))
    raise InvalidDuration(f"Unsupported duration {value!r}")


def duration_to_value(duration: Duration) -> int | str:
    if isinstance(duration, Remaining):
        return duration.years
    if duration == INFINITE:
        return "infinite"
    return "expired"
