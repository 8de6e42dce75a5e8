"""Clock and duration helpers."""

from __future__ import annotations

from datetime import timedelta

import pendulum

from token_signer.errors import InvalidMaxAge


def now_as_unix() -> int:
    return pendulum.now("UTC").int_timestamp


def duration_seconds(value: int | timedelta) -> float:
    """Convert an integer number of seconds or a timedelta to seconds.

    ``pendulum.Duration`` is a ``timedelta`` subclass and is accepted as well.
    """
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidMaxAge(f"max_age must be an int or timedelta, got {type(value).__name__}")


def validate_max_age(max_age: int | timedelta | None) -> None:
    if max_age is None:
        return
    if duration_seconds(max_age) <= 0:
        raise InvalidMaxAge("max_age must be positive")
