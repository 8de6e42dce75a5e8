"""Validity evaluation for signed tokens."""

from __future__ import annotations

import enum
from datetime import timedelta
from typing import Any, Callable

from token_signer.utils.dates import duration_seconds, now_as_unix, validate_max_age


class SignedDataState(enum.Enum):
    INVALID = "invalid"
    VALID = "valid"
    EXPIRED = "expired"


class SignedData:
    """Outcome of signing or verifying a token.

    The state is decided once, when the instance is built, and callers branch
    on it with ``when_valid`` / ``when_invalid`` instead of a boolean::

        signer.reconstruct(token).when_valid(
            lambda payload, token: ...
        ).when_invalid(
            lambda: ...
        )

    The payload is only ever handed to the ``when_valid`` callback. A result
    without a ``signed_at`` is invalid even when no ``max_age`` is set.
    """

    __slots__ = ("_unsigned_value", "_signed_value", "_signed_at", "_max_age", "_state")

    def __init__(
        self,
        *,
        unsigned_value: Any,
        signed_value: str | None,
        signed_at: int | None,
        sig_valid: bool,
        max_age: int | timedelta | None = None,
        now: int | None = None,
    ) -> None:
        validate_max_age(max_age)
        if not sig_valid:
            unsigned_value = signed_at = None
        set_ = object.__setattr__
        set_(self, "_unsigned_value", unsigned_value)
        set_(self, "_signed_value", signed_value)
        set_(self, "_signed_at", signed_at)
        set_(self, "_max_age", max_age)
        set_(self, "_state", self._evaluate(sig_valid, signed_at, max_age, now))

    @classmethod
    def new_as_invalid(cls) -> SignedData:
        return cls(unsigned_value=None, signed_value=None, signed_at=None, sig_valid=False)

    @staticmethod
    def _evaluate(sig_valid: bool, signed_at: int | None, max_age: int | timedelta | None, now: int | None) -> SignedDataState:
        if not sig_valid or signed_at is None:
            return SignedDataState.INVALID
        if max_age is None:
            return SignedDataState.VALID
        if now is None:
            now = now_as_unix()
        if now - signed_at <= duration_seconds(max_age):
            return SignedDataState.VALID
        return SignedDataState.EXPIRED

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<SignedData state={self._state.value}>"

    @property
    def state(self) -> SignedDataState:
        return self._state

    @property
    def valid(self) -> bool:
        return self._state is SignedDataState.VALID

    @property
    def expired(self) -> bool:
        return self._state is SignedDataState.EXPIRED

    @property
    def signed_at(self) -> int | None:
        return self._signed_at

    @property
    def max_age(self) -> int | timedelta | None:
        return self._max_age

    def when_valid(self, callback: Callable[[Any, str | None], Any]) -> SignedData:
        if self.valid:
            callback(self._unsigned_value, self._signed_value)
        return self

    def when_invalid(self, callback: Callable[[], Any]) -> SignedData:
        if not self.valid:
            callback()
        return self
