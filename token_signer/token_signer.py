"""Token signing facade and the process-wide default instance."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable

from token_signer.codec import PayloadCodec
from token_signer.errors import InvalidSecretKind, InvalidSecretLength, InvalidSignature
from token_signer.null_signer import NullSigner
from token_signer.signed_data import SignedData
from token_signer.signer import DEFAULT_DIGEST, MessageSigner
from token_signer.utils.dates import now_as_unix, validate_max_age

logger = logging.getLogger(__name__)

MIN_SECRET_SIZE = 24


class TokenSigner:
    """Generates signed tokens and reconstructs their payloads.

    ``secret`` may be blank, in which case every token generated is ``""`` and
    nothing verifies (see ``NullSigner``). ``max_age`` is an int number of
    seconds, a ``timedelta``/``pendulum.Duration``, or ``None`` to skip the
    age check.
    """

    def __init__(
        self,
        secret: str | bytes | None,
        *,
        max_age: int | timedelta | None = None,
        digest_method: Callable[..., Any] = DEFAULT_DIGEST,
        codec: PayloadCodec | None = None,
        clock: Callable[[], int] = now_as_unix,
    ) -> None:
        secret = _presence(secret)
        _validate_secret(secret)
        validate_max_age(max_age)
        self._secret = secret
        self._max_age = max_age
        self._digest_method = digest_method
        self._codec = codec
        self._clock = clock
        self._signer: MessageSigner | NullSigner | None = None

    def __repr__(self) -> str:
        mode = "null" if self.null_mode else "hmac"
        return f"<TokenSigner mode={mode} max_age={self._max_age!r}>"

    @property
    def null_mode(self) -> bool:
        return self._secret is None

    @property
    def max_age(self) -> int | timedelta | None:
        return self._max_age

    def generate(self, unsigned: Any) -> str:
        signed = ""

        def capture(_: Any, signed_value: str) -> None:
            nonlocal signed
            signed = signed_value

        self._from_unsigned_object(unsigned).when_valid(capture)
        return signed

    def reconstruct(self, signed: str | bytes | None) -> SignedData:
        if not signed or not isinstance(signed, (str, bytes)):
            return SignedData.new_as_invalid()
        try:
            unsigned, signed_at = self.signer.verify(signed)
        except InvalidSignature as exc:
            logger.debug("Rejected token: %s", exc)
            return SignedData.new_as_invalid()
        return SignedData(
            unsigned_value=unsigned,
            signed_value=signed,
            signed_at=signed_at,
            sig_valid=True,
            max_age=self._max_age,
            now=self._clock(),
        )

    from_signed_string = reconstruct

    def _from_unsigned_object(self, unsigned: Any) -> SignedData:
        # Tokens carry their signing time, not an expiry; max_age applies on read.
        signed_at = self._clock()
        signed = self.signer.generate(unsigned, signed_at)
        return SignedData(
            unsigned_value=unsigned,
            signed_value=signed,
            signed_at=signed_at,
            sig_valid=True,
            max_age=self._max_age,
            now=signed_at,
        )

    @property
    def signer(self) -> MessageSigner | NullSigner:
        if self._signer is None:
            if self._secret is None:
                logger.warning("No signing secret configured; tokens will not verify")
                self._signer = NullSigner()
            else:
                self._signer = MessageSigner(self._secret, digest_method=self._digest_method, codec=self._codec)
        return self._signer


def _presence(secret: Any) -> Any:
    if secret is None:
        return None
    if isinstance(secret, (str, bytes)) and not secret.strip():
        return None
    return secret


def _validate_secret(secret: Any) -> None:
    if secret is None:
        return
    if not isinstance(secret, (str, bytes)):
        raise InvalidSecretKind(f"secret must be str or bytes, got {type(secret).__name__}")
    size = len(secret.encode("utf-8")) if isinstance(secret, str) else len(secret)
    if size < MIN_SECRET_SIZE:
        raise InvalidSecretLength(f"secret length must be >= {MIN_SECRET_SIZE} bytes")


# Process-wide default. Assign it once at startup, before any concurrent use;
# reads and writes are not synchronized.
_instance = TokenSigner(None)


def get_instance() -> TokenSigner:
    return _instance


def set_instance(instance: TokenSigner) -> None:
    global _instance
    if not isinstance(instance, TokenSigner):
        raise TypeError("instance must be a TokenSigner")
    logger.info("Default token signer replaced: %r", instance)
    _instance = instance
