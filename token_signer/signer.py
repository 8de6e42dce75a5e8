"""HMAC signer producing ``<base64 payload>--<hex digest>`` envelopes."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
from typing import Any, Callable

from itsdangerous import BadSignature, Signer
from itsdangerous.encoding import want_bytes

from token_signer.codec import DEFAULT_CODEC, PayloadCodec
from token_signer.errors import InvalidSignature

logger = logging.getLogger(__name__)

SEPARATOR = "--"

# SHA1 is pinned for compatibility with tokens already in circulation. Changing
# it invalidates every token issued so far.
DEFAULT_DIGEST = hashlib.sha1


class HexDigestSigner(Signer):
    """itsdangerous signer emitting lowercase hex digests after a ``--``."""

    def __init__(self, secret_key: str | bytes, *, digest_method: Callable[..., Any] = DEFAULT_DIGEST) -> None:
        super().__init__(secret_key, sep=SEPARATOR, key_derivation="none", digest_method=digest_method)

    def get_signature(self, value: str | bytes) -> bytes:
        key = self.derive_key()
        return self.algorithm.get_signature(key, want_bytes(value)).hex().encode("ascii")

    def verify_signature(self, value: str | bytes, sig: str | bytes) -> bool:
        return hmac.compare_digest(self.get_signature(value), want_bytes(sig))


class MessageSigner:
    """Signs ``[payload, signed_at]`` pairs and verifies them back."""

    def __init__(
        self,
        secret: str | bytes,
        *,
        digest_method: Callable[..., Any] = DEFAULT_DIGEST,
        codec: PayloadCodec | None = None,
    ) -> None:
        self._signer = HexDigestSigner(secret, digest_method=digest_method)
        self._codec = codec or DEFAULT_CODEC

    def generate(self, payload: Any, signed_at: int) -> str:
        encoded = base64.b64encode(self._codec.encode([payload, signed_at]))
        return self._signer.sign(encoded).decode("ascii")

    def verify(self, signed_string: str | bytes) -> tuple[Any, int]:
        try:
            encoded = self._signer.unsign(want_bytes(signed_string))
        except UnicodeEncodeError as exc:
            raise InvalidSignature("Token is not valid UTF-8") from exc
        except BadSignature as exc:
            raise InvalidSignature(str(exc)) from exc
        try:
            decoded = self._codec.decode(base64.b64decode(encoded, validate=True))
        except (binascii.Error, ValueError, TypeError) as exc:
            # Authentic signature over undecodable bytes.
            logger.warning("Signed payload could not be decoded: %s", exc)
            raise InvalidSignature("Signed payload could not be decoded") from exc
        if not isinstance(decoded, list) or len(decoded) != 2:
            raise InvalidSignature("Signed payload has an unexpected shape")
        payload, signed_at = decoded
        if not isinstance(signed_at, int) or isinstance(signed_at, bool):
            raise InvalidSignature("Signed payload has no signing time")
        return payload, signed_at
