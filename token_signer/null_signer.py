"""Fallback signer used when no secret is configured."""

from __future__ import annotations

from typing import Any

from token_signer.errors import InvalidSignature


class NullSigner:
    """Stands in for MessageSigner when the secret is blank.

    Its only purpose is to avoid raising: generated tokens are empty and
    nothing ever verifies. Handy in local development where signing isn't
    needed and nobody wants to configure a secret.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        pass

    def generate(self, *args: Any, **kwargs: Any) -> str:
        return ""

    def verify(self, *args: Any, **kwargs: Any) -> tuple[Any, int]:
        raise InvalidSignature("Signing is disabled: no secret configured")
