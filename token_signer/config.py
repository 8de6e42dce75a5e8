"""Environment-driven configuration."""

from __future__ import annotations

import os

from token_signer.errors import InvalidMaxAge
from token_signer.token_signer import TokenSigner, set_instance

SECRET_ENV = "TOKEN_SIGNER_SECRET"
MAX_AGE_ENV = "TOKEN_SIGNER_MAX_AGE"


def max_age_from_env() -> int | None:
    raw = os.environ.get(MAX_AGE_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidMaxAge(f"{MAX_AGE_ENV} must be an integer number of seconds") from exc


def signer_from_env() -> TokenSigner:
    """Build a TokenSigner from TOKEN_SIGNER_SECRET and TOKEN_SIGNER_MAX_AGE."""
    return TokenSigner(os.environ.get(SECRET_ENV), max_age=max_age_from_env())


def configure_from_env() -> TokenSigner:
    """Install a signer built from the environment as the process-wide default."""
    signer = signer_from_env()
    set_instance(signer)
    return signer
