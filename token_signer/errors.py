"""Exceptions raised by token_signer."""

from __future__ import annotations

from itsdangerous import BadSignature


class TokenSignerError(Exception):
    pass


class InvalidSecretKind(TokenSignerError, TypeError):
    pass


class InvalidSecretLength(TokenSignerError, ValueError):
    pass


class InvalidMaxAge(TokenSignerError, ValueError):
    pass


class InvalidSignature(TokenSignerError, BadSignature):
    """Signature missing, mismatched, or wrapping an undecodable payload."""
