"""Tamper-evident, optionally expiring tokens."""

from token_signer.codec import JSONPayloadCodec, PayloadCodec
from token_signer.errors import (
    InvalidMaxAge,
    InvalidSecretKind,
    InvalidSecretLength,
    InvalidSignature,
    TokenSignerError,
)
from token_signer.signed_data import SignedData, SignedDataState
from token_signer.token_signer import TokenSigner, get_instance, set_instance

__version__ = "1.0.0"

__all__ = [
    "InvalidMaxAge",
    "InvalidSecretKind",
    "InvalidSecretLength",
    "InvalidSignature",
    "JSONPayloadCodec",
    "PayloadCodec",
    "SignedData",
    "SignedDataState",
    "TokenSigner",
    "TokenSignerError",
    "get_instance",
    "set_instance",
]
