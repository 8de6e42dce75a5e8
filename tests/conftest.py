import base64
import hashlib
import hmac
import json
from datetime import datetime, timezone

import pytest

import token_signer.token_signer as token_signer_module
from token_signer import TokenSigner

SECRET = "kUWEAukw5RukgA4sETcCa996"
UNIX_TIME = int(datetime(2020, 12, 28, 17, 10, 47, tzinfo=timezone.utc).timestamp())
STRING_PAYLOAD = "V3AE5k8U4CosyZdTaQHB45j5"
ARRAY_PAYLOAD = ["31ihk2jsCSQNGwARVQwQDVtD", "K2mF78d9Q8u6MqWHb9CbmfYM"]


def build_encoded_payload(payload, signed_at) -> str:
    raw = json.dumps([payload, signed_at], sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def build_signed(payload, signed_at, secret: str = SECRET) -> str:
    encoded = build_encoded_payload(payload, signed_at)
    sig = hmac.new(secret.encode("utf-8"), encoded.encode("ascii"), hashlib.sha1).hexdigest()
    return f"{encoded}--{sig}"


class FrozenClock:
    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


def outcome(signer: TokenSigner, signed):
    """Return (valid_called, invalid_called, payload) for ``signed``."""
    seen = {"valid": False, "invalid": False, "payload": None}

    def on_valid(payload, _):
        seen["valid"] = True
        seen["payload"] = payload

    def on_invalid():
        seen["invalid"] = True

    signer.reconstruct(signed).when_valid(on_valid).when_invalid(on_invalid)
    return seen["valid"], seen["invalid"], seen["payload"]


@pytest.fixture()
def clock():
    return FrozenClock(UNIX_TIME)


@pytest.fixture()
def signer(clock):
    return TokenSigner(SECRET, clock=clock)


@pytest.fixture()
def signed_string():
    return build_signed(STRING_PAYLOAD, UNIX_TIME)


@pytest.fixture()
def signed_array():
    return build_signed(ARRAY_PAYLOAD, UNIX_TIME)


@pytest.fixture()
def restore_instance():
    original = token_signer_module.get_instance()
    yield
    token_signer_module.set_instance(original)
