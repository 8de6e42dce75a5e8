"""Payload codecs used to turn signed values into bytes and back."""

from __future__ import annotations

import json
from typing import Any, Protocol


class PayloadCodec(Protocol):
    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...


class JSONPayloadCodec:
    """Canonical JSON: sorted keys, compact separators, UTF-8.

    Equal mappings always encode to the same bytes, so a signature never
    depends on dict insertion order.
    """

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


DEFAULT_CODEC = JSONPayloadCodec()
