import pytest

from token_signer.codec import JSONPayloadCodec


@pytest.fixture()
def codec():
    return JSONPayloadCodec()


def test_encoding_is_canonical(codec):
    assert codec.encode({"b": 1, "a": [1, 2]}) == codec.encode({"a": [1, 2], "b": 1})
    assert codec.encode({"b": 1, "a": 2}) == b'{"a":2,"b":1}'


def test_strings_round_trip_exactly(codec):
    for value in ("hello", "", "zoë ☃", ["a", "b", "c"]):
        assert codec.decode(codec.encode(value)) == value


def test_tuples_decode_as_lists(codec):
    assert codec.decode(codec.encode(("a", "b"))) == ["a", "b"]


def test_decode_rejects_garbage(codec):
    with pytest.raises(ValueError):
        codec.decode(b"{not json")
    with pytest.raises(ValueError):
        codec.decode(b"\xff\xfe")
