import json

import pytest

from mvxkit.exceptions import InvalidAddressError, InvalidArgumentError, ValidationError
from mvxkit.utils.encoding import (
    hex_to_bytes, bytes_to_hex, int_to_hex, text_to_hex, is_hex,
    keccak256, canonical_json, encode_base64, decode_base64,
    convert_bits, encode_bech32, decode_bech32,
    encode_address, decode_address, address_to_hex,
)
from mvxkit.utils.validation import is_valid_address

from helpers import ALICE, ALICE_HEX, BOB, BOB_HEX


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")


def test_int_to_hex_is_minimal():
    assert int_to_hex(0) == "00"
    assert int_to_hex(1) == "1"
    assert int_to_hex(255) == "ff"
    assert int_to_hex(256) == "100"
    assert int_to_hex(10 ** 18) == "de0b6b3a7640000"
    with pytest.raises(InvalidArgumentError):
        int_to_hex(-1)


def test_text_to_hex_and_is_hex():
    assert text_to_hex("WEGLD-bd4d79") == "5745474c442d626434643739"
    assert is_hex("00ff")
    assert is_hex("ABCdef")
    assert not is_hex("")
    assert not is_hex("0x12")
    assert not is_hex("g1")


def test_keccak256_vectors():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert keccak256(b"abc").hex() == "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"


def test_canonical_json_is_compact_and_keeps_slashes():
    out = canonical_json({"b": 1, "a": "x/y", "c": [1, 2]})
    assert out == '{"b":1,"a":"x/y","c":[1,2]}'
    assert json.loads(out)["a"] == "x/y"


def test_base64_roundtrip():
    assert encode_base64("hello") == "aGVsbG8="
    assert decode_base64("aGVsbG8=") == "hello"
    with pytest.raises(ValidationError):
        decode_base64("not base64!")


def test_convert_bits_strict_on_decode():
    assert convert_bits([0xff], 8, 5, True) == [31, 28]
    assert convert_bits([31, 28], 5, 8, False) == [0xff]
    with pytest.raises(ValidationError):
        convert_bits([31, 29], 5, 8, False)


def test_bech32_roundtrip():
    data = convert_bits(b"\x01" * 20, 8, 5, True)
    encoded = encode_bech32("erd", data)
    assert decode_bech32(encoded) == ("erd", data)
    with pytest.raises(ValidationError):
        decode_bech32(encoded[:-1] + ("q" if encoded[-1] != "q" else "p"))


def test_known_addresses():
    assert decode_address(ALICE).hex() == ALICE_HEX
    assert decode_address(BOB).hex() == BOB_HEX
    assert encode_address(bytes.fromhex(ALICE_HEX)) == ALICE
    assert encode_address(bytes.fromhex(BOB_HEX)) == BOB
    assert address_to_hex(BOB) == BOB_HEX


@pytest.mark.parametrize("payload", [b"\x00" * 32, b"\xff" * 32, bytes(range(32))])
def test_address_roundtrip(payload):
    address = encode_address(payload)
    assert len(address) == 62
    assert address.startswith("erd1")
    assert decode_address(address) == payload


def test_encode_address_requires_32_bytes():
    with pytest.raises(InvalidAddressError):
        encode_address(b"\x01" * 20)


def test_single_character_change_is_detected():
    for i, char in enumerate(ALICE):
        replacement = "q" if char != "q" else "p"
        mutated = ALICE[:i] + replacement + ALICE[i + 1:]
        assert not is_valid_address(mutated), mutated


def test_decode_address_rejects_malformed():
    with pytest.raises(InvalidAddressError):
        decode_address(ALICE[:-1])
    with pytest.raises(InvalidAddressError):
        decode_address("xrd1" + ALICE[4:])
    with pytest.raises(InvalidAddressError):
        decode_address(ALICE[:-1] + "b")  # 'b' is outside the charset
    with pytest.raises(InvalidAddressError):
        decode_address(ALICE.upper())
    with pytest.raises(InvalidAddressError):
        decode_address(None)


def test_is_valid_address_is_idempotent():
    assert is_valid_address(ALICE) is True
    assert is_valid_address(ALICE) is True
    assert is_valid_address("erd1invalid") is False
    assert is_valid_address("erd1invalid") is False
