import re

import pytest

from mvxkit.crypto.keys import CURVE_ORDER, PrivateKey, PublicKey, generate_key_pair
from mvxkit.crypto.signature import (
    sign_digest, verify_digest, normalize_s, parse_der_signature, encode_der_signature,
)
from mvxkit.exceptions import CryptoError, InvalidKeyError, SigningError
from mvxkit.utils.encoding import decode_address, keccak256

from helpers import ALICE, ALICE_HEX, SECRET

GX = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


def test_generate_key_pair_shapes():
    material = generate_key_pair()
    assert re.fullmatch(r"[0-9a-f]{64}", material.private_key)
    assert re.fullmatch(r"[0-9a-f]{64}", material.public_key)
    assert decode_address(material.address).hex() == material.public_key
    assert PrivateKey(material.private_key).public_key().hex() == material.public_key
    assert material.private_key not in repr(material)


def test_generate_key_pair_is_random():
    assert generate_key_pair().private_key != generate_key_pair().private_key


def test_public_key_is_x_coordinate():
    key = PrivateKey("00" * 31 + "01")
    assert key.public_key().hex() == GX


def test_private_key_validation():
    with pytest.raises(InvalidKeyError):
        PrivateKey("11" * 31)
    with pytest.raises(InvalidKeyError):
        PrivateKey("zz" * 32)
    with pytest.raises(InvalidKeyError):
        PrivateKey("00" * 32)
    with pytest.raises(InvalidKeyError):
        PrivateKey(CURVE_ORDER.to_bytes(32, "big"))
    with pytest.raises(InvalidKeyError):
        PrivateKey(12345)


def test_private_key_repr_is_masked():
    key = PrivateKey(SECRET)
    assert SECRET not in repr(key)
    assert PrivateKey(key) == key


def test_public_key_from_address():
    pub = PublicKey.from_address(ALICE)
    assert pub.hex() == ALICE_HEX
    assert pub.address() == ALICE
    assert PublicKey(ALICE_HEX) == pub
    with pytest.raises(InvalidKeyError):
        PublicKey("ab")


def test_sign_digest_format_and_determinism():
    digest = keccak256(b"payload")
    first = sign_digest(SECRET, digest)
    second = sign_digest(SECRET, digest)
    assert re.fullmatch(r"[0-9a-f]{128}", first)
    assert first == second
    assert sign_digest(SECRET, keccak256(b"other")) != first


def test_sign_digest_is_low_s_and_verifies():
    key = PrivateKey(SECRET)
    for i in range(10):
        digest = keccak256(bytes([i]))
        signature = sign_digest(key, digest)
        s = int(signature[64:], 16)
        assert 0 < s <= CURVE_ORDER // 2
        assert verify_digest(key.public_key(), digest, signature)
        assert not verify_digest(key.public_key(), keccak256(b"x" + bytes([i])), signature)


def test_sign_digest_errors():
    with pytest.raises(InvalidKeyError):
        sign_digest("abc", keccak256(b""))
    with pytest.raises(SigningError):
        sign_digest(SECRET, b"short")


def test_verify_digest_rejects_garbage():
    digest = keccak256(b"")
    assert not verify_digest(ALICE_HEX, digest, "00" * 64)
    assert not verify_digest(ALICE_HEX, digest, "zz" * 64)
    assert not verify_digest(ALICE_HEX, digest, "ab")


def test_normalize_s():
    high = CURVE_ORDER - 5
    assert normalize_s(high) == 5
    assert normalize_s(5) == 5
    assert normalize_s(CURVE_ORDER // 2) == CURVE_ORDER // 2


def test_der_signature_roundtrip():
    r = 1
    s = 2 ** 255
    sig = encode_der_signature(r, s)
    assert parse_der_signature(sig) == (r, s)
    with pytest.raises(CryptoError):
        parse_der_signature(b"\x31\x00")
