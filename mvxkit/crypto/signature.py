"""Signature utilities for mvxkit."""

import logging
from typing import Tuple, Union

from coincurve import PublicKey as SecpPublicKey

from ..crypto.keys import CURVE_ORDER, PrivateKey, PublicKey
from ..exceptions import CryptoError, InvalidKeyError, SigningError
from ..types.common import Signature

__all__ = [
    "sign_digest",
    "verify_digest",
    "normalize_s",
    "parse_der_signature",
    "encode_der_signature",
]

logger = logging.getLogger(__name__)

_HALF_ORDER = CURVE_ORDER // 2


def sign_digest(private_key: Union[str, bytes, PrivateKey], digest: bytes) -> Signature:
    """
    Sign a 32-byte digest with canonical low-S ECDSA.

    Nonces are RFC 6979 deterministic, so equal inputs give equal
    signatures.

    Args:
        private_key: 64 hex chars, 32 bytes or PrivateKey
        digest: 32-byte message digest

    Returns:
        128 hex chars, r and s each left-padded to 32 bytes

    Raises:
        InvalidKeyError: If key is malformed or not a valid scalar
        SigningError: If the signing backend fails
    """
    if len(digest) != 32:
        raise SigningError(f"Digest must be 32 bytes, got {len(digest)}")

    key = PrivateKey(private_key)

    try:
        der = key.sign_der(digest)
        r, s = parse_der_signature(der)
    except Exception as e:
        raise SigningError(f"Signing failed: {e}") from e

    s = normalize_s(s)
    return Signature(r.to_bytes(32, "big").hex() + s.to_bytes(32, "big").hex())


def verify_digest(
    public_key: Union[str, bytes, PublicKey],
    digest: bytes,
    signature: str,
) -> bool:
    """
    Verify an r || s signature against an X-only public key.

    Both Y parities are tried, since the address carries only X.

    Args:
        public_key: 32-byte X coordinate (bytes, hex or PublicKey)
        digest: 32-byte message digest
        signature: 128 hex chars

    Returns:
        True if signature is valid
    """
    if len(digest) != 32 or len(signature) != 128:
        return False

    try:
        x_only = PublicKey(public_key).point
        raw = bytes.fromhex(signature)
    except (InvalidKeyError, ValueError):
        return False

    r = int.from_bytes(raw[:32], "big")
    s = int.from_bytes(raw[32:], "big")
    if not (0 < r < CURVE_ORDER and 0 < s <= _HALF_ORDER):
        return False
    der = encode_der_signature(r, s)

    for prefix in (b"\x02", b"\x03"):
        try:
            if SecpPublicKey(prefix + x_only).verify(der, digest, hasher=None):
                return True
        except ValueError:
            # X is not on the curve
            return False
    return False


def normalize_s(s: int) -> int:
    """Map S to the lower half of the curve order."""
    if s > _HALF_ORDER:
        return CURVE_ORDER - s
    return s


def parse_der_signature(signature: bytes) -> Tuple[int, int]:
    """
    Parse DER-encoded signature.

    Args:
        signature: DER-encoded signature

    Returns:
        Tuple of (r, s)

    Raises:
        CryptoError: If signature format is invalid
    """
    try:
        if signature[0] != 0x30:
            raise ValueError("missing sequence tag")

        length = signature[1]
        if length + 2 != len(signature):
            raise ValueError("incorrect length")

        if signature[2] != 0x02:
            raise ValueError("missing r integer tag")

        r_length = signature[3]
        r = int.from_bytes(signature[4:4 + r_length], "big")

        s_offset = 4 + r_length
        if signature[s_offset] != 0x02:
            raise ValueError("missing s integer tag")

        s_length = signature[s_offset + 1]
        s = int.from_bytes(signature[s_offset + 2:s_offset + 2 + s_length], "big")

        return r, s

    except (IndexError, ValueError) as e:
        raise CryptoError(f"Invalid DER signature: {e}") from e


def encode_der_signature(r: int, s: int) -> bytes:
    """
    Encode signature as DER.

    Args:
        r: Signature r value
        s: Signature s value

    Returns:
        DER-encoded signature
    """
    def _encode_int(value: int) -> bytes:
        data = value.to_bytes(max((value.bit_length() + 7) // 8, 1), "big")
        if data[0] & 0x80:
            data = b"\x00" + data
        return b"\x02" + bytes([len(data)]) + data

    sequence = _encode_int(r) + _encode_int(s)
    return b"\x30" + bytes([len(sequence)]) + sequence
