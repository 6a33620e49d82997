"""Encoding and decoding utilities for mvxkit."""

import base64
import json
from typing import Any, Iterable, List, Mapping, Tuple, Union

from Crypto.Hash import keccak

from ..constants import ADDRESS_HRP, ADDRESS_LENGTH, PUBLIC_KEY_LENGTH
from ..exceptions import InvalidAddressError, InvalidArgumentError, ValidationError
from ..types.common import HexStr, Address

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "int_to_hex",
    "text_to_hex",
    "is_hex",
    "keccak256",
    "canonical_json",
    "encode_base64",
    "decode_base64",
    "convert_bits",
    "encode_bech32",
    "decode_bech32",
    "encode_address",
    "decode_address",
    "address_to_hex",
]

# Constants
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_CONST = 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def int_to_hex(value: int) -> HexStr:
    """
    Minimal lowercase hex of a non-negative integer.

    Zero is rendered as ``"00"``, never as an empty string. Other values
    carry no leading-zero padding.

    Raises:
        InvalidArgumentError: If value is negative
    """
    if value < 0:
        raise InvalidArgumentError(f"Cannot hex-encode negative value: {value}")
    if value == 0:
        return HexStr("00")
    return HexStr(format(value, "x"))


def text_to_hex(text: str) -> HexStr:
    """Hex of the UTF-8 bytes of text."""
    return HexStr(text.encode("utf-8").hex())


def is_hex(value: str) -> bool:
    """Check string is a non-empty run of hex digits."""
    return bool(value) and all(char in _HEX_DIGITS for char in value)


def keccak256(data: bytes) -> bytes:
    """Keccak-256 (original padding, not NIST SHA3-256)."""
    return keccak.new(digest_bits=256, data=data).digest()


def canonical_json(obj: Mapping[str, Any]) -> str:
    """
    Serialize to JSON with no structural whitespace.

    Key order is preserved and forward slashes are left unescaped.
    """
    return json.dumps(obj, separators=(",", ":"))


def encode_base64(text: str) -> str:
    """Base64 of the UTF-8 bytes of text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(data: str) -> str:
    """Inverse of encode_base64."""
    try:
        return base64.b64decode(data, validate=True).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid base64 data: {data}") from e


def convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> List[int]:
    """
    Regroup a sequence of integers between bit widths, MSB first.

    Args:
        data: Input groups, each below 2**from_bits
        from_bits: Input group width
        to_bits: Output group width
        pad: Zero-pad the last group (encode) instead of rejecting leftovers (decode)

    Returns:
        Output groups

    Raises:
        ValidationError: If an input group is out of range or leftover bits are invalid
    """
    acc = 0
    bits = 0
    result = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1

    for value in data:
        if value < 0 or value >> from_bits:
            raise ValidationError(f"Invalid {from_bits}-bit value: {value}")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((acc >> bits) & maxv)

    if pad:
        if bits:
            result.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise ValidationError("Invalid padding in bit conversion")

    return result


def _bech32_polymod(values: List[int]) -> int:
    """Compute Bech32 checksum polymod."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def _bech32_hrp_expand(hrp: str) -> List[int]:
    """Expand human-readable part for Bech32."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def encode_bech32(hrp: str, data: List[int]) -> str:
    """
    Encode 5-bit groups as a Bech32 string.

    Args:
        hrp: Human-readable part
        data: 5-bit groups

    Returns:
        Bech32 string
    """
    polymod = _bech32_polymod(_bech32_hrp_expand(hrp) + data + [0, 0, 0, 0, 0, 0]) ^ _BECH32_CONST
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(BECH32_CHARSET[v] for v in data + checksum)


def decode_bech32(bech: str) -> Tuple[str, List[int]]:
    """
    Decode a Bech32 string.

    Args:
        bech: Bech32 string

    Returns:
        Tuple of (hrp, 5-bit groups without checksum)

    Raises:
        ValidationError: If string is malformed or checksum fails
    """
    if bech.lower() != bech and bech.upper() != bech:
        raise ValidationError("Invalid Bech32 string: mixed case")
    bech = bech.lower()

    pos = bech.rfind("1")
    if pos < 1 or pos + 7 > len(bech):
        raise ValidationError("Invalid Bech32 string: bad separator position")

    hrp = bech[:pos]
    values = []
    for char in bech[pos + 1:]:
        index = BECH32_CHARSET.find(char)
        if index < 0:
            raise ValidationError(f"Invalid Bech32 character: {char}")
        values.append(index)

    if _bech32_polymod(_bech32_hrp_expand(hrp) + values) != _BECH32_CONST:
        raise ValidationError("Invalid Bech32 checksum")

    return hrp, values[:-6]


def encode_address(public_key: bytes) -> Address:
    """
    Encode 32-byte public key as an ``erd1`` address.

    Args:
        public_key: 32-byte public key

    Returns:
        Bech32 address

    Raises:
        InvalidAddressError: If public key is not 32 bytes
    """
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise InvalidAddressError(
            f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
        )
    return Address(encode_bech32(ADDRESS_HRP, convert_bits(public_key, 8, 5, True)))


def decode_address(address: str) -> bytes:
    """
    Decode an ``erd1`` address to its 32-byte public key.

    Args:
        address: Bech32 address

    Returns:
        32-byte public key

    Raises:
        InvalidAddressError: If address is malformed or checksum fails
    """
    if not isinstance(address, str):
        raise InvalidAddressError(f"Address must be a string, got {type(address).__name__}")

    prefix = ADDRESS_HRP + "1"
    if len(address) != ADDRESS_LENGTH or not address.startswith(prefix):
        raise InvalidAddressError(
            f"Invalid address format: expected {ADDRESS_LENGTH} chars starting with "
            f"{prefix}, got {len(address)} chars: {address}"
        )

    try:
        hrp, data = decode_bech32(address)
        payload = bytes(convert_bits(data, 5, 8, False))
    except ValidationError as e:
        raise InvalidAddressError(f"Invalid address {address}: {e}") from e

    if hrp != ADDRESS_HRP:
        raise InvalidAddressError(f"Invalid address prefix: {hrp}")
    if len(payload) != PUBLIC_KEY_LENGTH:
        raise InvalidAddressError(
            f"Decoded address does not represent a {PUBLIC_KEY_LENGTH}-byte public key"
        )
    return payload


def address_to_hex(address: str) -> HexStr:
    """Public key hex (64 chars) of an ``erd1`` address."""
    return bytes_to_hex(decode_address(address))
