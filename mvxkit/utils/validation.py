"""Validation utilities for mvxkit."""

import re
from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Any, Mapping, Sequence, Union

from ..constants import ADDRESS_HRP, ADDRESS_LENGTH, EGLD_DECIMALS
from ..exceptions import (
    InvalidAddressError,
    InvalidArgumentError,
    InvalidKeyError,
    MissingParameterError,
    ValidationError,
)
from ..types.common import Address, Amount, TxHash
from ..utils.encoding import decode_address

__all__ = [
    "ValidationError",
    "looks_like_address",
    "is_valid_address",
    "validate_address",
    "addresses_equal",
    "is_valid_tx_hash",
    "validate_tx_hash",
    "is_valid_signature",
    "validate_private_key",
    "validate_token_identifier",
    "validate_uint",
    "validate_value",
    "require_params",
    "to_atomic",
    "from_atomic",
]

# Regex patterns
TX_HASH_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")
SIGNATURE_PATTERN = re.compile(r"^[0-9a-f]{128}$")
PRIVATE_KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")
DECIMAL_STRING_PATTERN = re.compile(r"^[0-9]+$")

_UINT64_MAX = 2 ** 64 - 1


def looks_like_address(value: str) -> bool:
    """Check shape only (length and ``erd1`` prefix), not checksum."""
    return len(value) == ADDRESS_LENGTH and value.startswith(ADDRESS_HRP + "1")


def is_valid_address(address: Any) -> bool:
    """
    Check if address decodes to a 32-byte public key.

    Args:
        address: Address to validate

    Returns:
        True if valid, False otherwise
    """
    try:
        decode_address(address)
        return True
    except InvalidAddressError:
        return False


def validate_address(address: Any, name: str = "address") -> Address:
    """
    Validate address and return it.

    Raises:
        InvalidAddressError: If address is invalid
    """
    if not address:
        raise InvalidAddressError(f"{name} cannot be empty")
    decode_address(address)
    return Address(address)


def addresses_equal(first: str, second: str) -> bool:
    """Compare two addresses by decoded public key."""
    return decode_address(first) == decode_address(second)


def is_valid_tx_hash(tx_hash: str) -> bool:
    """Check if transaction hash format is valid."""
    return isinstance(tx_hash, str) and bool(TX_HASH_PATTERN.match(tx_hash))


def validate_tx_hash(tx_hash: str) -> TxHash:
    """
    Validate transaction hash and return normalized form.

    Returns:
        Lowercase transaction hash

    Raises:
        ValidationError: If hash is invalid
    """
    if not tx_hash:
        raise ValidationError("Transaction hash cannot be empty")
    if not is_valid_tx_hash(tx_hash):
        raise ValidationError(f"Invalid transaction hash: {tx_hash}")
    return TxHash(tx_hash.lower())


def is_valid_signature(signature: Any) -> bool:
    """Check signature is 128 lowercase hex chars."""
    return isinstance(signature, str) and bool(SIGNATURE_PATTERN.match(signature))


def validate_private_key(key: Union[bytes, str]) -> bytes:
    """
    Validate private key format.

    Args:
        key: 32 bytes or 64 hex chars

    Returns:
        32-byte private key

    Raises:
        InvalidKeyError: If key format is invalid
    """
    if isinstance(key, str):
        if not PRIVATE_KEY_PATTERN.match(key):
            raise InvalidKeyError("Private key must be a 64-character hexadecimal string")
        return bytes.fromhex(key)
    if isinstance(key, (bytes, bytearray)):
        if len(key) != 32:
            raise InvalidKeyError(f"Private key must be 32 bytes, got {len(key)}")
        return bytes(key)
    raise InvalidKeyError(f"Unsupported private key type: {type(key).__name__}")


def validate_token_identifier(identifier: Any, name: str = "Token identifier") -> str:
    """
    Validate token or collection identifier is a non-empty string.

    Raises:
        InvalidArgumentError: If identifier is empty
    """
    if not isinstance(identifier, str) or not identifier:
        raise InvalidArgumentError(f"{name} cannot be empty")
    return identifier


def validate_uint(name: str, value: Any, maximum: int = _UINT64_MAX) -> int:
    """
    Validate an unsigned integer field.

    Accepts ints and decimal strings; bools are rejected.

    Raises:
        InvalidArgumentError: If value is not an integer in [0, maximum]
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got bool")
    if isinstance(value, str) and DECIMAL_STRING_PATTERN.match(value):
        value = int(value)
    if not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise InvalidArgumentError(f"{name} out of range: {value}")
    return value


def validate_value(value: Any) -> str:
    """
    Validate transaction value and return it as a decimal string.

    Raises:
        InvalidArgumentError: If value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidArgumentError("Transaction value must be an integer, got bool")
    if isinstance(value, int):
        if value < 0:
            raise InvalidArgumentError(f"Transaction value cannot be negative: {value}")
        return str(value)
    if isinstance(value, str) and DECIMAL_STRING_PATTERN.match(value):
        return value
    raise InvalidArgumentError(f"Transaction value must be a decimal string: {value!r}")


def require_params(
    params: Mapping[str, Any],
    required: Sequence[str],
    context: str = "transaction",
) -> None:
    """
    Check required keys are present and not None.

    Raises:
        MissingParameterError: Naming the first absent key
    """
    for key in required:
        if params.get(key) is None:
            raise MissingParameterError(key, context)


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidArgumentError("Amount must be numeric, got bool")
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentError(f"Invalid amount: {amount!r}") from e
    if not value.is_finite() or value < 0:
        raise InvalidArgumentError(f"Invalid amount: {amount!r}")
    return value


def to_atomic(amount: Amount, decimals: int = EGLD_DECIMALS) -> str:
    """
    Convert a human-readable amount to atomic units.

    Fraction digits beyond ``decimals`` are truncated.

    Args:
        amount: Non-negative amount, e.g. ``"1.5"``
        decimals: Token decimals (18 for EGLD)

    Returns:
        Atomic amount as a decimal string

    Raises:
        InvalidArgumentError: If amount or decimals are invalid
    """
    if decimals < 0:
        raise InvalidArgumentError("Decimals cannot be negative")
    value = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(len(value.as_tuple().digits) + decimals + 2, 28)
        scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_DOWN)
    return str(int(scaled))


def from_atomic(atomic: Union[int, str], decimals: int = EGLD_DECIMALS) -> Decimal:
    """
    Convert atomic units back to a human-readable amount.

    Raises:
        InvalidArgumentError: If atomic amount is not a non-negative integer
    """
    if decimals < 0:
        raise InvalidArgumentError("Decimals cannot be negative")
    units = validate_uint("Atomic amount", atomic, maximum=2 ** 256)
    with localcontext() as ctx:
        ctx.prec = max(len(str(units)) + 2, 28)
        return Decimal(units).scaleb(-decimals)
