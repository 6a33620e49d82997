"""Common type definitions for mvxkit."""

from typing import NewType, Union
from decimal import Decimal

__all__ = [
    "HexStr",
    "Address",
    "TxHash",
    "TokenIdentifier",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "Amount",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

# Identifiers
Address = NewType("Address", str)
"""Bech32 ``erd1...`` address string."""

TxHash = NewType("TxHash", str)
"""Transaction hash (64 hex chars)."""

TokenIdentifier = NewType("TokenIdentifier", str)
"""Token or collection identifier, e.g. ``WEGLD-bd4d79``."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte x-only public key."""

Signature = NewType("Signature", str)
"""128 hex chars: r || s."""

# Type aliases
Amount = Union[int, str, Decimal]
"""Human-readable amount accepted by the converters."""
