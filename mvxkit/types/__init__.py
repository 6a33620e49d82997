"""Type definitions for mvxkit."""

# Common types
from ..types.common import (
    HexStr,
    Address,
    TxHash,
    TokenIdentifier,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
    Amount,
)

# Argument types
from ..types.arguments import (
    BigUInt,
    NativeInt,
    Text,
    Bool,
    AddressArg,
    Argument,
    to_argument,
)

# Transaction types
from ..types.transaction import (
    UnsignedTransaction,
    SignedTransaction,
    SIGNING_FIELDS,
)

__all__ = [
    # Common
    "HexStr",
    "Address",
    "TxHash",
    "TokenIdentifier",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "Amount",

    # Arguments
    "BigUInt",
    "NativeInt",
    "Text",
    "Bool",
    "AddressArg",
    "Argument",
    "to_argument",

    # Transaction
    "UnsignedTransaction",
    "SignedTransaction",
    "SIGNING_FIELDS",
]
