"""Cryptographic utilities for mvxkit."""

from ..crypto.keys import PrivateKey, PublicKey, KeyMaterial, generate_key_pair
from ..crypto.signature import (
    sign_digest,
    verify_digest,
    normalize_s,
    parse_der_signature,
    encode_der_signature,
)
from ..crypto.transaction_signing import (
    serialize_for_signing,
    transaction_digest,
    sign_transaction,
    verify_transaction,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "KeyMaterial",
    "generate_key_pair",

    # Signatures
    "sign_digest",
    "verify_digest",
    "normalize_s",
    "parse_der_signature",
    "encode_der_signature",

    # Transactions
    "serialize_for_signing",
    "transaction_digest",
    "sign_transaction",
    "verify_transaction",
]
