"""Transaction signing implementation for mvxkit."""

import logging
from typing import Union

from ..crypto.keys import PrivateKey
from ..crypto.signature import sign_digest, verify_digest
from ..exceptions import TransactionError
from ..types.transaction import SignedTransaction, UnsignedTransaction
from ..utils.encoding import canonical_json, decode_address, keccak256

__all__ = ["serialize_for_signing", "transaction_digest", "sign_transaction", "verify_transaction"]

logger = logging.getLogger(__name__)


def serialize_for_signing(tx: UnsignedTransaction) -> bytes:
    """Canonical JSON bytes covered by the signature."""
    return canonical_json(tx.to_dict()).encode("utf-8")


def transaction_digest(tx: UnsignedTransaction) -> bytes:
    """Keccak-256 of the canonical JSON."""
    return keccak256(serialize_for_signing(tx))


def sign_transaction(
    tx: UnsignedTransaction,
    private_key: Union[str, bytes, PrivateKey],
) -> SignedTransaction:
    """
    Sign transaction and return it with the signature attached.

    Raises:
        TransactionError: If tx is not an UnsignedTransaction
        InvalidKeyError: If private key is malformed
        SigningError: If signing fails
    """
    if isinstance(tx, SignedTransaction):
        raise TransactionError("Transaction is already signed")
    if not isinstance(tx, UnsignedTransaction):
        raise TransactionError(f"Cannot sign {type(tx).__name__}")

    signature = sign_digest(private_key, transaction_digest(tx))
    logger.debug(f"Signed transaction nonce={tx.nonce} from {tx.sender}")
    return tx.with_signature(signature)


def verify_transaction(tx: SignedTransaction) -> bool:
    """Check signature against the sender address."""
    return verify_digest(
        decode_address(tx.sender),
        transaction_digest(tx.unsigned()),
        tx.signature,
    )
