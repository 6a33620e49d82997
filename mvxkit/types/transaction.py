"""Transaction type definitions for mvxkit."""

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..types.common import Address, Signature

__all__ = [
    "UnsignedTransaction",
    "SignedTransaction",
    "SIGNING_FIELDS",
]

# Wire names in signing order
SIGNING_FIELDS = (
    "nonce",
    "value",
    "receiver",
    "sender",
    "gasPrice",
    "gasLimit",
    "data",
    "chainID",
    "version",
)


@dataclass(frozen=True)
class UnsignedTransaction:
    """Transaction ready to be signed."""

    nonce: int
    value: str
    receiver: Address
    sender: Address
    gas_price: int
    gas_limit: int
    chain_id: str
    version: int
    data: Optional[str] = None  # base64

    def to_dict(self) -> Dict[str, Any]:
        """
        Wire representation in signing order.

        Absent fields are left out rather than emitted as null.
        """
        fields = {
            "nonce": self.nonce,
            "value": self.value,
            "receiver": self.receiver,
            "sender": self.sender,
            "gasPrice": self.gas_price,
            "gasLimit": self.gas_limit,
            "data": self.data,
            "chainID": self.chain_id,
            "version": self.version,
        }
        return {key: value for key, value in fields.items() if value is not None}

    @property
    def raw_data(self) -> Optional[str]:
        """Decoded ``data`` field."""
        if self.data is None:
            return None
        return base64.b64decode(self.data).decode("utf-8")

    def with_signature(self, signature: Signature) -> "SignedTransaction":
        """Attach a signature."""
        return SignedTransaction(
            nonce=self.nonce,
            value=self.value,
            receiver=self.receiver,
            sender=self.sender,
            gas_price=self.gas_price,
            gas_limit=self.gas_limit,
            chain_id=self.chain_id,
            version=self.version,
            data=self.data,
            signature=signature,
        )


@dataclass(frozen=True)
class SignedTransaction:
    """Signed transaction, the payload posted to ``/transactions``."""

    nonce: int
    value: str
    receiver: Address
    sender: Address
    gas_price: int
    gas_limit: int
    chain_id: str
    version: int
    signature: Signature
    data: Optional[str] = None

    def unsigned(self) -> UnsignedTransaction:
        """Signed fields without the signature."""
        return UnsignedTransaction(
            nonce=self.nonce,
            value=self.value,
            receiver=self.receiver,
            sender=self.sender,
            gas_price=self.gas_price,
            gas_limit=self.gas_limit,
            chain_id=self.chain_id,
            version=self.version,
            data=self.data,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with ``signature`` last."""
        payload = self.unsigned().to_dict()
        payload["signature"] = self.signature
        return payload
