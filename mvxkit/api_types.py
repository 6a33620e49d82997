"""API response type definitions for mvxkit."""

from typing import Any, Optional, TypedDict

__all__ = [
    "AccountInfo",
    "TokenProperties",
    "AccountToken",
    "TransactionSendResult",
    "TransactionInfo",
]


class AccountInfo(TypedDict, total=False):
    """Account state from ``/accounts/{address}``."""
    address: str
    nonce: int
    balance: str
    username: Optional[str]
    shard: int
    txCount: int


class TokenProperties(TypedDict, total=False):
    """Token properties from ``/tokens/{identifier}``."""
    identifier: str
    name: str
    ticker: str
    owner: str
    decimals: int
    isPaused: bool
    canUpgrade: bool
    canMint: bool
    canBurn: bool


class AccountToken(TypedDict, total=False):
    """Token held by an account."""
    identifier: str
    name: str
    ticker: str
    balance: str
    decimals: int
    nonce: int
    attributes: Optional[str]


class TransactionSendResult(TypedDict, total=False):
    """Response of ``POST /transactions``."""
    txHash: str
    receiver: str
    sender: str
    status: str


class TransactionInfo(TypedDict, total=False):
    """Transaction details from ``/transactions/{hash}``."""
    txHash: str
    nonce: int
    value: str
    receiver: str
    sender: str
    gasPrice: int
    gasLimit: int
    gasUsed: int
    data: Optional[str]
    status: str
    timestamp: int
    function: Optional[str]
    operations: list[dict[str, Any]]
