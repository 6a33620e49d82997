"""mvxkit API modules."""

from ..modules.account import AccountModule
from ..modules.token import TokenModule
from ..modules.transaction import TransactionModule

__all__ = [
    "AccountModule",
    "TokenModule",
    "TransactionModule",
]
