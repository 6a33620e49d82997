"""Account module for mvxkit."""

import logging
from collections.abc import Mapping

from ..api_types import AccountInfo
from ..crypto.keys import KeyMaterial, generate_key_pair
from ..exceptions import ProviderError
from ..providers.base import BaseProvider
from ..utils.validation import is_valid_address, validate_address

__all__ = ["AccountModule"]

logger = logging.getLogger(__name__)


class AccountModule:
    """
    Account-related operations.

    Key generation and address checks are local; state lookups go
    through the provider.
    """

    def __init__(self, provider: BaseProvider) -> None:
        """
        Initialize account module.

        Args:
            provider: Provider instance
        """
        self._provider = provider
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def create_key_pair() -> KeyMaterial:
        """Generate a new key pair and address."""
        return generate_key_pair()

    @staticmethod
    def is_valid_address(address: str) -> bool:
        """Check address format and checksum."""
        return is_valid_address(address)

    async def get(self, address: str) -> AccountInfo:
        """
        Get account state.

        Args:
            address: Bech32 address

        Returns:
            Account info (nonce, balance, ...)

        Raises:
            InvalidAddressError: If address is invalid
            TransportError: If the API rejects the request
            ProviderError: If the response is not an account object
        """
        address = validate_address(address)

        try:
            account = await self._provider.request(f"/accounts/{address}")
        except ProviderError as e:
            self._logger.error(f"Failed to get account {address}: {e}")
            raise

        if not isinstance(account, Mapping):
            raise ProviderError(f"Unexpected account response for {address}: {account!r}")
        return account

    async def get_nonce(self, address: str) -> int:
        """Get account nonce."""
        account = await self.get(address)
        return int(account.get("nonce", 0))

    async def get_balance(self, address: str) -> int:
        """Get EGLD balance in atomic units."""
        account = await self.get(address)
        return int(account.get("balance", "0"))
