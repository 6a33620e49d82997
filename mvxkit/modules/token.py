"""Token module for mvxkit."""

import logging
from typing import Any, Dict, List, Optional

from ..api_types import AccountToken, TokenProperties
from ..exceptions import InvalidArgumentError, ProviderError
from ..providers.base import BaseProvider
from ..utils.validation import validate_address, validate_token_identifier

__all__ = ["TokenModule"]

logger = logging.getLogger(__name__)


class TokenModule:
    """ESDT, SFT and NFT lookups."""

    def __init__(self, provider: BaseProvider) -> None:
        self._provider = provider
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def get_properties(self, identifier: str) -> TokenProperties:
        """
        Get token properties.

        Args:
            identifier: Token identifier, e.g. ``WEGLD-bd4d79``

        Returns:
            Token properties

        Raises:
            InvalidArgumentError: If identifier is empty
            TransportError: If the API rejects the request
        """
        identifier = validate_token_identifier(identifier)

        try:
            return await self._provider.request(f"/tokens/{identifier}")
        except ProviderError as e:
            self._logger.error(f"Failed to get token {identifier}: {e}")
            raise

    async def get_balance(self, address: str, identifier: str) -> AccountToken:
        """
        Get token details, including balance, for an account.

        Raises:
            InvalidArgumentError: If identifier is empty
            InvalidAddressError: If address is invalid
            TransportError: If the API rejects the request
        """
        identifier = validate_token_identifier(identifier)
        address = validate_address(address)

        try:
            return await self._provider.request(f"/accounts/{address}/tokens/{identifier}")
        except ProviderError as e:
            self._logger.error(f"Failed to get {identifier} balance of {address}: {e}")
            raise

    async def list_tokens(
        self,
        address: str,
        from_: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[AccountToken]:
        """
        List tokens held by an account.

        Args:
            address: Bech32 address
            from_: Pagination start index
            size: Page size

        Returns:
            Token list
        """
        address = validate_address(address)

        params: Dict[str, Any] = {}
        if from_ is not None:
            if from_ < 0:
                raise InvalidArgumentError(f"from must not be negative: {from_}")
            params["from"] = from_
        if size is not None:
            if size < 0:
                raise InvalidArgumentError(f"size must not be negative: {size}")
            params["size"] = size

        try:
            return await self._provider.request(f"/accounts/{address}/tokens", params or None)
        except ProviderError as e:
            self._logger.error(f"Failed to list tokens of {address}: {e}")
            raise
