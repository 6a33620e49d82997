"""Transaction module for mvxkit."""

import logging
from typing import Any, Mapping, Optional, Union

from ..api_types import TransactionInfo, TransactionSendResult
from ..builders import (
    prepare_contract_call,
    prepare_esdt_transfer,
    prepare_nft_transfer,
    prepare_transaction,
)
from ..config import NetworkConfig
from ..crypto.keys import PrivateKey
from ..crypto.transaction_signing import sign_transaction
from ..exceptions import ProviderError, TransactionError, ValidationError
from ..providers.base import BaseProvider
from ..types.transaction import SignedTransaction, UnsignedTransaction
from ..utils.validation import is_valid_signature, validate_tx_hash

__all__ = ["TransactionModule"]

logger = logging.getLogger(__name__)

PrivateKeyLike = Union[str, bytes, PrivateKey]


class TransactionModule:
    """
    Transaction-related operations.

    Preparation and signing are local and synchronous; broadcasting and
    status lookups go through the provider.
    """

    def __init__(self, provider: BaseProvider, config: Optional[NetworkConfig] = None) -> None:
        """
        Initialize transaction module.

        Args:
            provider: Provider instance
            config: Network snapshot used for chain id and defaults
        """
        self._provider = provider
        self._config = config or NetworkConfig()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def config(self) -> NetworkConfig:
        """Network snapshot used by this module."""
        return self._config

    def prepare(self, params: Mapping[str, Any]) -> UnsignedTransaction:
        """Prepare a plain transaction."""
        return prepare_transaction(params, self._config)

    def prepare_contract_call(self, params: Mapping[str, Any]) -> UnsignedTransaction:
        """Prepare a smart contract call."""
        return prepare_contract_call(params, self._config)

    def prepare_esdt_transfer(self, params: Mapping[str, Any]) -> UnsignedTransaction:
        """Prepare a fungible ESDT transfer."""
        return prepare_esdt_transfer(params, self._config)

    def prepare_nft_transfer(self, params: Mapping[str, Any]) -> UnsignedTransaction:
        """Prepare an NFT/SFT transfer."""
        return prepare_nft_transfer(params, self._config)

    def sign(self, tx: UnsignedTransaction, private_key: PrivateKeyLike) -> SignedTransaction:
        """Sign a prepared transaction."""
        return sign_transaction(tx, private_key)

    async def send(self, tx: SignedTransaction) -> TransactionSendResult:
        """
        Broadcast a signed transaction.

        Args:
            tx: Signed transaction

        Returns:
            API response, usually holding ``txHash``

        Raises:
            TransactionError: If tx is not signed or the signature is malformed
            TransportError: If the API rejects the transaction
        """
        if not isinstance(tx, SignedTransaction) or not is_valid_signature(tx.signature):
            raise TransactionError("Transaction not signed or invalid signature provided")

        try:
            result = await self._provider.post("/transactions", tx.to_dict())
        except ProviderError as e:
            self._logger.error(f"Failed to send transaction nonce={tx.nonce}: {e}")
            raise

        self._logger.info(f"Broadcast transaction: {result.get('txHash') if result else None}")
        return result

    async def sign_and_send(
        self,
        tx: UnsignedTransaction,
        private_key: PrivateKeyLike,
    ) -> TransactionSendResult:
        """Sign and broadcast in one step."""
        return await self.send(self.sign(tx, private_key))

    async def get_status(self, tx_hash: str) -> TransactionInfo:
        """
        Get transaction details and status.

        Raises:
            TransactionError: If hash format is invalid
            TransportError: If the API rejects the request
        """
        try:
            tx_hash = validate_tx_hash(tx_hash)
        except ValidationError as e:
            raise TransactionError(f"Invalid transaction hash format provided: {tx_hash}") from e

        try:
            return await self._provider.request(f"/transactions/{tx_hash}")
        except ProviderError as e:
            self._logger.error(f"Failed to get transaction {tx_hash}: {e}")
            raise
