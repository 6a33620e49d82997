"""Main mvxkit client."""

import logging
from typing import Any, Optional

from .config import NetworkConfig
from .providers import BaseProvider, HTTPProvider
from .modules import AccountModule, TokenModule, TransactionModule

__all__ = ["MultiversX"]

logger = logging.getLogger(__name__)


class MultiversX:
    """
    Main client for interacting with MultiversX.

    Wires one provider and one immutable network config into the
    account, token and transaction modules.
    """

    def __init__(
        self,
        provider: Optional[BaseProvider] = None,
        config: Optional[NetworkConfig] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            provider: Provider instance (default: HTTPProvider for config)
            config: Network snapshot (default: mainnet)
        """
        self._config = config or NetworkConfig()
        self._provider = provider or HTTPProvider(config=self._config)

        self._account = AccountModule(self._provider)
        self._token = TokenModule(self._provider)
        self._tx = TransactionModule(self._provider, self._config)

        logger.info(
            f"Initialized MultiversX client for {self._config.network} "
            f"with {self._provider.__class__.__name__}"
        )

    @property
    def account(self) -> AccountModule:
        """Get account module."""
        return self._account

    @property
    def token(self) -> TokenModule:
        """Get token module."""
        return self._token

    @property
    def tx(self) -> TransactionModule:
        """Get transaction module."""
        return self._tx

    @property
    def provider(self) -> BaseProvider:
        """Get current provider."""
        return self._provider

    @property
    def config(self) -> NetworkConfig:
        """Get network config."""
        return self._config

    async def connect(self) -> None:
        """Connect to provider."""
        await self._provider.connect()
        logger.info("Connected to MultiversX")

    async def disconnect(self) -> None:
        """Disconnect from provider."""
        await self._provider.disconnect()
        logger.info("Disconnected from MultiversX")

    async def __aenter__(self) -> "MultiversX":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()

    @classmethod
    def create_http_client(
        cls,
        config: Optional[NetworkConfig] = None,
        endpoint: Optional[str] = None,
        **kwargs: Any
    ) -> "MultiversX":
        """
        Create client with HTTP provider.

        Args:
            config: Network snapshot
            endpoint: Custom API endpoint
            **kwargs: Additional provider arguments
        """
        config = config or NetworkConfig()
        provider = HTTPProvider(config=config, endpoint=endpoint, **kwargs)
        return cls(provider=provider, config=config)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<MultiversX "
            f"network={self._config.network} "
            f"provider={self._provider.__class__.__name__} "
            f"connected={self._provider.is_connected}>"
        )
