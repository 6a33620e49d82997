"""Network configuration for mvxkit."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional, Union

from .constants import (
    API_ENDPOINTS,
    CHAIN_IDS,
    DEFAULT_GAS_PRICE,
    DEFAULT_TIMEOUT,
    DEFAULT_TX_VERSION,
    Network,
)
from .exceptions import InvalidNetworkError, ValidationError

__all__ = ["NetworkConfig", "resolve_network", "chain_id_for"]

logger = logging.getLogger(__name__)


def resolve_network(network: Union[Network, str]) -> Network:
    """
    Normalize a network name.

    Args:
        network: Network member or its name (case-insensitive)

    Returns:
        Network member

    Raises:
        InvalidNetworkError: If the value names no supported network
    """
    if isinstance(network, Network):
        return network
    if isinstance(network, str):
        try:
            return Network(network.strip().lower())
        except ValueError:
            pass
    raise InvalidNetworkError(f"Invalid MultiversX network in configuration: {network}")


def chain_id_for(network: Union[Network, str]) -> str:
    """Get chain id token for network."""
    return CHAIN_IDS[resolve_network(network)]


@dataclass(frozen=True)
class NetworkConfig:
    """
    Immutable snapshot of network settings.

    The network is kept as given and only resolved when a chain id or
    endpoint is needed, so a bad value surfaces on the call that uses it.
    """

    network: Union[Network, str] = Network.MAINNET
    api_url: Optional[str] = None
    gas_price: int = DEFAULT_GAS_PRICE
    tx_version: int = DEFAULT_TX_VERSION
    timeout: int = DEFAULT_TIMEOUT

    @property
    def chain_id(self) -> str:
        """Chain id of the configured network."""
        return chain_id_for(self.network)

    @property
    def endpoint(self) -> str:
        """API base URL, falling back to the network default."""
        if self.api_url:
            return self.api_url
        return API_ENDPOINTS[resolve_network(self.network)]

    def with_network(self, network: Union[Network, str]) -> "NetworkConfig":
        """Copy of this config bound to another network."""
        return replace(self, network=network, api_url=None)

    @classmethod
    def from_env(cls, prefix: str = "MVX_") -> "NetworkConfig":
        """
        Build config from environment variables.

        Reads ``NETWORK``, ``API_URL``, ``DEFAULT_GAS_PRICE``,
        ``DEFAULT_TX_VERSION`` and ``TIMEOUT`` under the given prefix.

        Raises:
            ValidationError: If a numeric variable is not an integer
        """
        env = os.environ

        def _int(name: str, default: int) -> int:
            raw = env.get(prefix + name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ValidationError(f"{prefix}{name} must be an integer, got {raw!r}") from e

        config = cls(
            network=env.get(prefix + "NETWORK", Network.MAINNET.value),
            api_url=env.get(prefix + "API_URL") or None,
            gas_price=_int("DEFAULT_GAS_PRICE", DEFAULT_GAS_PRICE),
            tx_version=_int("DEFAULT_TX_VERSION", DEFAULT_TX_VERSION),
            timeout=_int("TIMEOUT", DEFAULT_TIMEOUT),
        )
        logger.debug(f"Loaded config from environment: network={config.network}")
        return config
