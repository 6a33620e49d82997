"""
mvxkit

Key derivation, transaction building and signing, and a small async
client for the MultiversX REST API.
"""

from typing import Any, Optional, Union

from .client import MultiversX
from .config import NetworkConfig
from .constants import Network
from .exceptions import (
    MvxError,
    ValidationError,
    MissingParameterError,
    InvalidArgumentError,
    UnsupportedArgumentTypeError,
    InvalidAddressError,
    InvalidNetworkError,
    CryptoError,
    InvalidKeyError,
    SigningError,
    ProviderError,
    TransportError,
    TransactionError,
)
from .providers import HTTPProvider
from .crypto import PrivateKey, PublicKey, KeyMaterial, generate_key_pair, sign_transaction
from .builders import (
    encode_arguments,
    build_call_data_field,
    prepare_transaction,
    prepare_contract_call,
    prepare_esdt_transfer,
    prepare_nft_transfer,
)
from .types import (
    Address,
    BigUInt,
    NativeInt,
    Text,
    Bool,
    AddressArg,
    UnsignedTransaction,
    SignedTransaction,
)

__version__ = "1.0.0"

__all__ = [
    # Main client
    "MultiversX",
    "connect",

    # Config
    "Network",
    "NetworkConfig",

    # Providers
    "HTTPProvider",

    # Exceptions
    "MvxError",
    "ValidationError",
    "MissingParameterError",
    "InvalidArgumentError",
    "UnsupportedArgumentTypeError",
    "InvalidAddressError",
    "InvalidNetworkError",
    "CryptoError",
    "InvalidKeyError",
    "SigningError",
    "ProviderError",
    "TransportError",
    "TransactionError",

    # Crypto
    "PrivateKey",
    "PublicKey",
    "KeyMaterial",
    "generate_key_pair",
    "sign_transaction",

    # Builders
    "encode_arguments",
    "build_call_data_field",
    "prepare_transaction",
    "prepare_contract_call",
    "prepare_esdt_transfer",
    "prepare_nft_transfer",

    # Types
    "Address",
    "BigUInt",
    "NativeInt",
    "Text",
    "Bool",
    "AddressArg",
    "UnsignedTransaction",
    "SignedTransaction",
]


def connect(
    network: Union[Network, str] = Network.MAINNET,
    config: Optional[NetworkConfig] = None,
    **kwargs: Any
) -> MultiversX:
    """
    Create a client for a MultiversX network.

    Args:
        network: Network to use when no config is given
        config: Full network snapshot (overrides network)
        **kwargs: Additional HTTPProvider arguments

    Returns:
        MultiversX client

    Example:
        >>> async with mvxkit.connect(Network.DEVNET) as client:
        ...     account = await client.account.get(address)
    """
    config = config or NetworkConfig(network=network)
    return MultiversX.create_http_client(config=config, **kwargs)
