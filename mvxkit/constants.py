"""MultiversX network constants."""

from enum import Enum

__all__ = [
    "Network",
    "CHAIN_IDS",
    "API_ENDPOINTS",
    "ADDRESS_HRP",
    "ADDRESS_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "DEFAULT_GAS_PRICE",
    "DEFAULT_TX_VERSION",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "EGLD_DECIMALS",
    "ESDT_TRANSFER",
    "ESDT_NFT_TRANSFER",
]


class Network(str, Enum):
    """Supported MultiversX networks."""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"


# Chain id token bound into every transaction
CHAIN_IDS = {
    Network.MAINNET: "1",
    Network.TESTNET: "T",
    Network.DEVNET: "D",
}

API_ENDPOINTS = {
    Network.MAINNET: "https://api.multiversx.com",
    Network.TESTNET: "https://testnet-api.multiversx.com",
    Network.DEVNET: "https://devnet-api.multiversx.com",
}

# Address format
ADDRESS_HRP = "erd"
ADDRESS_LENGTH = 62
PUBLIC_KEY_LENGTH = 32

# Transaction defaults
DEFAULT_GAS_PRICE = 1_000_000_000
DEFAULT_TX_VERSION = 1

# HTTP
DEFAULT_TIMEOUT = 30
USER_AGENT = "mvxkit/1.0.0"

# Denomination
EGLD_DECIMALS = 18

# Built-in transfer functions
ESDT_TRANSFER = "ESDTTransfer"
ESDT_NFT_TRANSFER = "ESDTNFTTransfer"
