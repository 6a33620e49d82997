"""Contract call, ESDT and NFT/SFT transfer builders."""

import logging
from typing import Any, Mapping, Optional

from ..builders.arguments import build_call_data_field, encode_arguments
from ..builders.transaction import prepare_transaction
from ..config import NetworkConfig
from ..constants import ESDT_NFT_TRANSFER, ESDT_TRANSFER
from ..exceptions import InvalidAddressError, InvalidArgumentError
from ..types.arguments import BigUInt
from ..types.transaction import UnsignedTransaction
from ..utils.encoding import address_to_hex, int_to_hex, text_to_hex
from ..utils.validation import (
    require_params,
    validate_address,
    validate_token_identifier,
)

__all__ = [
    "prepare_contract_call",
    "prepare_esdt_transfer",
    "prepare_nft_transfer",
]

logger = logging.getLogger(__name__)


def _big_uint(name: str, value: Any) -> int:
    """Unwrap an unsigned big integer parameter."""
    if isinstance(value, BigUInt):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an unsigned integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"{name} cannot be negative: {value}")
    return value


def prepare_contract_call(
    params: Mapping[str, Any],
    config: Optional[NetworkConfig] = None,
) -> UnsignedTransaction:
    """
    Prepare a smart contract call.

    Args:
        params: ``sender``, ``contractAddress``, ``functionName``,
            ``arguments`` (list), ``value``, ``nonce``, ``gasLimit``
        config: Network snapshot

    Returns:
        UnsignedTransaction addressed to the contract

    Raises:
        MissingParameterError: Naming the first absent key
        InvalidArgumentError: For a bad contract address, name or argument
    """
    require_params(
        params,
        ("sender", "contractAddress", "functionName", "arguments", "value", "nonce", "gasLimit"),
        "smart contract call",
    )

    arguments = params["arguments"]
    if not isinstance(arguments, (list, tuple)):
        raise InvalidArgumentError("'arguments' must be a list")
    function_name = params["functionName"]
    if not isinstance(function_name, str) or not function_name:
        raise InvalidArgumentError("Function name cannot be empty")
    try:
        contract = validate_address(params["contractAddress"], "contractAddress")
    except InvalidAddressError as e:
        raise InvalidArgumentError(f"Invalid contract address format: {e}") from e

    data = build_call_data_field(function_name, encode_arguments(arguments))
    logger.debug(f"Contract call data: {data}")

    return prepare_transaction(
        {
            "sender": params["sender"],
            "receiver": contract,
            "value": params["value"],
            "nonce": params["nonce"],
            "gasLimit": params["gasLimit"],
            "gasPrice": params.get("gasPrice"),
            "version": params.get("version"),
            "data": data,
        },
        config,
    )


def prepare_esdt_transfer(
    params: Mapping[str, Any],
    config: Optional[NetworkConfig] = None,
) -> UnsignedTransaction:
    """
    Prepare a fungible ESDT transfer.

    The transaction value is always ``"0"``; the tokens move through
    ``ESDTTransfer@<token hex>@<amount hex>``.

    Args:
        params: ``sender``, ``receiver``, ``tokenIdentifier``, ``amount``,
            ``nonce``, ``gasLimit``. ``amount`` is in atomic units and must be
            an ``int`` or ``BigUInt``; decimal strings are rejected
        config: Network snapshot

    Returns:
        UnsignedTransaction

    Raises:
        MissingParameterError: Naming the first absent key
        InvalidArgumentError: For an empty token or invalid amount
    """
    require_params(
        params,
        ("sender", "receiver", "tokenIdentifier", "amount", "nonce", "gasLimit"),
        "ESDT transfer",
    )

    amount = _big_uint("Amount", params["amount"])
    token = validate_token_identifier(params["tokenIdentifier"])

    data = f"{ESDT_TRANSFER}@{text_to_hex(token)}@{int_to_hex(amount)}"

    return prepare_transaction(
        {
            "sender": params["sender"],
            "receiver": params["receiver"],
            "value": "0",
            "nonce": params["nonce"],
            "gasLimit": params["gasLimit"],
            "gasPrice": params.get("gasPrice"),
            "version": params.get("version"),
            "data": data,
        },
        config,
    )


def prepare_nft_transfer(
    params: Mapping[str, Any],
    config: Optional[NetworkConfig] = None,
) -> UnsignedTransaction:
    """
    Prepare an NFT/SFT transfer.

    The transaction is sent to the sender itself with value ``"0"``;
    the real recipient travels inside ``ESDTNFTTransfer@...``. ``nonce``
    is the token nonce within the collection and ``txNonce`` the account
    nonce of the transaction.

    Args:
        params: ``sender``, ``receiver``, ``collection``, ``nonce``,
            ``quantity``, ``txNonce``, ``gasLimit``. ``quantity`` must be an
            ``int`` or ``BigUInt``; decimal strings are rejected
        config: Network snapshot

    Returns:
        UnsignedTransaction

    Raises:
        MissingParameterError: Naming the first absent key
        InvalidArgumentError: For an empty collection, bad nonce, quantity or receiver
    """
    require_params(
        params,
        ("sender", "receiver", "collection", "nonce", "quantity", "txNonce", "gasLimit"),
        "NFT/SFT transfer",
    )

    quantity = _big_uint("Quantity", params["quantity"])
    token_nonce = params["nonce"]
    if isinstance(token_nonce, bool) or not isinstance(token_nonce, int) or token_nonce < 0:
        raise InvalidArgumentError("Nonce must be a non-negative integer for NFT/SFT")
    collection = validate_token_identifier(params["collection"], "Collection identifier")

    try:
        receiver_hex = address_to_hex(params["receiver"])
    except InvalidAddressError as e:
        raise InvalidArgumentError(f"Invalid NFT/SFT receiver: {e}") from e

    data = "@".join([
        ESDT_NFT_TRANSFER,
        text_to_hex(collection),
        int_to_hex(token_nonce),
        int_to_hex(quantity),
        receiver_hex,
    ])

    return prepare_transaction(
        {
            "sender": params["sender"],
            "receiver": params["sender"],
            "value": "0",
            "nonce": params["txNonce"],
            "gasLimit": params["gasLimit"],
            "gasPrice": params.get("gasPrice"),
            "version": params.get("version"),
            "data": data,
        },
        config,
    )
