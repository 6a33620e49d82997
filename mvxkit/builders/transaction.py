"""Transaction preparation for mvxkit."""

import logging
from typing import Any, Mapping, Optional

from ..config import NetworkConfig
from ..exceptions import InvalidArgumentError
from ..types.common import Address
from ..types.transaction import UnsignedTransaction
from ..utils.encoding import encode_base64
from ..utils.validation import (
    require_params,
    validate_address,
    validate_uint,
    validate_value,
)

__all__ = ["REQUIRED_FIELDS", "prepare_transaction"]

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("sender", "receiver", "value", "nonce", "gasLimit")

_UINT32_MAX = 2 ** 32 - 1


def prepare_transaction(
    params: Mapping[str, Any],
    config: Optional[NetworkConfig] = None,
) -> UnsignedTransaction:
    """
    Build an unsigned transaction from raw parameters.

    Args:
        params: ``sender``, ``receiver``, ``value``, ``nonce``, ``gasLimit``,
            optional ``data`` (raw string), ``gasPrice`` and ``version``
        config: Network snapshot; mainnet defaults when omitted

    Returns:
        UnsignedTransaction

    Raises:
        MissingParameterError: Naming the first absent required key
        InvalidNetworkError: If the configured network is unknown
        InvalidAddressError: If sender or receiver is invalid
        InvalidArgumentError: If a numeric field is out of range
    """
    require_params(params, REQUIRED_FIELDS)
    config = config or NetworkConfig()

    chain_id = config.chain_id

    gas_price = params.get("gasPrice")
    version = params.get("version")

    data = params.get("data")
    if data is not None and not isinstance(data, str):
        raise InvalidArgumentError(f"data must be a string, got {type(data).__name__}")
    encoded_data = encode_base64(data) if data else None

    tx = UnsignedTransaction(
        nonce=validate_uint("nonce", params["nonce"]),
        value=validate_value(params["value"]),
        receiver=Address(validate_address(params["receiver"], "receiver")),
        sender=Address(validate_address(params["sender"], "sender")),
        gas_price=validate_uint("gasPrice", config.gas_price if gas_price is None else gas_price),
        gas_limit=validate_uint("gasLimit", params["gasLimit"]),
        chain_id=chain_id,
        version=validate_uint("version", config.tx_version if version is None else version, _UINT32_MAX),
        data=encoded_data,
    )

    logger.debug(
        f"Prepared transaction nonce={tx.nonce} chainID={tx.chain_id} "
        f"receiver={tx.receiver}"
    )
    return tx
