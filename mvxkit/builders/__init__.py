"""Transaction and call data builders for mvxkit."""

from ..builders.arguments import encode_argument, encode_arguments, build_call_data_field
from ..builders.transaction import REQUIRED_FIELDS, prepare_transaction
from ..builders.transfers import (
    prepare_contract_call,
    prepare_esdt_transfer,
    prepare_nft_transfer,
)

__all__ = [
    # Arguments
    "encode_argument",
    "encode_arguments",
    "build_call_data_field",

    # Transactions
    "REQUIRED_FIELDS",
    "prepare_transaction",
    "prepare_contract_call",
    "prepare_esdt_transfer",
    "prepare_nft_transfer",
]
