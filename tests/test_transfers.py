import pytest

from mvxkit.builders.transfers import (
    prepare_contract_call,
    prepare_esdt_transfer,
    prepare_nft_transfer,
)
from mvxkit.exceptions import InvalidArgumentError, MissingParameterError
from mvxkit.types.arguments import AddressArg, BigUInt
from mvxkit.utils.encoding import decode_base64

from helpers import ALICE, BOB, BOB_HEX


def _data(tx) -> str:
    return decode_base64(tx.data)


def test_esdt_transfer_with_zero_amount(devnet):
    tx = prepare_esdt_transfer({
        "sender": ALICE,
        "receiver": BOB,
        "tokenIdentifier": "WEGLD-bd4d79",
        "amount": 0,
        "nonce": 3,
        "gasLimit": 500000,
    }, devnet)
    assert _data(tx) == "ESDTTransfer@5745474c442d626434643739@00"
    assert tx.value == "0"
    assert tx.receiver == BOB
    assert tx.nonce == 3


def test_esdt_transfer_ignores_value(devnet):
    tx = prepare_esdt_transfer({
        "sender": ALICE,
        "receiver": BOB,
        "tokenIdentifier": "WEGLD-bd4d79",
        "amount": BigUInt(10 ** 18),
        "value": "5000",
        "nonce": 3,
        "gasLimit": 500000,
    }, devnet)
    assert tx.value == "0"
    assert _data(tx) == "ESDTTransfer@5745474c442d626434643739@de0b6b3a7640000"


def test_esdt_transfer_errors(devnet):
    base = {
        "sender": ALICE,
        "receiver": BOB,
        "tokenIdentifier": "WEGLD-bd4d79",
        "amount": 1,
        "nonce": 3,
        "gasLimit": 500000,
    }
    with pytest.raises(InvalidArgumentError):
        prepare_esdt_transfer({**base, "amount": -1}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_esdt_transfer({**base, "amount": True}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_esdt_transfer({**base, "amount": "1000"}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_esdt_transfer({**base, "tokenIdentifier": ""}, devnet)
    missing = dict(base)
    del missing["tokenIdentifier"]
    with pytest.raises(MissingParameterError) as exc_info:
        prepare_esdt_transfer(missing, devnet)
    assert exc_info.value.parameter == "tokenIdentifier"


def test_nft_transfer_shape(devnet):
    tx = prepare_nft_transfer({
        "sender": ALICE,
        "receiver": BOB,
        "collection": "NFT-123456",
        "nonce": 10,
        "quantity": 1,
        "txNonce": 42,
        "gasLimit": 1000000,
    }, devnet)
    assert tx.receiver == ALICE
    assert tx.sender == ALICE
    assert tx.nonce == 42
    assert tx.value == "0"
    assert _data(tx) == f"ESDTNFTTransfer@4e46542d313233343536@a@1@{BOB_HEX}"


def test_nft_transfer_large_quantity(devnet):
    tx = prepare_nft_transfer({
        "sender": ALICE,
        "receiver": BOB,
        "collection": "SFT-abcdef",
        "nonce": 0x1234,
        "quantity": BigUInt(10 ** 18),
        "txNonce": 9,
        "gasLimit": 1000000,
    }, devnet)
    fields = _data(tx).split("@")
    assert fields[0] == "ESDTNFTTransfer"
    assert fields[2:] == ["1234", "de0b6b3a7640000", BOB_HEX]
    assert tx.receiver == tx.sender == ALICE
    assert tx.nonce == 9


def test_nft_transfer_zero_nonce(devnet):
    tx = prepare_nft_transfer({
        "sender": ALICE,
        "receiver": BOB,
        "collection": "SFT-abcdef",
        "nonce": 0,
        "quantity": 0,
        "txNonce": 0,
        "gasLimit": 1000000,
    }, devnet)
    fields = _data(tx).split("@")
    assert fields[2:4] == ["00", "00"]
    assert tx.nonce == 0


def test_nft_transfer_errors(devnet):
    base = {
        "sender": ALICE,
        "receiver": BOB,
        "collection": "NFT-123456",
        "nonce": 1,
        "quantity": 1,
        "txNonce": 1,
        "gasLimit": 1000000,
    }
    for bad_nonce in (True, -1, "1", 1.0):
        with pytest.raises(InvalidArgumentError):
            prepare_nft_transfer({**base, "nonce": bad_nonce}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_nft_transfer({**base, "receiver": "erd1broken"}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_nft_transfer({**base, "collection": ""}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_nft_transfer({**base, "quantity": "1"}, devnet)
    missing = dict(base)
    del missing["txNonce"]
    with pytest.raises(MissingParameterError) as exc_info:
        prepare_nft_transfer(missing, devnet)
    assert exc_info.value.parameter == "txNonce"


def test_contract_call(devnet):
    tx = prepare_contract_call({
        "sender": ALICE,
        "contractAddress": BOB,
        "functionName": "stake",
        "arguments": [BigUInt(0), True, AddressArg(ALICE)],
        "value": "1000000000000000000",
        "nonce": 5,
        "gasLimit": 6000000,
        "gasPrice": 1_500_000_000,
    }, devnet)
    assert tx.receiver == BOB
    assert tx.value == "1000000000000000000"
    assert tx.gas_price == 1_500_000_000
    assert _data(tx).startswith("stake@00@01@0139472e")


def test_contract_call_without_arguments(devnet):
    tx = prepare_contract_call({
        "sender": ALICE,
        "contractAddress": BOB,
        "functionName": "claim",
        "arguments": [],
        "value": "0",
        "nonce": 5,
        "gasLimit": 6000000,
    }, devnet)
    assert _data(tx) == "claim"


def test_contract_call_errors(devnet):
    base = {
        "sender": ALICE,
        "contractAddress": BOB,
        "functionName": "stake",
        "arguments": [],
        "value": "0",
        "nonce": 5,
        "gasLimit": 6000000,
    }
    with pytest.raises(InvalidArgumentError):
        prepare_contract_call({**base, "contractAddress": "erd1nope"}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_contract_call({**base, "arguments": "01"}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_contract_call({**base, "functionName": ""}, devnet)
    with pytest.raises(InvalidArgumentError):
        prepare_contract_call({**base, "arguments": [-1]}, devnet)
