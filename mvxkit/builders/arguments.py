"""Smart contract argument encoding."""

from typing import Any, Iterable, List, Sequence

from ..exceptions import InvalidAddressError, InvalidArgumentError
from ..types.arguments import AddressArg, Argument, BigUInt, Bool, NativeInt, Text, to_argument
from ..types.common import HexStr
from ..utils.encoding import address_to_hex, int_to_hex, is_hex, text_to_hex
from ..utils.validation import looks_like_address

__all__ = ["encode_argument", "encode_arguments", "build_call_data_field"]


def encode_argument(value: Any) -> HexStr:
    """
    Encode one contract argument as hex.

    Args:
        value: Tagged argument, or bool/int/str lifted via ``to_argument``

    Returns:
        Hex token; zero magnitudes and False encode as ``"00"``

    Raises:
        InvalidArgumentError: For negative integers or bad addresses
        UnsupportedArgumentTypeError: For values with no encoding
    """
    arg: Argument = to_argument(value)

    if isinstance(arg, Bool):
        return HexStr("01" if arg.value else "00")

    if isinstance(arg, (BigUInt, NativeInt)):
        if arg.value < 0:
            raise InvalidArgumentError(
                f"{type(arg).__name__} argument cannot be negative: {arg.value}"
            )
        return int_to_hex(arg.value)

    if isinstance(arg, AddressArg):
        return _address_hex(arg.value)

    # Text
    if looks_like_address(arg.value):
        return _address_hex(arg.value)
    return text_to_hex(arg.value)


def _address_hex(address: str) -> HexStr:
    try:
        return address_to_hex(address)
    except InvalidAddressError as e:
        raise InvalidArgumentError(f"Invalid address provided as argument: {address} - {e}") from e


def encode_arguments(values: Iterable[Any]) -> List[HexStr]:
    """Encode arguments in order."""
    return [encode_argument(value) for value in values]


def build_call_data_field(function_name: str, encoded_args: Sequence[str]) -> str:
    """
    Build ``function@arg1@arg2...`` call data.

    Args:
        function_name: Contract function name
        encoded_args: Hex tokens from ``encode_arguments``

    Returns:
        Raw (not yet base64) data field

    Raises:
        InvalidArgumentError: If name is empty or an argument is not hex
    """
    if not function_name:
        raise InvalidArgumentError("Function name cannot be empty when building data field")

    for arg in encoded_args:
        if not isinstance(arg, str) or not is_hex(arg):
            raise InvalidArgumentError(f"Encoded arguments must be hexadecimal strings, got {arg!r}")

    return "@".join([function_name, *encoded_args])
