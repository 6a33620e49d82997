"""Smart contract call argument types."""

from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import UnsupportedArgumentTypeError

__all__ = [
    "BigUInt",
    "NativeInt",
    "Text",
    "Bool",
    "AddressArg",
    "Argument",
    "to_argument",
]


@dataclass(frozen=True)
class BigUInt:
    """Arbitrary precision unsigned integer."""
    value: int


@dataclass(frozen=True)
class NativeInt:
    """Machine integer; must not be negative when encoded."""
    value: int


@dataclass(frozen=True)
class Text:
    """
    String argument.

    A text that looks like an ``erd1`` address is sent as its public key.
    """
    value: str


@dataclass(frozen=True)
class Bool:
    """Boolean flag."""
    value: bool


@dataclass(frozen=True)
class AddressArg:
    """Bech32 address sent as its 32-byte public key."""
    value: str


Argument = Union[BigUInt, NativeInt, Text, Bool, AddressArg]


def to_argument(value: Any) -> Argument:
    """
    Lift a plain Python value into a tagged argument.

    Args:
        value: Tagged argument, bool, int or str

    Returns:
        Tagged argument

    Raises:
        UnsupportedArgumentTypeError: For any other runtime type
    """
    if isinstance(value, (BigUInt, NativeInt, Text, Bool, AddressArg)):
        return value
    # bool is a subclass of int
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, int):
        return NativeInt(value)
    if isinstance(value, str):
        return Text(value)
    raise UnsupportedArgumentTypeError(type(value).__name__)
