"""Key management for mvxkit."""

import logging
import secrets
from dataclasses import dataclass
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey

from ..exceptions import InvalidKeyError, ValidationError
from ..types.common import Address, HexStr, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import encode_address, decode_address, hex_to_bytes
from ..utils.validation import validate_private_key

__all__ = ["PrivateKey", "PublicKey", "KeyMaterial", "generate_key_pair", "CURVE_ORDER"]

logger = logging.getLogger(__name__)

CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles scalar validation, public key derivation and raw digest
    signing through coincurve.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, 64 hex chars, or another PrivateKey

        Raises:
            InvalidKeyError: If key format is invalid or not a valid scalar
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        secret = validate_private_key(key)
        scalar = int.from_bytes(secret, "big")
        if scalar == 0 or scalar >= CURVE_ORDER:
            raise InvalidKeyError("Private key is not a valid secp256k1 scalar")

        self._secret = PrivateKeyBytes(secret)
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def create(cls) -> "PrivateKey":
        """
        Create new random private key.

        Returns:
            New PrivateKey instance
        """
        while True:
            key_bytes = secrets.token_bytes(32)
            try:
                return cls(key_bytes)
            except InvalidKeyError:
                # Out of range draw, try again
                continue

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> HexStr:
        """Get private key as 64 hex chars."""
        return HexStr(self._secret.hex())

    def public_key(self) -> "PublicKey":
        """
        Get corresponding public key.

        Only the X coordinate of the public point is kept.
        """
        point = self._key.public_key.format(compressed=True)
        return PublicKey(point[1:33])

    def sign_der(self, digest: bytes) -> bytes:
        """Sign a 32-byte digest, returning a DER signature."""
        if len(digest) != 32:
            raise ValueError("Digest must be 32 bytes")
        return self._key.sign(digest, hasher=None)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __repr__(self) -> str:
        """String representation."""
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """
    X-only secp256k1 public key, the payload of an ``erd1`` address.
    """

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 32 bytes, 64 hex chars, or another PublicKey

        Raises:
            InvalidKeyError: If key is not 32 bytes
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            return

        if isinstance(key, str):
            try:
                key = hex_to_bytes(key)
            except ValidationError as e:
                raise InvalidKeyError(f"Invalid public key hex: {key}") from e
        if len(key) != 32:
            raise InvalidKeyError(f"Public key must be 32 bytes, got {len(key)}")
        self._point = PublicKeyBytes(bytes(key))

    @classmethod
    def from_address(cls, address: str) -> "PublicKey":
        """Recover public key from an ``erd1`` address."""
        return cls(decode_address(address))

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as bytes."""
        return self._point

    def hex(self) -> HexStr:
        """Get public key as hex string."""
        return HexStr(self._point.hex())

    def address(self) -> Address:
        """Get bech32 address."""
        return encode_address(self._point)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.address()})"


@dataclass(frozen=True)
class KeyMaterial:
    """Freshly generated key pair; the caller owns it."""

    private_key: HexStr
    public_key: HexStr
    address: Address

    def __repr__(self) -> str:
        return f"KeyMaterial(address={self.address})"


def generate_key_pair() -> KeyMaterial:
    """
    Generate a new secp256k1 key pair and its address.

    Returns:
        KeyMaterial with 64-hex private key, 64-hex X-only public key and address
    """
    private_key = PrivateKey.create()
    public_key = private_key.public_key()
    material = KeyMaterial(
        private_key=private_key.hex(),
        public_key=public_key.hex(),
        address=public_key.address(),
    )
    logger.debug(f"Generated key pair for {material.address}")
    return material
