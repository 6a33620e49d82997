"""mvxkit exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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
    "NetworkError",
    "TimeoutError",
    "TransportError",
    "TransactionError",
]


class MvxError(Exception):
    """Base exception for all mvxkit errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(MvxError):
    """Raised when validation fails."""
    pass


class MissingParameterError(ValidationError):
    """Raised when a required transaction parameter is absent."""

    def __init__(self, parameter: str, context: str = "transaction") -> None:
        super().__init__(f"Missing {context} parameter: {parameter}")
        self.parameter = parameter


class InvalidArgumentError(ValidationError):
    """Raised when an argument value is malformed."""
    pass


class UnsupportedArgumentTypeError(InvalidArgumentError):
    """Raised when a contract argument has no encoding."""

    def __init__(self, argument_type: str) -> None:
        super().__init__(f"Unsupported argument type encountered: {argument_type}")
        self.argument_type = argument_type


class InvalidAddressError(ValidationError):
    """Raised when an address fails format or checksum checks."""
    pass


class InvalidNetworkError(ValidationError):
    """Raised when the configured network is unknown."""
    pass


class CryptoError(MvxError):
    """Raised when cryptographic operation fails."""
    pass


class InvalidKeyError(CryptoError):
    """Raised when a private key is malformed or out of range."""
    pass


class SigningError(CryptoError):
    """Raised when the signing backend fails."""
    pass


class ProviderError(MvxError):
    """Raised when provider encounters an error."""
    pass


class NetworkError(ProviderError):
    """Raised when network communication fails."""
    pass


class TimeoutError(NetworkError):
    """Raised when operation times out."""
    pass


class TransportError(ProviderError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status: int, body: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"API request failed with status {status}: {body}"
        super().__init__(message, code=status, data=body)
        self.status = status
        self.body = body


class TransactionError(MvxError):
    """Raised when transaction operation fails."""
    pass
