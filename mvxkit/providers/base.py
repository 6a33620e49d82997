"""Base provider interface for mvxkit."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional
import logging

__all__ = ["BaseProvider"]

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Abstract base provider for MultiversX API connections.

    Concrete providers answer GET and POST calls with decoded JSON and
    raise ``TransportError`` for any non-2xx response.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def request(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        GET a path.

        Args:
            path: API path, e.g. ``/accounts/erd1...``
            params: Optional query parameters

        Returns:
            Decoded JSON response

        Raises:
            TransportError: On non-2xx response
            NetworkError: If the request cannot be completed
        """
        raise NotImplementedError

    @abstractmethod
    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        """
        POST a JSON body to a path.

        Raises:
            TransportError: On non-2xx response
            NetworkError: If the request cannot be completed
        """
        raise NotImplementedError

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying connection."""
        raise NotImplementedError

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the underlying connection."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if provider is connected."""
        raise NotImplementedError

    async def __aenter__(self) -> "BaseProvider":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()

    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}()"
