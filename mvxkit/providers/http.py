"""HTTP provider implementation for mvxkit."""

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

import aiohttp
from aiohttp import ClientTimeout, ClientSession, ClientResponse

from ..config import NetworkConfig
from ..constants import USER_AGENT
from ..exceptions import (
    ProviderError,
    NetworkError,
    TimeoutError,
    TransportError,
)
from ..providers.base import BaseProvider
from ..utils.encoding import canonical_json

__all__ = ["HTTPProvider"]

logger = logging.getLogger(__name__)


class HTTPProvider(BaseProvider):
    """
    HTTP provider for the MultiversX REST API.

    Requests are made once; retrying is left to the caller.
    """

    def __init__(
        self,
        config: Optional[NetworkConfig] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[ClientSession] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """
        Initialize HTTP provider.

        Args:
            config: Network snapshot supplying endpoint and timeout
            endpoint: Custom API endpoint (overrides config)
            timeout: Request timeout in seconds (overrides config)
            session: Existing aiohttp session to use
            headers: Additional headers for requests
        """
        super().__init__()
        self.config = config or NetworkConfig()

        self.endpoint = (endpoint or self.config.endpoint).rstrip("/")
        self.timeout = ClientTimeout(total=timeout or self.config.timeout)

        self.headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            **(headers or {}),
        }

        self._session = session
        self._owns_session = session is None
        self._connected = False

    async def connect(self) -> None:
        """Initialize HTTP session."""
        if self._session is None:
            self._session = ClientSession(
                timeout=self.timeout,
                headers=self.headers,
            )

        self._connected = True
        self._logger.info(f"Connected to {self.endpoint}")

    async def disconnect(self) -> None:
        """Close HTTP session."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None

        self._connected = False
        self._logger.info("Disconnected from provider")

    @property
    def is_connected(self) -> bool:
        """Check if provider is connected."""
        return (
            self._connected
            and self._session is not None
            and not self._session.closed
        )

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.endpoint}{path}"

    async def request(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        GET a path.

        Args:
            path: API path
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            TransportError: On non-2xx response
            NetworkError: If the request fails
            TimeoutError: If the request times out
        """
        if not self.is_connected:
            await self.connect()

        url = self._url(path)
        query = {key: str(value) for key, value in (params or {}).items()}
        self._logger.debug(f"Request: GET {url} params={query}")

        try:
            async with self._session.get(url, params=query or None) as response:
                return await self._handle_response("GET", path, response)
        except asyncio.TimeoutError as e:
            raise TimeoutError(f"GET {path} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error: {e}") from e

    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        """
        POST a JSON body.

        The body is serialized with the compact, slash-preserving JSON
        used for transaction signing.

        Raises:
            TransportError: On non-2xx response
            NetworkError: If the request fails
            TimeoutError: If the request times out
        """
        if not self.is_connected:
            await self.connect()

        url = self._url(path)
        self._logger.debug(f"Request: POST {url}")

        try:
            async with self._session.post(
                url,
                data=canonical_json(body),
                headers={"Content-Type": "application/json"},
            ) as response:
                return await self._handle_response("POST", path, response)
        except asyncio.TimeoutError as e:
            raise TimeoutError(f"POST {path} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"POST request failed: {e}") from e

    async def _handle_response(
        self,
        method: str,
        path: str,
        response: ClientResponse,
    ) -> Any:
        """Map status to errors and decode JSON."""
        text = await response.text()
        self._logger.debug(f"Response: {response.status}")

        if not 200 <= response.status < 300:
            raise TransportError(
                response.status,
                text,
                f"API {method} request to {path} failed with status {response.status}: {text}",
            )

        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ProviderError(f"Invalid JSON response: {e}") from e

    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}(endpoint={self.endpoint})"
