"""Shared address vectors and an in-memory provider for the test suite."""

from typing import Any, Mapping, Optional

from mvxkit.providers.base import BaseProvider

ALICE = "erd1qyu5wthldzr8wx5c9ucg8kjagg0jfs53s8nr3zpz3hypefsdd8ssycr6th"
ALICE_HEX = "0139472eff6886771a982f3083da5d421f24c29181e63888228dc81ca60d69e1"
BOB = "erd1spyavw0956vq68xj8y4tenjpq2wd5a9p2c6j8gsz7ztyrnpxrruqzu66jx"
BOB_HEX = "8049d639e5a6980d1cd2392abcce41029cda74a1563523a202f09641cc2618f8"

SECRET = "11" * 32


class FakeProvider(BaseProvider):
    def __init__(self, responses: Optional[dict] = None, error: Optional[Exception] = None) -> None:
        super().__init__()
        self.responses = responses or {}
        self.error = error
        self.calls: list = []
        self._connected = False

    async def request(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        self.calls.append(("GET", path, params))
        if self.error:
            raise self.error
        return self.responses.get(path)

    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        self.calls.append(("POST", path, body))
        if self.error:
            raise self.error
        return self.responses.get(path)

    async def connect(self) -> None:
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
