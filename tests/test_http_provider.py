import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from mvxkit.config import NetworkConfig
from mvxkit.exceptions import NetworkError, TransportError
from mvxkit.providers import HTTPProvider

from helpers import ALICE


def _app(seen: list) -> web.Application:
    async def account(request: web.Request) -> web.Response:
        seen.append(("GET", request.path, dict(request.query)))
        return web.json_response({"address": request.match_info["address"], "nonce": 3})

    async def transactions(request: web.Request) -> web.Response:
        seen.append(("POST", request.path, await request.text()))
        return web.json_response({"txHash": "ab" * 32})

    async def missing(request: web.Request) -> web.Response:
        return web.Response(status=404, text='{"message":"not found"}')

    async def empty(request: web.Request) -> web.Response:
        return web.Response(status=200, text="")

    app = web.Application()
    app.router.add_get("/accounts/{address}", account)
    app.router.add_post("/transactions", transactions)
    app.router.add_get("/missing", missing)
    app.router.add_get("/empty", empty)
    return app


def test_endpoint_from_config():
    provider = HTTPProvider(config=NetworkConfig(network="devnet"))
    assert provider.endpoint == "https://devnet-api.multiversx.com"
    assert not provider.is_connected

    provider = HTTPProvider(endpoint="http://localhost:7950/")
    assert provider.endpoint == "http://localhost:7950"


@pytest.mark.asyncio
async def test_get_and_post():
    seen: list = []
    async with TestServer(_app(seen)) as server:
        async with HTTPProvider(endpoint=str(server.make_url("/"))) as provider:
            account = await provider.request(f"/accounts/{ALICE}", {"withGuardianInfo": True})
            assert account == {"address": ALICE, "nonce": 3}

            body = {"nonce": 1, "data": "Pz8/", "chainID": "D"}
            result = await provider.post("/transactions", body)
            assert result == {"txHash": "ab" * 32}

            assert await provider.request("/empty") is None

    assert seen[0] == ("GET", f"/accounts/{ALICE}", {"withGuardianInfo": "True"})
    method, path, raw = seen[1]
    assert (method, path) == ("POST", "/transactions")
    assert raw == '{"nonce":1,"data":"Pz8/","chainID":"D"}'
    assert json.loads(raw) == body


@pytest.mark.asyncio
async def test_non_2xx_raises_transport_error():
    async with TestServer(_app([])) as server:
        async with HTTPProvider(endpoint=str(server.make_url("/"))) as provider:
            with pytest.raises(TransportError) as exc_info:
                await provider.request("/missing")

    assert exc_info.value.status == 404
    assert exc_info.value.body == '{"message":"not found"}'
    assert "404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure_raises_network_error():
    async with TestServer(_app([])) as server:
        endpoint = str(server.make_url("/"))

    async with HTTPProvider(endpoint=endpoint, timeout=2) as provider:
        with pytest.raises(NetworkError):
            await provider.request("/missing")
