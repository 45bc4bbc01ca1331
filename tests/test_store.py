import asyncio

import httpx
import pytest

from sdk.config import ClientSettings
from sdk.errors import NetworkError, ServerError
from sdk.store import ProductStore


def _run_with(handler, call):
    async def scenario():
        async with ProductStore(transport=httpx.MockTransport(handler)) as store:
            return await call(store)
    return asyncio.run(scenario())


def test_timeout_becomes_network_error():
    def handler(request):
        raise httpx.ReadTimeout("stalled", request=request)

    with pytest.raises(NetworkError):
        _run_with(handler, lambda s: s.list_products())


def test_error_status_carries_code():
    with pytest.raises(ServerError) as exc:
        _run_with(lambda r: httpx.Response(404, json={"detail": "product not found"}),
                  lambda s: s.update_product("x", "name", "y"))
    assert exc.value.status_code == 404


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>oops</html>"),
    httpx.Response(200, json={"not": "a list"}),
    httpx.Response(200, json=[{"id": "a", "name": "no price"}]),
])
def test_malformed_list_is_a_server_error(response):
    with pytest.raises(ServerError):
        _run_with(lambda r: response, lambda s: s.list_products())


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_BASE_URL", "http://store.internal:9000/")
    monkeypatch.setenv("CATALOG_TIMEOUT", "2.5")
    settings = ClientSettings()
    assert settings.timeout == 2.5
    store = ProductStore(settings)
    assert store.client.base_url.host == "store.internal"
    assert store.client.base_url.port == 9000
    assert store.client.timeout.read == 2.5
    asyncio.run(store.aclose())
