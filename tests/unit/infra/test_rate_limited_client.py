import json

import httpx

from ledgerview.infra.http.rate_limited_client import JSON_HEADERS, RateLimitedClient


def _client_with(handler) -> RateLimitedClient:
    client = RateLimitedClient(rate_per_second=1000)
    client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler), headers=JSON_HEADERS)
    return client


async def test_post_sends_json():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": 3})

    async with _client_with(handler) as client:
        resp = await client.post("http://node.test", json={"method": "sui_getTotalTransactionNumber"})

    assert resp.json()["result"] == 3
    assert seen[0].method == "POST"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {"method": "sui_getTotalTransactionNumber"}


async def test_close():
    client = _client_with(lambda request: httpx.Response(200))
    assert not client.is_closed
    await client.close()
    assert client.is_closed
