"""Pytest configuration and shared fixtures."""

import asyncio
import json
from collections.abc import AsyncGenerator, Callable
from dataclasses import dataclass, field

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from coinspaid.client.rest import CoinspaidClient

API_KEY = "key"
API_SECRET = "secret"

OK_RESPONSE = {
    "data": {
        "id": 1,
        "currency": "EUR",
        "convert_to": "EUR",
        "address": "12983h13ro1hrt24it432t",
        "tag": "tag-123",
        "foreign_id": "user-id:2048",
    }
}

INVALID_AUTH_RESPONSE = {"error": "Bad key header", "code": "bad_header_key"}

BAD_REQUEST_RESPONSE = {"errors": {"foreign_id": "The foreign id field is required."}}

WITHDRAW_CRYPTO_OK_RESPONSE = {
    "data": {
        "id": 1,
        "foreign_id": "user-id:2048",
        "type": "withdrawal",
        "status": "processing",
        "amount": "0.01000000",
        "sender_amount": "0.01000000",
        "sender_currency": "ETH",
        "receiver_amount": "0.01000000",
        "receiver_currency": "ETH",
    }
}


@dataclass
class RecordedRequest:
    """A request as received by the fake API."""

    path: str
    headers: dict[str, str]
    body: bytes


@dataclass
class FakeCoinspaid:
    """Canned-response stand-in for the CoinsPaid API."""

    status: int = 200
    body: bytes = json.dumps(OK_RESPONSE).encode()
    content_type: str = "application/json"
    delay: float = 0.0
    # Optional per-request responder: request JSON -> (status, response JSON)
    responder: Callable[[dict], tuple[int, dict]] | None = None
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, status: int, payload: dict | str | bytes) -> None:
        """Set the response returned for every following request."""
        self.status = status
        if isinstance(payload, dict):
            self.body = json.dumps(payload).encode()
            self.content_type = "application/json"
        else:
            self.body = payload.encode() if isinstance(payload, str) else payload
            self.content_type = "text/html"

    async def handle(self, request: web.Request) -> web.Response:
        raw = await request.read()
        self.requests.append(
            RecordedRequest(path=request.path, headers=dict(request.headers), body=raw)
        )

        if self.delay:
            await asyncio.sleep(self.delay)

        if self.responder is not None:
            status, payload = self.responder(json.loads(raw))
            return web.json_response(payload, status=status)

        return web.Response(
            status=self.status, body=self.body, content_type=self.content_type
        )


@pytest.fixture
def fake_api() -> FakeCoinspaid:
    """Create a fake API answering with a successful address envelope."""
    return FakeCoinspaid()


@pytest.fixture
async def api_server(fake_api: FakeCoinspaid) -> AsyncGenerator[TestServer, None]:
    """Serve the fake API under /api/v2/ on a local port."""
    app = web.Application()
    app.router.add_post("/api/v2/{tail:.*}", fake_api.handle)

    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def base_url(api_server: TestServer) -> str:
    """Base endpoint of the local fake API."""
    return str(api_server.make_url("/api/v2/"))


@pytest.fixture
async def client(base_url: str) -> AsyncGenerator[CoinspaidClient, None]:
    """Create a client pointed at the fake API."""
    client = CoinspaidClient(API_KEY, API_SECRET, base_url)
    yield client
    await client.close()
