"""Tests for the raw ASGI middlewares."""

import asyncio
import json

from tsdb_platform.middleware import RequestIDMiddleware, TimeoutMiddleware
from tsdb_platform.middleware.request_id import request_id_var


def _scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {"type": "http", "method": "GET", "path": "/x", "headers": headers or []}


async def _noop_receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


async def test_timeout_sends_504() -> None:
    async def slow_app(scope, receive, send) -> None:
        await asyncio.sleep(1)

    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    await TimeoutMiddleware(slow_app, timeout_seconds=0.01)(_scope(), _noop_receive, send)

    assert sent[0]["status"] == 504
    assert json.loads(sent[1]["body"])["error"] == "GATEWAY_TIMEOUT"


async def test_timeout_after_response_started_sends_nothing_more() -> None:
    async def stalling_app(scope, receive, send) -> None:
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await asyncio.sleep(1)

    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    await TimeoutMiddleware(stalling_app, timeout_seconds=0.01)(_scope(), _noop_receive, send)

    assert [m["type"] for m in sent] == ["http.response.start"]
    assert sent[0]["status"] == 200


async def test_request_id_visible_to_app_and_logs() -> None:
    seen: dict[str, str] = {}

    async def app(scope, receive, send) -> None:
        seen["state"] = scope["state"]["request_id"]
        seen["var"] = request_id_var.get()
        await send({"type": "http.response.start", "status": 200, "headers": []})

    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    middleware = RequestIDMiddleware(app, header_name="X-Request-ID")
    await middleware(_scope([(b"x-request-id", b"req-1")]), _noop_receive, send)

    assert seen == {"state": "req-1", "var": "req-1"}
    assert (b"X-Request-ID", b"req-1") in sent[0]["headers"]
    assert request_id_var.get() == "-"
