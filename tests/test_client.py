"""
Conversion Client Tests
=======================
Request/response contract with the engine, using httpx.MockTransport.
"""

import asyncio
import json

import httpx
import pytest

from link2clash.engine import GENERIC_FAILURE_MESSAGE, ConversionClient
from link2clash.errors import EngineError, ErrorCode, TransportError
from link2clash.models import ConversionError, ConversionRequest

ENDPOINT = "http://engine.test/api/convert"


def _convert(handler, raw: str = "vmess://x"):
    async def run():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as http:
            return await ConversionClient(http, ENDPOINT).convert(ConversionRequest(raw))

    return asyncio.run(run())


def test_success_round_trip():
    seen = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["payload"] = json.loads(request.content.decode())
        return httpx.Response(
            200,
            json={
                "proxy_lines": "- name: x",
                "group_lines": "- x",
                "errors": [{"index": 2, "message": "unrecognized scheme", "value": "bad-line"}],
            },
        )

    response = _convert(handler, "vmess://x\nbad-line")

    assert seen == {
        "method": "POST",
        "url": ENDPOINT,
        "payload": {"input": "vmess://x\nbad-line"},
    }
    assert response.proxy_lines == "- name: x"
    assert response.group_lines == "- x"
    assert response.errors == (ConversionError(2, "unrecognized scheme", "bad-line"),)


def test_missing_fields_default_to_empty():
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errors": None})

    response = _convert(handler)
    assert response.proxy_lines == ""
    assert response.group_lines == ""
    assert response.errors == ()


def test_engine_error_message_is_surfaced():
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "too many items (max 500)"})

    with pytest.raises(EngineError) as exc:
        _convert(handler)
    assert exc.value.message == "too many items (max 500)"
    assert exc.value.status_code == 400
    assert exc.value.code == ErrorCode.E002


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="internal error"),
        httpx.Response(502, json={"error": ""}),
        httpx.Response(405, json={"detail": "method not allowed"}),
        httpx.Response(400, json=["invalid JSON body"]),
    ],
)
def test_undecodable_failure_falls_back(response):
    async def handler(_: httpx.Request) -> httpx.Response:
        return response

    with pytest.raises(EngineError) as exc:
        _convert(handler)
    assert exc.value.message == GENERIC_FAILURE_MESSAGE


def test_connection_failure_is_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc:
        _convert(handler)
    assert exc.value.code == ErrorCode.E001


def test_malformed_success_body_is_transport_error():
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy login</html>")

    with pytest.raises(TransportError):
        _convert(handler)


def test_timeout_is_passed_through():
    seen = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        seen["timeout"] = request.extensions.get("timeout")
        return httpx.Response(200, json={})

    async def run():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as http:
            await ConversionClient(http, ENDPOINT, timeout=7.5).convert(ConversionRequest(""))

    asyncio.run(run())
    assert seen["timeout"]["read"] == 7.5


@pytest.mark.parametrize(
    "body",
    [
        {"proxy_lines": ["- name: x"], "group_lines": "- x"},
        {"proxy_lines": 5, "group_lines": 7},
        {"proxy_lines": "- name: x", "group_lines": {"x": 1}},
        {"proxy_lines": "- name: x", "group_lines": "- x", "errors": "bad"},
    ],
)
def test_mistyped_success_fields_are_transport_error(body):
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(TransportError):
        _convert(handler)
