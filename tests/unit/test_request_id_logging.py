"""Request id sanitizing and its propagation into log records."""

import logging

import pytest

from codelists.middleware.request_id import RequestIDMiddleware, sanitize_request_id
from codelists.shared.telemetry.logging import (
    NO_REQUEST_ID,
    RequestIdFilter,
    bind_request_id,
    get_request_id,
    reset_request_id,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("codelists.test", logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize("raw", ["abc-123", "  req_1  "])
def test_safe_ids_are_kept(raw: str) -> None:
    assert sanitize_request_id(raw) == raw.strip()


@pytest.mark.parametrize("raw", [None, "", "bad id", "x\nforged log line", "a" * 65])
def test_unsafe_ids_are_replaced(raw: str | None) -> None:
    replaced = sanitize_request_id(raw)
    assert replaced != raw
    assert len(replaced) == 36


def test_filter_uses_bound_id() -> None:
    record = _record()
    token = bind_request_id("req-42")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        reset_request_id(token)

    assert record.request_id == "req-42"
    assert get_request_id() is None


def test_filter_outside_request() -> None:
    record = _record()
    RequestIdFilter().filter(record)
    assert record.request_id == NO_REQUEST_ID


async def test_middleware_binds_and_echoes_id() -> None:
    seen: list[str | None] = []
    sent: list[dict] = []

    async def inner(scope, receive, send):
        seen.append(get_request_id())
        await send({"type": "http.response.start", "status": 204, "headers": []})
        await send({"type": "http.response.body", "body": b""})

    async def send(message):
        sent.append(message)

    middleware = RequestIDMiddleware(inner)
    scope = {"type": "http", "method": "GET", "path": "/", "headers": [(b"x-request-id", b"abc")]}
    await middleware(scope, None, send)

    assert seen == ["abc"]
    assert (b"x-request-id", b"abc") in sent[0]["headers"]
    assert scope["state"]["request_id"] == "abc"
    assert get_request_id() is None
