"""Request ID middleware.

Forwards a client-supplied request id (or generates one), binds it to the
logging context for the duration of the call and echoes it on the response.
Client values outside [A-Za-z0-9_-]{1,64} are replaced so they cannot
inject into log lines. Raw ASGI, so streaming responses are not buffered.
"""

import re
import time
import uuid
from typing import Callable

from codelists.shared.telemetry.logging import (
    bind_request_id,
    get_logger,
    reset_request_id,
)

logger = get_logger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def sanitize_request_id(raw: str | None) -> str:
    """Return the trimmed client value when it is safe, else a fresh UUID4."""
    candidate = (raw or "").strip()
    if REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return candidate
    return str(uuid.uuid4())


def _header_value(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap app so every HTTP request runs with a bound request id."""
    wire_name = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = sanitize_request_id(_header_value(scope, wire_name))
        scope.setdefault("state", {})["request_id"] = request_id
        started = time.perf_counter()
        status: int | None = None

        async def send_with_id(message: dict) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                message["headers"] = [
                    *message.get("headers", []),
                    (wire_name, request_id.encode("latin-1")),
                ]
            await send(message)

        token = bind_request_id(request_id)
        try:
            await app(scope, receive, send_with_id)
        finally:
            logger.debug(
                "%s %s -> %s in %.1f ms",
                scope.get("method"),
                scope.get("path"),
                status,
                (time.perf_counter() - started) * 1000,
            )
            reset_request_id(token)

    return asgi_app
