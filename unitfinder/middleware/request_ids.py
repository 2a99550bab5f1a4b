"""Request ID and correlation ID middleware.

Generates or forwards X-Request-ID / X-Correlation-ID and sets them on the
response. Client-provided request IDs are sanitized (length + character set)
so they are safe to log. Raw ASGI (no BaseHTTPMiddleware) so streamed
downloads are not buffered.
"""

import re
import uuid
from typing import Callable

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _sanitize_id(raw: str | None) -> str | None:
    """Return the stripped value if it matches the allowed pattern, else None."""
    if not raw or not REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return None
    return raw.strip()


def _with_response_header(send: Callable, name: str, value: str) -> Callable:
    """Wrap send so http.response.start carries name: value."""

    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize_id(_get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        await app(scope, receive, _with_response_header(send, header_name, request_id))

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Forward the correlation ID; fall back to the request ID set on scope state. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (
            _sanitize_id(_get_header(scope, header_name))
            or scope.get("state", {}).get("request_id")
            or str(uuid.uuid4())
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        await app(
            scope, receive, _with_response_header(send, header_name, correlation_id)
        )

    return asgi_app
