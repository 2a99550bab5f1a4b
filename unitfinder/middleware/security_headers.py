"""Security headers middleware.

The gateway only serves JSON and plain-text unit files, so the defaults lock
everything down; nosniff keeps browsers from rendering downloaded unit
content as HTML. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "same-origin",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on responses that do not already carry them. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
