"""Request timeout middleware.

Cancels a request that runs longer than the configured timeout, for example
a search engine that accepts the connection but never answers. Raw ASGI.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_tracking(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_tracking),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                # Headers already went out; nothing valid can be sent now.
                return
            body = json.dumps(
                {
                    "error": "GATEWAY_TIMEOUT",
                    "message": f"Request timed out after {timeout_seconds} seconds",
                    "details": {"timeout_seconds": timeout_seconds},
                }
            ).encode()
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", b"application/json")],
            })
            await send({
                "type": "http.response.body",
                "body": body,
                "more_body": False,
            })

    return asgi_app
