"""Middleware turning quality-value parse failures into 400 responses."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_qvalues.core.errors import ParseError

logger = logging.getLogger(__name__)


class ParseErrorMiddleware:
    """Convert ``ParseError`` exceptions into JSON error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Answer 400 when the downstream app fails on a malformed list."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except ParseError as exc:
            # status line already sent
            if response_started:
                raise
            logger.info(
                "Malformed quality value list on %s: %s", scope.get("path", ""), exc
            )
            response = JSONResponse({"errors": [exc.error_object()]}, status_code=400)
            await response(scope, receive, send)
