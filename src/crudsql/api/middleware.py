"""Middleware: request timing and body size limits."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

_MAX_BODY = 1 * 1024 * 1024  # 1 MB; request descriptors are small


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add X-Request-Duration-Ms header with processing time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{duration_ms:.1f}"
        return response


def _too_large() -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={
            "success": False,
            "error": {
                "code": "PAYLOAD_TOO_LARGE",
                "message": f"Request body too large (max {_MAX_BODY // (1024 * 1024)} MB)",
            },
        },
    )


class RequestBodyLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies over 1 MB.

    The Content-Length header is checked first; a missing or unparsable
    header falls through to counting streamed bytes. Consumed bytes are
    cached on ``request._body`` so handlers can still read the body.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        content_length = request.headers.get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > _MAX_BODY:
                return _too_large()

        if request.method in ("POST", "PUT", "PATCH"):
            chunks: list[bytes] = []
            total = 0
            async for chunk in request.stream():
                total += len(chunk)
                if total > _MAX_BODY:
                    return _too_large()
                chunks.append(chunk)
            request._body = b"".join(chunks)  # noqa: SLF001

        return await call_next(request)
