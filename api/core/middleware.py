"""
HTTP middleware: baseline security headers and the one-line access log.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from . import log

# Helmet's default header set.
SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

CallNext = Callable[[Request], Awaitable[Response]]


async def security_headers(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def format_access_line(
    *,
    method: str,
    path: str,
    status_code: int,
    size: str | None,
    elapsed_ms: float,
) -> str:
    """
    Morgan "tiny" format: `GET /api/users 200 42 - 1.234 ms`.
    """
    return f"{method} {path} {status_code} {size or '-'} - {elapsed_ms:.3f} ms"


async def access_log(request: Request, call_next: CallNext) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    log.access_logger().info(
        format_access_line(
            method=request.method,
            path=path,
            status_code=response.status_code,
            size=response.headers.get("content-length"),
            elapsed_ms=elapsed_ms,
        )
    )
    return response
