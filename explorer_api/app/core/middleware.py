"""
HTTP middleware: security headers, CORS, body size limit and access log.

Every response carries a fixed set of hardened headers and CORS is
open to any origin.  Request lines are logged in a compact
``METHOD path status length - ms`` form; this log replaces uvicorn's
access log, which ``run.py`` switches off.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .errors import error_response
from .logging_config import ACCESS_LOGGER

access_logger = logging.getLogger(ACCESS_LOGGER)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Referrer-Policy": "no-referrer",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    # Content is meant to be embedded by any site, hence cross-origin.
    "Cross-Origin-Resource-Policy": "cross-origin",
    "Origin-Agent-Cluster": "?1",
    "X-XSS-Protection": "0",
}


def _body_too_large(request: Request) -> bool:
    length = request.headers.get("content-length")
    if not length or not length.isdigit():
        return False
    return int(length) > settings.max_body_bytes


def register_middleware(app: FastAPI) -> None:
    """Install the middleware stack on ``app``.

    CORS is added last so that it wraps everything else, including the
    413 reply of the size check.
    """

    @app.middleware("http")
    async def harden_and_log(request: Request, call_next):
        started = time.perf_counter()
        if _body_too_large(request):
            response = error_response(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "request entity too large")
        else:
            response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            request.url.path,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
