"""Chaski — FastAPI integration.

Wires the decoder ring, exception handlers and audit logging into an
existing application. Handlers take typed parameters through get_cgi.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chaski.config import ChaskiConfig, load_config
from chaski.decoder import DecoderRing
from chaski.errors import ChaskiError, SecurityError, ValidationError

logger = logging.getLogger("chaski")
audit_logger = logging.getLogger("chaski.audit")


def install(app: FastAPI, config: ChaskiConfig | None = None) -> FastAPI:
    """Attach Chaski to app and return it."""
    if config is None:
        config = load_config()

    app.state.config = config
    app.state.decoder = DecoderRing(
        config.secret, config.labels, min_length=config.min_length
    )
    logger.info(
        "Decoder ring ready (labels: %s)", ", ".join(sorted(config.labels)) or "none"
    )

    # ── Exception handlers ────────────────────────────────────

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(SecurityError)
    async def security_handler(request: Request, exc: SecurityError):
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(ChaskiError)
    async def chaski_handler(request: Request, exc: ChaskiError):
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    return app
