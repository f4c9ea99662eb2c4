# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from expense_tracker.shared.config import load_config
from expense_tracker.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_SECRET_PARAM_HINTS = ("password", "token", "secret")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in _SECRET_HEADERS else value
        for key, value in headers.items()
    }


def _safe_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        key: "<redacted>" if any(hint in key.lower() for hint in _SECRET_PARAM_HINTS) else value
        for key, value in params.items()
    }


def configure_request_logging(app: Flask) -> None:
    """Log every request with its duration and tag it with a correlation id.

    A client-supplied ``X-Request-ID`` is reused; otherwise one is generated.
    The id is echoed back on the response.
    """

    verbose = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8))
        g.request_started = time.perf_counter()
        if verbose:
            logger.debug(
                f"-> {request.method} {request.path} from {_client_ip()} "
                f"query={_safe_params(request.args)} headers={_safe_headers(request.headers)} "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"-> {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        line = f"<- {request.method} {request.path} {response.status_code} in {elapsed_ms:.1f} ms"
        if verbose:
            logger.debug(f"{line} user={g.get('user_id')}")
        else:
            logger.info(line)
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request failed: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["configure_request_logging"]
