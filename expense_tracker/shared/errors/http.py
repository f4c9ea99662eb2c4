# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Response, jsonify, request
from werkzeug.exceptions import HTTPException

from expense_tracker.shared.config import load_config
from expense_tracker.shared.logging import logger

from .base import AppError, error_body


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict(request.path))
    return response, error.status


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def register_error_handler(
    app, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {request.method} {request.path}")
        else:
            logger.info(
                f"Handled application error {exc.code} ({int(exc.status)}) "
                f"on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = HTTPStatus(exc.code or default_status)
        payload = error_body(status, exc.description or status.phrase, request.path)
        return jsonify(payload), status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, query={dict(request.args)}, "
                f"body_size={len(request.data)}"
            )
        else:
            logger.exception(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        payload = error_body(default_status, "Internal server error", request.path)
        return jsonify(payload), default_status


__all__ = ["handle_app_error", "register_error_handler"]
