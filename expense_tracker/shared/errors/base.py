# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any, cast


def error_body(
    status: HTTPStatus, message: str, path: str, *, code: str | None = None
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": int(status),
        "error": status.phrase,
        "message": message,
        "path": path,
    }
    if code:
        payload["code"] = code
    return payload


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = self.status.phrase
        Exception.__init__(self, self.message)

    def to_dict(self, path: str) -> dict[str, Any]:
        payload = error_body(self.status, self.message, path, code=self.code)
        if self.context:
            payload.update(dict(self.context))
        return payload


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", ""))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str = "Validation failed",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class InvalidInputError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(
            code="invalid_input",
            status=HTTPStatus.BAD_REQUEST,
            message=message,
        )


class NotAuthenticatedError(AppError):
    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(
            code="not_authenticated",
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
        )


class InvalidTokenError(AppError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(
            code="invalid_token",
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
        )
