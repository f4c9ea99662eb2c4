# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    errors_list = []
    for error in exc.errors(include_url=False, include_input=False):
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "message": error.get("msg", "Invalid value"),
            }
        )
    return errors_list


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    errors = format_pydantic_errors(exc)
    message = "; ".join(f"{e['field']}: {e['message']}" for e in errors) or "Validation failed"
    raise ValidationError(message=message, context={"errors": errors}) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
