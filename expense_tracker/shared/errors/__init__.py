from .base import (
    AppError,
    DomainError,
    InvalidInputError,
    InvalidTokenError,
    NotAuthenticatedError,
    ValidationError,
    error_body,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InvalidInputError",
    "InvalidTokenError",
    "NotAuthenticatedError",
    "ValidationError",
    "error_body",
    "handle_app_error",
    "register_error_handler",
]
