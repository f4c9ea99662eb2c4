from __future__ import annotations

from pydantic import EmailStr, Field

from expense_tracker.domain.users.entities import AuthResult

from .base import CamelModel


class RegisterRequestDTO(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class LoginRequestDTO(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)  # no strength check on login


class AuthResponseDTO(CamelModel):
    token: str
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthResponseDTO:
        return cls(
            token=result.token,
            email=result.email,
            first_name=result.first_name,
            last_name=result.last_name,
        )
