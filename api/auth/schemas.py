"""
Auth API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class SignUpRequest(Credentials):
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(Credentials):
    pass


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)
