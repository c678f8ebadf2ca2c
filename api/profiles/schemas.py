"""
Pydantic schemas for profile endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

UPDATABLE_FIELDS = ("username", "full_name", "avatar_url", "role")


class ProfileCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    full_name: str | None = Field(default=None, max_length=200)
    avatar_url: str | None = Field(default=None, max_length=2048)
    role: str | None = Field(default=None, max_length=64)


class ProfileUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=64)
    full_name: str | None = Field(default=None, max_length=200)
    avatar_url: str | None = Field(default=None, max_length=2048)
    role: str | None = Field(default=None, max_length=64)

    @field_validator("username")
    @classmethod
    def username_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("username may not be null")
        return value
