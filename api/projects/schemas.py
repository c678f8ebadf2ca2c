"""
Pydantic schemas for project endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

UPDATABLE_FIELDS = ("name", "description")


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=10_000)


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=10_000)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name may not be null")
        return value
