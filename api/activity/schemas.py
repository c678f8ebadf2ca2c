"""
Pydantic schemas for ticket activity endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ActivityCreate(BaseModel):
    action: str = Field(..., min_length=1, max_length=200)
    # Free-form; stored as jsonb.
    details: dict[str, Any] | str | None = None
