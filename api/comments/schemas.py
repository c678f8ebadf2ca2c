"""
Pydantic schemas for ticket comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=10_000)
