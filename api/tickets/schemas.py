"""
Pydantic schemas for ticket endpoints.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

UPDATABLE_FIELDS = ("title", "description", "status", "priority", "assigned_to")


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TicketCreate(BaseModel):
    # Enum members are stored as their plain string values.
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1, max_length=20_000)
    status: TicketStatus = Field(default=TicketStatus.OPEN, validate_default=True)
    priority: TicketPriority = Field(default=TicketPriority.MEDIUM, validate_default=True)
    assigned_to: UUID | None = None


class TicketUpdate(BaseModel):
    """
    Partial update. Fields left out are unchanged; `assigned_to: null` unassigns.
    """

    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, min_length=1, max_length=20_000)
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    assigned_to: UUID | None = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value
