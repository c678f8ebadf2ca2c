"""
Ticket persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database, set_clause

from .schemas import UPDATABLE_FIELDS

TICKET_COLUMNS = (
    "id, project_id, title, description, status, priority, "
    "assigned_to, created_by, created_at, updated_at"
)


async def list_tickets(
    db: Database,
    project_id: UUID,
    *,
    status: str | None = None,
    priority: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[dict[str, Any]]:
    """
    List a project's tickets, newest first, optionally filtered by status/priority.
    """
    return await db.fetch_all(
        f"""
        SELECT {TICKET_COLUMNS}
        FROM tickets
        WHERE project_id = $1
          AND ($2::text IS NULL OR status = $2)
          AND ($3::text IS NULL OR priority = $3)
        ORDER BY created_at DESC, id DESC
        LIMIT $4
        OFFSET $5
        """,
        project_id,
        status,
        priority,
        limit,
        offset,
    )


async def get_ticket(db: Database, ticket_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {TICKET_COLUMNS}
        FROM tickets
        WHERE id = $1
        """,
        ticket_id,
    )


async def create_ticket(
    db: Database,
    *,
    project_id: UUID,
    title: str,
    description: str,
    status: str,
    priority: str,
    created_by: UUID,
    assigned_to: UUID | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO tickets (project_id, title, description, status, priority, created_by, assigned_to)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING {TICKET_COLUMNS}
        """,
        project_id,
        title,
        description,
        status,
        priority,
        created_by,
        assigned_to,
    )
    if row is None:
        raise RuntimeError("Failed to create ticket.")
    return row


async def update_ticket(db: Database, ticket_id: UUID, fields: dict[str, Any]) -> dict[str, Any] | None:
    assignments, args = set_clause(fields, allowed=UPDATABLE_FIELDS, start=2)
    return await db.fetch_one(
        f"""
        UPDATE tickets
        SET {assignments},
            updated_at = now()
        WHERE id = $1
        RETURNING {TICKET_COLUMNS}
        """,
        ticket_id,
        *args,
    )


async def delete_ticket(db: Database, ticket_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        DELETE FROM tickets
        WHERE id = $1
        RETURNING {TICKET_COLUMNS}
        """,
        ticket_id,
    )
