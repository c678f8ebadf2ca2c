"""
Ticket activity persistence (raw SQL).
"""

from __future__ import annotations

import json
from typing import Any
from uuid import UUID

from core.db import Database

ACTIVITY_COLUMNS = "id, ticket_id, actor_id, action, details, created_at"


def _json_arg(value: Any) -> str | None:
    """
    asyncpg does not automatically encode Python values for json/jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=True)


def _decode(row: dict[str, Any] | None) -> dict[str, Any] | None:
    if row is None:
        return None
    details = row.get("details")
    if isinstance(details, str):
        row["details"] = json.loads(details)
    return row


async def list_activities(
    db: Database,
    ticket_id: UUID,
    *,
    actor_id: UUID | None = None,
) -> list[dict[str, Any]]:
    """
    Activity entries for a ticket, oldest first; `actor_id` narrows to one actor.
    """
    rows = await db.fetch_all(
        f"""
        SELECT {ACTIVITY_COLUMNS}
        FROM ticket_activity
        WHERE ticket_id = $1
          AND ($2::uuid IS NULL OR actor_id = $2)
        ORDER BY created_at ASC, id ASC
        """,
        ticket_id,
        actor_id,
    )
    return [_decode(row) for row in rows]


async def get_activity(db: Database, activity_id: UUID) -> dict[str, Any] | None:
    row = await db.fetch_one(
        f"""
        SELECT {ACTIVITY_COLUMNS}
        FROM ticket_activity
        WHERE id = $1
        """,
        activity_id,
    )
    return _decode(row)


async def create_activity(
    db: Database,
    *,
    ticket_id: UUID,
    actor_id: UUID,
    action: str,
    details: Any = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO ticket_activity (ticket_id, actor_id, action, details)
        VALUES ($1, $2, $3, $4::jsonb)
        RETURNING {ACTIVITY_COLUMNS}
        """,
        ticket_id,
        actor_id,
        action,
        _json_arg(details),
    )
    if row is None:
        raise RuntimeError("Failed to create activity.")
    return _decode(row)


async def delete_activity(db: Database, activity_id: UUID) -> dict[str, Any] | None:
    row = await db.fetch_one(
        f"""
        DELETE FROM ticket_activity
        WHERE id = $1
        RETURNING {ACTIVITY_COLUMNS}
        """,
        activity_id,
    )
    return _decode(row)
