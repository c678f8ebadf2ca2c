"""
Ticket comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database

COMMENT_COLUMNS = "id, ticket_id, author_id, content, created_at"


async def list_comments(
    db: Database,
    ticket_id: UUID,
    *,
    author_id: UUID | None = None,
) -> list[dict[str, Any]]:
    """
    Comments for a ticket, oldest first; `author_id` narrows to one author.
    """
    return await db.fetch_all(
        f"""
        SELECT {COMMENT_COLUMNS}
        FROM ticket_comments
        WHERE ticket_id = $1
          AND ($2::uuid IS NULL OR author_id = $2)
        ORDER BY created_at ASC, id ASC
        """,
        ticket_id,
        author_id,
    )


async def get_comment(db: Database, comment_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {COMMENT_COLUMNS}
        FROM ticket_comments
        WHERE id = $1
        """,
        comment_id,
    )


async def create_comment(db: Database, *, ticket_id: UUID, author_id: UUID, content: str) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO ticket_comments (ticket_id, author_id, content)
        VALUES ($1, $2, $3)
        RETURNING {COMMENT_COLUMNS}
        """,
        ticket_id,
        author_id,
        content,
    )
    if row is None:
        raise RuntimeError("Failed to create comment.")
    return row


async def delete_comment(db: Database, comment_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        DELETE FROM ticket_comments
        WHERE id = $1
        RETURNING {COMMENT_COLUMNS}
        """,
        comment_id,
    )
