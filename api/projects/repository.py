"""
Project persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database, set_clause

from .schemas import UPDATABLE_FIELDS

PROJECT_COLUMNS = "id, name, description, owner_id, created_at"


async def list_projects_for_owner(
    db: Database,
    owner_id: UUID,
    *,
    limit: int = 100,
    offset: int = 0,
) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {PROJECT_COLUMNS}
        FROM projects
        WHERE owner_id = $1
        ORDER BY created_at DESC, id DESC
        LIMIT $2
        OFFSET $3
        """,
        owner_id,
        limit,
        offset,
    )


async def get_project(db: Database, project_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {PROJECT_COLUMNS}
        FROM projects
        WHERE id = $1
        """,
        project_id,
    )


async def create_project(
    db: Database,
    *,
    name: str,
    description: str | None,
    owner_id: UUID,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO projects (name, description, owner_id)
        VALUES ($1, $2, $3)
        RETURNING {PROJECT_COLUMNS}
        """,
        name,
        description,
        owner_id,
    )
    if row is None:
        raise RuntimeError("Failed to create project.")
    return row


async def update_project(db: Database, project_id: UUID, fields: dict[str, Any]) -> dict[str, Any] | None:
    assignments, args = set_clause(fields, allowed=UPDATABLE_FIELDS, start=2)
    return await db.fetch_one(
        f"""
        UPDATE projects
        SET {assignments}
        WHERE id = $1
        RETURNING {PROJECT_COLUMNS}
        """,
        project_id,
        *args,
    )


async def delete_project(db: Database, project_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        DELETE FROM projects
        WHERE id = $1
        RETURNING {PROJECT_COLUMNS}
        """,
        project_id,
    )
