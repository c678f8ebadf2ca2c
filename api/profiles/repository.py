"""
Profile persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database, set_clause

from .schemas import UPDATABLE_FIELDS

PROFILE_COLUMNS = "id, username, full_name, avatar_url, role, created_at, updated_at"


async def list_profiles(db: Database, *, limit: int = 100, offset: int = 0) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {PROFILE_COLUMNS}
        FROM profiles
        ORDER BY created_at ASC, id ASC
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_profile(db: Database, profile_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {PROFILE_COLUMNS}
        FROM profiles
        WHERE id = $1
        """,
        profile_id,
    )


async def create_profile(
    db: Database,
    *,
    profile_id: UUID,
    username: str,
    full_name: str | None = None,
    avatar_url: str | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO profiles (id, username, full_name, avatar_url, role)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {PROFILE_COLUMNS}
        """,
        profile_id,
        username,
        full_name,
        avatar_url,
        role,
    )
    if row is None:
        raise RuntimeError("Failed to create profile.")
    return row


async def update_profile(db: Database, profile_id: UUID, fields: dict[str, Any]) -> dict[str, Any] | None:
    assignments, args = set_clause(fields, allowed=UPDATABLE_FIELDS, start=2)
    return await db.fetch_one(
        f"""
        UPDATE profiles
        SET {assignments},
            updated_at = now()
        WHERE id = $1
        RETURNING {PROFILE_COLUMNS}
        """,
        profile_id,
        *args,
    )


async def delete_profile(db: Database, profile_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        DELETE FROM profiles
        WHERE id = $1
        RETURNING {PROFILE_COLUMNS}
        """,
        profile_id,
    )
