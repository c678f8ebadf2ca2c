"""
Profile business logic.

A profile shares its id with the auth user it describes, so every mutation is
a self-check: the path id must equal the caller id.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

import asyncpg

from auth import permissions
from auth.identity import Caller
from core import errors, validation
from core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_profiles(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await repository.list_profiles(db, limit=limit, offset=offset)


async def get_profile(db: Database, profile_id: UUID) -> dict[str, Any]:
    row = await repository.get_profile(db, profile_id)
    if row is None:
        raise errors.NotFound("Profile not found.")
    return row


async def create_profile(db: Database, caller: Caller, payload: schemas.ProfileCreate) -> dict[str, Any]:
    if await repository.get_profile(db, caller.id) is not None:
        raise errors.Conflict("Profile already exists.")

    try:
        row = await repository.create_profile(
            db,
            profile_id=caller.id,
            username=payload.username,
            full_name=payload.full_name,
            avatar_url=payload.avatar_url,
            role=payload.role,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.Conflict("Profile already exists or username is taken.", fields=["username"]) from exc

    logger.info("profile_created profile_id=%s", row["id"])
    return row


async def update_profile(
    db: Database,
    caller: Caller,
    profile_id: UUID,
    payload: schemas.ProfileUpdate,
) -> dict[str, Any]:
    changes = validation.require_any_field(payload, schemas.UPDATABLE_FIELDS)
    permissions.ensure_self(caller, profile_id, action="update")

    try:
        row = await repository.update_profile(db, profile_id, changes)
    except asyncpg.UniqueViolationError as exc:
        raise errors.Conflict("Username is taken.", fields=["username"]) from exc
    if row is None:
        raise errors.NotFound("Profile not found.")

    logger.info("profile_updated profile_id=%s fields=%s", profile_id, ",".join(changes))
    return row


async def delete_profile(db: Database, caller: Caller, profile_id: UUID) -> dict[str, Any]:
    permissions.ensure_self(caller, profile_id, action="delete")

    row = await repository.delete_profile(db, profile_id)
    if row is None:
        raise errors.NotFound("Profile not found.")

    logger.info("profile_deleted profile_id=%s", profile_id)
    return row
