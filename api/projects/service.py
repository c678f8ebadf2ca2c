"""
Project business logic. Every project operation is limited to the owner.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from auth import permissions
from auth.identity import Caller
from core import errors, validation
from core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


async def load_owned_project(db: Database, caller: Caller, project_id: UUID) -> dict[str, Any]:
    """
    Fetch a project and check that the caller owns it.

    NotFound when it does not exist, Forbidden when it belongs to someone else.
    The result is a snapshot: a write issued afterwards is a separate statement,
    so an ownership change in between is not detected.
    """
    project = await repository.get_project(db, project_id)
    if project is None:
        raise errors.NotFound("Project not found.")
    permissions.ensure_project_owner(caller, project)
    return project


async def list_projects(db: Database, caller: Caller, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await repository.list_projects_for_owner(db, caller.id, limit=limit, offset=offset)


async def create_project(db: Database, caller: Caller, payload: schemas.ProjectCreate) -> dict[str, Any]:
    row = await repository.create_project(
        db,
        name=payload.name,
        description=payload.description,
        owner_id=caller.id,
    )
    logger.info("project_created project_id=%s owner_id=%s", row["id"], caller.id)
    return row


async def update_project(
    db: Database,
    caller: Caller,
    project_id: UUID,
    payload: schemas.ProjectUpdate,
) -> dict[str, Any]:
    changes = validation.require_any_field(payload, schemas.UPDATABLE_FIELDS)
    await load_owned_project(db, caller, project_id)

    row = await repository.update_project(db, project_id, changes)
    if row is None:
        raise errors.NotFound("Project not found.")

    logger.info("project_updated project_id=%s fields=%s", project_id, ",".join(changes))
    return row


async def delete_project(db: Database, caller: Caller, project_id: UUID) -> dict[str, Any]:
    await load_owned_project(db, caller, project_id)

    # Tickets, comments and activity go with it via ON DELETE CASCADE.
    row = await repository.delete_project(db, project_id)
    if row is None:
        raise errors.NotFound("Project not found.")

    logger.info("project_deleted project_id=%s", project_id)
    return row
