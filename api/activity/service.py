"""
Ticket activity business logic. Entries can only be deleted by their actor.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from auth import permissions
from auth.identity import Caller
from core import errors
from core.db import Database
from tickets import service as ticket_service

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create_activity(
    db: Database,
    caller: Caller,
    ticket_id: UUID,
    payload: schemas.ActivityCreate,
) -> dict[str, Any]:
    await ticket_service.require_ticket(db, ticket_id)
    row = await repository.create_activity(
        db,
        ticket_id=ticket_id,
        actor_id=caller.id,
        action=payload.action,
        details=payload.details,
    )
    logger.info("activity_created activity_id=%s ticket_id=%s action=%s", row["id"], ticket_id, payload.action)
    return row


async def list_activities(
    db: Database,
    ticket_id: UUID,
    *,
    actor_id: UUID | None = None,
) -> list[dict[str, Any]]:
    await ticket_service.require_ticket(db, ticket_id)
    return await repository.list_activities(db, ticket_id, actor_id=actor_id)


async def delete_activity(db: Database, caller: Caller, ticket_id: UUID, activity_id: UUID) -> dict[str, Any]:
    activity = await repository.get_activity(db, activity_id)
    if activity is None or activity["ticket_id"] != ticket_id:
        raise errors.NotFound("Activity not found.")
    permissions.ensure_activity_actor(caller, activity)

    row = await repository.delete_activity(db, activity_id)
    if row is None:
        raise errors.NotFound("Activity not found.")

    logger.info("activity_deleted activity_id=%s ticket_id=%s", activity_id, ticket_id)
    return row
