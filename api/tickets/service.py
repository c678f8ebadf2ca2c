"""
Ticket business logic.

Tickets have no owner of their own: access follows the ownership chain
ticket -> project -> owner. Reads, updates and deletes all require the caller
to own the parent project.

The chain is fetched with sequential queries and the write runs as its own
statement afterwards. Nothing wraps them in a transaction, so a project that
changes owner between the check and the write is not noticed.
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
from projects import repository as project_repository
from projects import service as project_service

from . import repository, schemas

logger = logging.getLogger(__name__)


async def require_ticket(db: Database, ticket_id: UUID) -> dict[str, Any]:
    ticket = await repository.get_ticket(db, ticket_id)
    if ticket is None:
        raise errors.NotFound("Ticket not found.")
    return ticket


async def load_accessible_ticket(db: Database, caller: Caller, ticket_id: UUID) -> dict[str, Any]:
    ticket = await require_ticket(db, ticket_id)
    project = await project_repository.get_project(db, ticket["project_id"])
    if project is None:
        # Orphaned ticket; nobody owns it.
        raise errors.NotFound("Ticket not found.")
    permissions.ensure_ticket_access(caller, ticket, project)
    return ticket


async def list_tickets(
    db: Database,
    caller: Caller,
    project_id: UUID,
    *,
    status: str | None,
    priority: str | None,
    limit: int,
    offset: int,
) -> list[dict[str, Any]]:
    await project_service.load_owned_project(db, caller, project_id)
    return await repository.list_tickets(
        db,
        project_id,
        status=status,
        priority=priority,
        limit=limit,
        offset=offset,
    )


async def create_ticket(
    db: Database,
    caller: Caller,
    project_id: UUID,
    payload: schemas.TicketCreate,
) -> dict[str, Any]:
    await project_service.load_owned_project(db, caller, project_id)

    try:
        row = await repository.create_ticket(
            db,
            project_id=project_id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            created_by=caller.id,
            assigned_to=payload.assigned_to,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ValidationError("assigned_to does not reference a known user.", fields=["assigned_to"]) from exc

    logger.info("ticket_created ticket_id=%s project_id=%s", row["id"], project_id)
    return row


async def update_ticket(
    db: Database,
    caller: Caller,
    ticket_id: UUID,
    payload: schemas.TicketUpdate,
) -> dict[str, Any]:
    changes = validation.require_any_field(payload, schemas.UPDATABLE_FIELDS)
    await load_accessible_ticket(db, caller, ticket_id)

    try:
        row = await repository.update_ticket(db, ticket_id, changes)
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ValidationError("assigned_to does not reference a known user.", fields=["assigned_to"]) from exc
    if row is None:
        raise errors.NotFound("Ticket not found.")

    logger.info("ticket_updated ticket_id=%s fields=%s", ticket_id, ",".join(changes))
    return row


async def delete_ticket(db: Database, caller: Caller, ticket_id: UUID) -> dict[str, Any]:
    await load_accessible_ticket(db, caller, ticket_id)

    row = await repository.delete_ticket(db, ticket_id)
    if row is None:
        raise errors.NotFound("Ticket not found.")

    logger.info("ticket_deleted ticket_id=%s", ticket_id)
    return row
