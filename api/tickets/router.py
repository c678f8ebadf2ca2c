"""
Ticket API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from auth.identity import Caller
from core import responses
from core.db import Database
from core.deps import get_db

from . import schemas, service

router = APIRouter()


@router.post("/projects/{project_id}/tickets", status_code=201)
async def create_ticket(
    project_id: UUID,
    payload: schemas.TicketCreate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    """
    Create a ticket in a project the caller owns.

    - **status** defaults to `open`
    - **priority** defaults to `medium`
    """
    row = await service.create_ticket(db, caller, project_id, payload)
    return responses.success(row, status_code=201)


@router.get("/projects/{project_id}/tickets")
async def list_tickets(
    project_id: UUID,
    status: schemas.TicketStatus | None = Query(None),
    priority: schemas.TicketPriority | None = Query(None),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_tickets(
        db,
        caller,
        project_id,
        status=status.value if status else None,
        priority=priority.value if priority else None,
        limit=limit,
        offset=offset,
    )
    return responses.success(rows)


@router.get("/tickets/{ticket_id}")
async def get_ticket(
    ticket_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.load_accessible_ticket(db, caller, ticket_id)
    return responses.success(row)


@router.patch("/tickets/{ticket_id}")
async def update_ticket(
    ticket_id: UUID,
    payload: schemas.TicketUpdate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.update_ticket(db, caller, ticket_id, payload)
    return responses.success(row)


@router.delete("/tickets/{ticket_id}")
async def delete_ticket(
    ticket_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.delete_ticket(db, caller, ticket_id)
    return responses.success(row, message="Ticket deleted successfully.")
