"""
Ticket activity API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from auth.identity import Caller
from core import responses
from core.db import Database
from core.deps import get_db

from . import schemas, service

router = APIRouter(prefix="/tickets/{ticket_id}/activity")


@router.post("", status_code=201)
async def create_activity(
    ticket_id: UUID,
    payload: schemas.ActivityCreate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.create_activity(db, caller, ticket_id, payload)
    return responses.success(row, status_code=201)


@router.get("")
async def list_activities(
    ticket_id: UUID,
    _: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_activities(db, ticket_id)
    return responses.success(rows)


@router.get("/user")
async def list_my_activities(
    ticket_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_activities(db, ticket_id, actor_id=caller.id)
    return responses.success(rows)


@router.delete("/{activity_id}")
async def delete_activity(
    ticket_id: UUID,
    activity_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.delete_activity(db, caller, ticket_id, activity_id)
    return responses.success(row, message="Activity deleted successfully.")
