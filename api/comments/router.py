"""
Ticket comment API endpoints.
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

router = APIRouter(prefix="/tickets/{ticket_id}/comments")


@router.post("", status_code=201)
async def create_comment(
    ticket_id: UUID,
    payload: schemas.CommentCreate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.create_comment(db, caller, ticket_id, payload)
    return responses.success(row, status_code=201)


@router.get("")
async def list_comments(
    ticket_id: UUID,
    _: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_comments(db, ticket_id)
    return responses.success(rows)


@router.get("/user")
async def list_my_comments(
    ticket_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_comments(db, ticket_id, author_id=caller.id)
    return responses.success(rows)


@router.delete("/{comment_id}")
async def delete_comment(
    ticket_id: UUID,
    comment_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.delete_comment(db, caller, ticket_id, comment_id)
    return responses.success(row, message="Comment deleted successfully.")
