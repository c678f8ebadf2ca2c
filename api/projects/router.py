"""
Project API endpoints.
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

router = APIRouter(prefix="/projects")


@router.get("")
async def list_projects(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    """
    List the caller's projects, newest first.
    """
    rows = await service.list_projects(db, caller, limit=limit, offset=offset)
    return responses.success(rows)


@router.get("/{project_id}")
async def get_project(
    project_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.load_owned_project(db, caller, project_id)
    return responses.success(row)


@router.post("", status_code=201)
async def create_project(
    payload: schemas.ProjectCreate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.create_project(db, caller, payload)
    return responses.success(row, status_code=201)


@router.patch("/{project_id}")
async def update_project(
    project_id: UUID,
    payload: schemas.ProjectUpdate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.update_project(db, caller, project_id, payload)
    return responses.success(row)


@router.delete("/{project_id}")
async def delete_project(
    project_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.delete_project(db, caller, project_id)
    return responses.success(row, message="Project deleted successfully.")
