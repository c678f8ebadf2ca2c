"""
Profile API endpoints. Reads are public; writes are limited to the caller's own profile.
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

router = APIRouter(prefix="/profiles")


@router.post("", status_code=201)
async def create_profile(
    payload: schemas.ProfileCreate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.create_profile(db, caller, payload)
    return responses.success(row, status_code=201)


@router.get("")
async def list_profiles(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Database = Depends(get_db),
) -> JSONResponse:
    rows = await service.list_profiles(db, limit=limit, offset=offset)
    return responses.success(rows)


@router.get("/{profile_id}")
async def get_profile(profile_id: UUID, db: Database = Depends(get_db)) -> JSONResponse:
    row = await service.get_profile(db, profile_id)
    return responses.success(row)


@router.patch("/{profile_id}")
async def update_profile(
    profile_id: UUID,
    payload: schemas.ProfileUpdate,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.update_profile(db, caller, profile_id, payload)
    return responses.success(row)


@router.delete("/{profile_id}")
async def delete_profile(
    profile_id: UUID,
    caller: Caller = Depends(auth_dependencies.get_current_caller),
    db: Database = Depends(get_db),
) -> JSONResponse:
    row = await service.delete_profile(db, caller, profile_id)
    return responses.success(row, message="Profile deleted successfully.")
