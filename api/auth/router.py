"""
Auth API endpoints (signup, login, token refresh, logout, current caller).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core import responses
from core.deps import get_auth_client
from core.supabase_auth import SupabaseAuthClient

from . import dependencies, schemas, service
from .identity import Caller

router = APIRouter(prefix="/auth")


@router.post("/signup", status_code=201)
async def signup(
    payload: schemas.SignUpRequest,
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> JSONResponse:
    result = await service.sign_up(auth_client, payload)
    return responses.success(
        result,
        message="Signup successful. Please confirm your email.",
        status_code=201,
    )


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> JSONResponse:
    result = await service.login(auth_client, payload)
    return responses.success(result, message="Signin successful.")


@router.post("/refresh")
async def refresh(
    payload: schemas.RefreshRequest,
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> JSONResponse:
    result = await service.refresh(auth_client, payload)
    return responses.success(result)


@router.post("/logout")
async def logout(
    _: Caller = Depends(dependencies.get_current_caller),
    access_token: str = Depends(dependencies.get_bearer_token),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> JSONResponse:
    await service.logout(auth_client, access_token)
    return responses.success(message="Signed out.")


@router.get("/me")
async def me(caller: Caller = Depends(dependencies.get_current_caller)) -> JSONResponse:
    return responses.success({"id": caller.id, "email": caller.email, "role": caller.role})
