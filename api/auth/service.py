"""
Auth business logic.

Password hashing, token issuance and session storage belong to the hosted auth
provider; this layer forwards requests and maps provider failures onto the
error taxonomy.
"""

from __future__ import annotations

import logging
from typing import Any

from core import errors
from core.supabase_auth import SupabaseAuthClient, SupabaseAuthError, split_session

from . import schemas

logger = logging.getLogger(__name__)

DUPLICATE_USER_CODES = {"user_already_exists", "email_exists"}


def _internal(exc: SupabaseAuthError, *, event: str) -> errors.InternalError:
    logger.error("%s status=%s message=%s", event, exc.status_code, exc.message)
    return errors.InternalError("Authentication service error.")


def _is_duplicate_user(exc: SupabaseAuthError) -> bool:
    if exc.error_code in DUPLICATE_USER_CODES:
        return True
    return "already registered" in exc.message.lower()


async def sign_up(auth_client: SupabaseAuthClient, payload: schemas.SignUpRequest) -> dict[str, Any]:
    try:
        data = await auth_client.sign_up(email=payload.email, password=payload.password)
    except SupabaseAuthError as exc:
        if not exc.is_client_error:
            raise _internal(exc, event="signup_failed") from exc
        if _is_duplicate_user(exc):
            raise errors.Conflict("Email is already registered.", fields=["email"]) from exc
        raise errors.ValidationError(exc.message) from exc

    session, user = split_session(data)
    if user is None:
        raise errors.InternalError("Authentication service returned no user.")
    logger.info("signup user_id=%s", user.get("id"))
    return {"user": user, "session": session}


async def login(auth_client: SupabaseAuthClient, payload: schemas.LoginRequest) -> dict[str, Any]:
    try:
        data = await auth_client.sign_in_with_password(email=payload.email, password=payload.password)
    except SupabaseAuthError as exc:
        if not exc.is_client_error:
            raise _internal(exc, event="login_failed") from exc
        if exc.status_code == 422:
            raise errors.ValidationError(exc.message) from exc
        raise errors.Unauthenticated(exc.message or "Invalid login credentials.") from exc

    session, user = split_session(data)
    if session is None:
        raise errors.InternalError("Authentication service returned no session.")
    return {"session": session, "user": user}


async def refresh(auth_client: SupabaseAuthClient, payload: schemas.RefreshRequest) -> dict[str, Any]:
    try:
        data = await auth_client.refresh_session(payload.refresh_token.strip())
    except SupabaseAuthError as exc:
        if not exc.is_client_error:
            raise _internal(exc, event="refresh_failed") from exc
        raise errors.Unauthenticated("Invalid refresh token.") from exc

    session, user = split_session(data)
    if session is None:
        raise errors.InternalError("Authentication service returned no session.")
    return {"session": session, "user": user}


async def logout(auth_client: SupabaseAuthClient, access_token: str) -> None:
    try:
        await auth_client.sign_out(access_token)
    except SupabaseAuthError as exc:
        if not exc.is_client_error:
            raise _internal(exc, event="logout_failed") from exc
        raise errors.Unauthenticated("Invalid or expired token.") from exc
