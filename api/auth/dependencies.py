"""
Authentication gate for protected FastAPI routes.

`get_auth_state` resolves the bearer credential once per request into
`Anonymous` or `Authenticated`. Protected routes depend on
`get_current_caller`, which rejects `Anonymous` with 401. FastAPI resolves
these dependencies before validating path and body parameters, so a request
without a credential is rejected before any validation or data access.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header

from core import errors
from core.deps import get_auth_client, get_settings
from core.settings import Settings
from core.supabase_auth import SupabaseAuthClient, SupabaseAuthError

from . import security
from .identity import Anonymous, Authenticated, AuthState, Caller

logger = logging.getLogger(__name__)

INVALID_TOKEN = "Invalid or expired token."


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    try:
        return security.extract_bearer_token(authorization)
    except security.AuthSecurityError as exc:
        raise errors.Unauthenticated(str(exc)) from exc


async def resolve_token(
    token: str,
    *,
    settings: Settings,
    auth_client: SupabaseAuthClient,
) -> AuthState:
    if settings.jwt_secret:
        try:
            claims = security.decode_access_token(
                token,
                secret=settings.jwt_secret,
                audience=settings.jwt_audience,
            )
        except security.AuthSecurityError as exc:
            return Anonymous(str(exc))
    else:
        try:
            claims = await auth_client.get_user(token)
        except SupabaseAuthError as exc:
            if exc.is_client_error:
                return Anonymous(INVALID_TOKEN)
            logger.error("auth_provider_failed status=%s message=%s", exc.status_code, exc.message)
            raise errors.InternalError("Authentication failed.") from exc

    try:
        return Authenticated(Caller.from_claims(claims))
    except ValueError:
        return Anonymous(INVALID_TOKEN)


async def get_auth_state(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthState:
    try:
        token = security.extract_bearer_token(authorization)
    except security.AuthSecurityError as exc:
        return Anonymous(str(exc))
    return await resolve_token(token, settings=settings, auth_client=auth_client)


async def get_current_caller(state: AuthState = Depends(get_auth_state)) -> Caller:
    if isinstance(state, Authenticated):
        return state.caller
    raise errors.Unauthenticated(state.reason)
