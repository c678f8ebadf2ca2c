"""
FastAPI dependencies exposing the process-wide collaborators.

The lifespan in `api/main.py` stores them on `app.state`; handlers never import
a shared instance directly, so tests can put substitutes on `app.state`.
"""

from __future__ import annotations

from fastapi import Request

from .db import Database
from .settings import Settings
from .supabase_auth import SupabaseAuthClient


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"app.state.{name} is not initialized. Is the lifespan running?")
    return value


def get_settings(request: Request) -> Settings:
    return _state_attr(request, "settings")


def get_db(request: Request) -> Database:
    return _state_attr(request, "db")


def get_auth_client(request: Request) -> SupabaseAuthClient:
    return _state_attr(request, "auth_client")
