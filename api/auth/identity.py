"""
Caller identity as produced by the authentication gate.

A request is either `Anonymous` or `Authenticated`; only the gate builds these,
and protected routes only ever see the `Caller` of an `Authenticated` state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union
from uuid import UUID


@dataclass(frozen=True)
class Caller:
    id: UUID
    email: str | None = None
    role: str | None = None

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "Caller":
        """
        Build a caller from a provider user record or JWT claims.

        Raises ValueError when the subject is not a UUID.
        """
        raw_id = claims.get("id") or claims.get("sub")
        if not raw_id:
            raise ValueError("Identity has no subject.")
        email = claims.get("email")
        role = claims.get("role")
        return cls(
            id=UUID(str(raw_id)),
            email=str(email) if email else None,
            role=str(role) if role else None,
        )


@dataclass(frozen=True)
class Anonymous:
    reason: str


@dataclass(frozen=True)
class Authenticated:
    caller: Caller


AuthState = Union[Anonymous, Authenticated]
