"""
Auth security helpers.

Supabase signs access tokens with the project's JWT secret (HS256). When that
secret is configured we verify tokens locally instead of asking the auth API.
"""

from __future__ import annotations

from typing import Any

import jwt

JWT_ALGORITHMS = ["HS256"]


class AuthSecurityError(RuntimeError):
    pass


def extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthSecurityError("Missing authorization token.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthSecurityError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthSecurityError("Authorization must be: Bearer <token>.")
    return token


def decode_access_token(token: str, *, secret: str, audience: str = "authenticated") -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(
            raw,
            secret,
            algorithms=JWT_ALGORITHMS,
            audience=audience,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    return payload
