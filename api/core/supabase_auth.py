"""
Supabase Auth (GoTrue) HTTP client.

Used endpoints:
- POST /auth/v1/signup                         -> user (or session + user)
- POST /auth/v1/token?grant_type=password      -> session + user
- POST /auth/v1/token?grant_type=refresh_token -> session + user
- GET  /auth/v1/user                           -> user for the bearer token
- POST /auth/v1/logout                         -> 204
"""

from __future__ import annotations

from typing import Any

import httpx

SESSION_KEYS = ("access_token", "refresh_token", "token_type", "expires_in", "expires_at")


# Auth provider failures are explicit and separable from other runtime errors.
class SupabaseAuthError(RuntimeError):
    def __init__(self, status_code: int, message: str, *, error_code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise SupabaseAuthError(500, "SUPABASE_URL is empty.")
    return base_url.rstrip("/") + "/auth/v1"


def _error_from_response(resp: httpx.Response) -> SupabaseAuthError:
    message = ""
    error_code: str | None = None
    try:
        data = resp.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("msg", "message", "error_description", "error"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                message = value.strip()
                break
        code = data.get("error_code")
        if code is None and isinstance(data.get("code"), str):
            code = data.get("code")
        if isinstance(code, str) and code:
            error_code = code

    if not message:
        # Avoid dumping huge bodies; include a small snippet.
        message = resp.text[:300] or f"Auth request failed with status {resp.status_code}."
    return SupabaseAuthError(resp.status_code, message, error_code=error_code)


def split_session(data: dict[str, Any]) -> tuple[dict[str, Any] | None, dict[str, Any] | None]:
    """
    Split a GoTrue token/signup payload into (session, user).

    Signup returns the bare user when email confirmation is pending.
    """
    if "access_token" in data:
        session = {key: data.get(key) for key in SESSION_KEYS}
        user = data.get("user")
        return session, user if isinstance(user, dict) else None
    if isinstance(data.get("user"), dict):
        return None, data["user"]
    if "id" in data:
        return None, data
    return None, None


class SupabaseAuthClient:
    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_s: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = (api_key or "").strip()
        if not self._api_key:
            raise SupabaseAuthError(500, "SUPABASE_KEY is empty.")
        self._client = httpx.AsyncClient(
            base_url=_normalize_base_url(base_url),
            timeout=timeout_s,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self, bearer: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {bearer or self._api_key}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        bearer: str | None = None,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            resp = await self._client.request(
                method,
                path,
                params=params,
                json=json,
                headers=self._headers(bearer),
            )
        except httpx.HTTPError as exc:
            raise SupabaseAuthError(503, f"Auth provider is unreachable: {exc}") from exc

        if resp.status_code >= 400:
            raise _error_from_response(resp)
        if resp.status_code == 204 or not resp.content:
            return {}

        try:
            data = resp.json()
        except ValueError as exc:
            raise SupabaseAuthError(502, "Auth provider returned a non-JSON response.") from exc
        if not isinstance(data, dict):
            raise SupabaseAuthError(502, "Auth provider returned an unexpected payload.")
        return data

    async def sign_up(self, *, email: str, password: str) -> dict[str, Any]:
        return await self._request("POST", "/signup", json={"email": email, "password": password})

    async def sign_in_with_password(self, *, email: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

    async def refresh_session(self, refresh_token: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/token",
            params={"grant_type": "refresh_token"},
            json={"refresh_token": refresh_token},
        )

    async def get_user(self, access_token: str) -> dict[str, Any]:
        """
        Resolve an access token to the provider's user record.
        """
        token = (access_token or "").strip()
        if not token:
            raise SupabaseAuthError(401, "Access token is empty.")
        return await self._request("GET", "/user", bearer=token)

    async def sign_out(self, access_token: str) -> None:
        await self._request("POST", "/logout", bearer=access_token)
