"""
Uniform JSON envelope used by every route and exception handler.

Success: {"success": true, "data": ..., "message": "..."}
Failure: {"success": false, "error": "...", "fields": ["..."]}

Optional keys are omitted when empty.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_body(data: Any = None, *, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return jsonable_encoder(body)


def failure_body(error: str, *, fields: list[str] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": error}
    if fields:
        body["fields"] = list(fields)
    return body


def success(data: Any = None, *, message: str | None = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=success_body(data, message=message))


def failure(error: str, *, status_code: int, fields: list[str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=failure_body(error, fields=fields))
