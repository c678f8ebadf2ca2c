"""
Error taxonomy shared by every feature.

Services raise these; `main.create_app` registers one handler that turns them
into the failure envelope with the matching status code.
"""

from __future__ import annotations


class DevDeskError(Exception):
    status_code = 500

    def __init__(self, message: str, *, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else []


class ValidationError(DevDeskError):
    status_code = 400


class Unauthenticated(DevDeskError):
    status_code = 401


class Forbidden(DevDeskError):
    status_code = 403


class NotFound(DevDeskError):
    status_code = 404


class Conflict(DevDeskError):
    status_code = 409


class InternalError(DevDeskError):
    status_code = 500
