"""
Input validation helpers shared by the feature services.

Shape checks (required fields, enum membership, lengths) live on the pydantic
request schemas. This module holds the rules that need the whole payload and
the conversion of framework validation errors into `errors.ValidationError`.
"""

from __future__ import annotations

from typing import Any, Iterable

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from . import errors

# Leading loc segments that name where a value came from, not the field itself.
_LOC_SOURCES = {"body", "path", "query", "header", "cookie"}


def require_any_field(payload: BaseModel, fields: Iterable[str]) -> dict[str, Any]:
    """
    Return the explicitly provided fields of `payload` (explicit nulls included).

    Raises ValidationError when none of `fields` was provided.
    """
    names = list(fields)
    provided = [name for name in names if name in payload.model_fields_set]
    if not provided:
        raise errors.ValidationError(
            "At least one field must be provided to update.",
            fields=names,
        )
    return {name: getattr(payload, name) for name in provided}


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOC_SOURCES:
        parts = parts[1:]
    return ".".join(parts)


def validation_error_from_request(exc: RequestValidationError) -> errors.ValidationError:
    fields: list[str] = []
    messages: list[str] = []
    for item in exc.errors():
        name = _field_name(tuple(item.get("loc") or ()))
        msg = str(item.get("msg") or "Invalid value.")
        # pydantic prefixes custom ValueError messages; keep the readable part.
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        if name and name not in fields:
            fields.append(name)
        messages.append(f"{name}: {msg}" if name else msg)

    if not messages:
        return errors.ValidationError("Invalid request.")
    return errors.ValidationError("; ".join(messages), fields=fields)
