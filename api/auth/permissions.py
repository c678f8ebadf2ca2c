"""
Ownership rules.

Each check takes the resolved caller and rows already fetched by the service
layer, and raises `errors.Forbidden` when the caller is not entitled:

- profile:  profile.id == caller.id
- project:  project.owner_id == caller.id (reads, updates, deletes)
- ticket:   the ticket's parent project is owned by the caller
- comment:  comment.author_id == caller.id (delete)
- activity: activity.actor_id == caller.id (delete)
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from core import errors

from .identity import Caller

logger = logging.getLogger(__name__)


def _as_uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def is_caller(caller: Caller, user_id: Any) -> bool:
    return _as_uuid(user_id) == caller.id


def _deny(message: str, *, caller: Caller, resource: str, resource_id: Any) -> errors.Forbidden:
    logger.info("access_denied caller=%s resource=%s id=%s", caller.id, resource, resource_id)
    return errors.Forbidden(message)


def ensure_self(caller: Caller, profile_id: Any, *, action: str = "modify") -> None:
    if not is_caller(caller, profile_id):
        raise _deny(
            f"Forbidden: can only {action} your own profile.",
            caller=caller,
            resource="profile",
            resource_id=profile_id,
        )


def ensure_project_owner(caller: Caller, project: dict[str, Any]) -> None:
    if not is_caller(caller, project.get("owner_id")):
        raise _deny("Forbidden.", caller=caller, resource="project", resource_id=project.get("id"))


def ensure_ticket_access(caller: Caller, ticket: dict[str, Any], project: dict[str, Any]) -> None:
    if _as_uuid(ticket.get("project_id")) != _as_uuid(project.get("id")):
        raise errors.InternalError("Project is not the parent of this ticket.")
    if not is_caller(caller, project.get("owner_id")):
        raise _deny("Forbidden.", caller=caller, resource="ticket", resource_id=ticket.get("id"))


def ensure_comment_author(caller: Caller, comment: dict[str, Any]) -> None:
    if not is_caller(caller, comment.get("author_id")):
        raise _deny(
            "Forbidden: can only delete your own comments.",
            caller=caller,
            resource="comment",
            resource_id=comment.get("id"),
        )


def ensure_activity_actor(caller: Caller, activity: dict[str, Any]) -> None:
    if not is_caller(caller, activity.get("actor_id")):
        raise _deny(
            "Forbidden: can only delete your own activity entries.",
            caller=caller,
            resource="activity",
            resource_id=activity.get("id"),
        )
