"""
Ticket comment business logic.

Any authenticated caller may comment on an existing ticket; only the author may
delete a comment.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from auth import permissions
from auth.identity import Caller
from core import errors
from core.db import Database
from tickets import service as ticket_service

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create_comment(
    db: Database,
    caller: Caller,
    ticket_id: UUID,
    payload: schemas.CommentCreate,
) -> dict[str, Any]:
    await ticket_service.require_ticket(db, ticket_id)
    row = await repository.create_comment(
        db,
        ticket_id=ticket_id,
        author_id=caller.id,
        content=payload.content,
    )
    logger.info("comment_created comment_id=%s ticket_id=%s", row["id"], ticket_id)
    return row


async def list_comments(
    db: Database,
    ticket_id: UUID,
    *,
    author_id: UUID | None = None,
) -> list[dict[str, Any]]:
    await ticket_service.require_ticket(db, ticket_id)
    return await repository.list_comments(db, ticket_id, author_id=author_id)


async def delete_comment(db: Database, caller: Caller, ticket_id: UUID, comment_id: UUID) -> dict[str, Any]:
    comment = await repository.get_comment(db, comment_id)
    if comment is None or comment["ticket_id"] != ticket_id:
        raise errors.NotFound("Comment not found.")
    permissions.ensure_comment_author(caller, comment)

    row = await repository.delete_comment(db, comment_id)
    if row is None:
        raise errors.NotFound("Comment not found.")

    logger.info("comment_deleted comment_id=%s ticket_id=%s", comment_id, ticket_id)
    return row
