"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The application lifespan creates one on
startup, stores it on `app.state`, and closes it on shutdown (see
`api/main.py`). Handlers receive it through `core.deps.get_db`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any, Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg


def sanitize_database_url(url: str) -> str:
    # asyncpg rejects some libpq-only options that hosted providers put in the DSN.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def set_clause(fields: dict[str, Any], *, allowed: Iterable[str], start: int = 1) -> tuple[str, list[Any]]:
    """
    Build `col = $n, ...` for a partial UPDATE.

    Column names are checked against `allowed`; values become positional args
    numbered from `start`.
    """
    allowed_set = set(allowed)
    parts: list[str] = []
    args: list[Any] = []
    for column, value in fields.items():
        if column not in allowed_set:
            raise ValueError(f"Column is not updatable: {column}")
        args.append(value)
        parts.append(f"{column} = ${start + len(args) - 1}")
    if not parts:
        raise ValueError("No columns to update.")
    return ", ".join(parts), args


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: float = 30.0,
    ) -> "Database":
        pool = await asyncpg.create_pool(
            dsn=sanitize_database_url(dsn),
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
        )
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]
