"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. `main` constructs one on startup,
stores it on `app.state.db` and closes it on shutdown; route handlers
receive it through the `get_db` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
- values are always bound by the driver, never formatted into the SQL text
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

logger = logging.getLogger(__name__)

CLOSE_TIMEOUT_S = 10.0


def _sanitize_database_url(url: str) -> str:
    # TLS is configured through the `ssl` argument; a leftover sslmode in the
    # URL would override it.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def ssl_context(*, verify: bool) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _affected_rows(status: str) -> int:
    """
    asyncpg returns the command tag, e.g. "DELETE 3" or "UPDATE 0".
    """
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class Database:
    def __init__(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 10,
        tls: ssl.SSLContext | bool = False,
        command_timeout: float = 30.0,
    ) -> None:
        self._dsn = _sanitize_database_url(dsn)
        self._min_size = min_size
        self._max_size = max_size
        self._tls = tls
        self._command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self._dsn,
            min_size=self._min_size,
            max_size=self._max_size,
            ssl=self._tls,
            command_timeout=self._command_timeout,
        )
        logger.info("db_pool_open min_size=%s max_size=%s", self._min_size, self._max_size)

    async def close(self) -> None:
        """
        Wait for checked-out connections to come back, then close them all.
        Connections still busy after CLOSE_TIMEOUT_S are terminated.
        """
        if self._pool is None:
            return None
        pool, self._pool = self._pool, None
        try:
            await asyncio.wait_for(pool.close(), timeout=CLOSE_TIMEOUT_S)
        except asyncio.TimeoutError:
            logger.warning("db_pool_close_timeout timeout_s=%s", CLOSE_TIMEOUT_S)
            pool.terminate()
        logger.info("db_pool_closed")

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        async with self.pool().acquire() as conn:
            row = await conn.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self.pool().acquire() as conn:
            rows = await conn.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
        """
        async with self.pool().acquire() as conn:
            status = await conn.execute(sql, *args)
        return _affected_rows(status)


def get_db(request: Request) -> Database:
    return request.app.state.db
