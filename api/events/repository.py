"""
Event persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_events(database: Database, *, clan: int) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT id, clan, data, evento, nick, status, justificativa
        FROM events
        WHERE clan = $1
        ORDER BY data ASC, id ASC
        """,
        clan,
    )


async def insert_event(
    database: Database,
    *,
    clan: int,
    data: str,
    evento: str,
    nick: str,
    status: str,
    justificativa: str | None,
) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        INSERT INTO events (clan, data, evento, nick, status, justificativa)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING id, clan, data, evento, nick, status, justificativa
        """,
        clan,
        data,
        evento,
        nick,
        status,
        justificativa,
    )
    if row is None:
        raise RuntimeError("Failed to insert event.")
    return row


async def update_event(
    database: Database,
    event_id: int,
    *,
    data: str | None,
    evento: str | None,
    nick: str | None,
    status: str | None,
    justificativa: str | None,
) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        UPDATE events
        SET data = $1,
            evento = $2,
            nick = $3,
            status = $4,
            justificativa = $5
        WHERE id = $6
        RETURNING id, clan, data, evento, nick, status, justificativa
        """,
        data,
        evento,
        nick,
        status,
        justificativa,
        event_id,
    )


async def delete_event(database: Database, event_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM events
        WHERE id = $1
        """,
        event_id,
    )


async def delete_events_for_clan(database: Database, *, clan: int) -> int:
    return await database.execute(
        """
        DELETE FROM events
        WHERE clan = $1
        """,
        clan,
    )
