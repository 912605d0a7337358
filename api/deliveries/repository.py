"""
Delivery persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_deliveries(database: Database, *, clan: int) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT id, clan, data, nick, classe, descricao
        FROM deliveries
        WHERE clan = $1
        ORDER BY data ASC, id ASC
        """,
        clan,
    )


async def insert_delivery(
    database: Database,
    *,
    clan: int,
    data: str,
    nick: str,
    classe: str,
    descricao: str,
) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        INSERT INTO deliveries (clan, data, nick, classe, descricao)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, clan, data, nick, classe, descricao
        """,
        clan,
        data,
        nick,
        classe,
        descricao,
    )
    if row is None:
        raise RuntimeError("Failed to insert delivery.")
    return row


async def update_delivery(
    database: Database,
    delivery_id: int,
    *,
    data: str | None,
    nick: str | None,
    classe: str | None,
    descricao: str | None,
) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        UPDATE deliveries
        SET data = $1,
            nick = $2,
            classe = $3,
            descricao = $4
        WHERE id = $5
        RETURNING id, clan, data, nick, classe, descricao
        """,
        data,
        nick,
        classe,
        descricao,
        delivery_id,
    )


async def delete_delivery(database: Database, delivery_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM deliveries
        WHERE id = $1
        """,
        delivery_id,
    )


async def delete_deliveries_for_clan(database: Database, *, clan: int) -> int:
    return await database.execute(
        """
        DELETE FROM deliveries
        WHERE clan = $1
        """,
        clan,
    )
