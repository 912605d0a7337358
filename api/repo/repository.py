"""
Repository item persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_items(database: Database, *, clan: int) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT id, clan, item, tipo, boss, qtd
        FROM repo_items
        WHERE clan = $1
        ORDER BY item ASC, id ASC
        """,
        clan,
    )


async def insert_item(
    database: Database,
    *,
    clan: int,
    item: str,
    tipo: str | None,
    boss: str | None,
    qtd: int,
) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        INSERT INTO repo_items (clan, item, tipo, boss, qtd)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, clan, item, tipo, boss, qtd
        """,
        clan,
        item,
        tipo,
        boss,
        qtd,
    )
    if row is None:
        raise RuntimeError("Failed to insert repository item.")
    return row


async def update_item(
    database: Database,
    item_id: int,
    *,
    item: str | None,
    tipo: str | None,
    boss: str | None,
    qtd: int,
) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        UPDATE repo_items
        SET item = $1,
            tipo = $2,
            boss = $3,
            qtd = $4
        WHERE id = $5
        RETURNING id, clan, item, tipo, boss, qtd
        """,
        item,
        tipo,
        boss,
        qtd,
        item_id,
    )


async def delete_item(database: Database, item_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM repo_items
        WHERE id = $1
        """,
        item_id,
    )


async def delete_items_for_clan(database: Database, *, clan: int) -> int:
    return await database.execute(
        """
        DELETE FROM repo_items
        WHERE clan = $1
        """,
        clan,
    )
