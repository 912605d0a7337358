"""
Member persistence (raw SQL).
"""

from __future__ import annotations

import json
from typing import Any

from core.db import Database


def _json_arg(value: Any) -> str | None:
    """
    asyncpg does not encode Python values for jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def _member_row(row: dict[str, Any]) -> dict[str, Any]:
    # jsonb comes back as text.
    if isinstance(row.get("data"), str):
        row["data"] = json.loads(row["data"])
    return row


async def list_members(database: Database, *, clan: int) -> list[dict[str, Any]]:
    rows = await database.fetch_all(
        """
        SELECT id, clan, nick, level, power, classe, data
        FROM members
        WHERE clan = $1
        ORDER BY nick ASC, id ASC
        """,
        clan,
    )
    return [_member_row(row) for row in rows]


async def insert_member(
    database: Database,
    *,
    clan: int,
    nick: str,
    level: int | None,
    power: int | None,
    classe: str | None,
    data: Any,
) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        INSERT INTO members (clan, nick, level, power, classe, data)
        VALUES ($1, $2, $3, $4, $5, $6::jsonb)
        RETURNING id, clan, nick, level, power, classe, data
        """,
        clan,
        nick,
        level,
        power,
        classe,
        _json_arg(data),
    )
    if row is None:
        raise RuntimeError("Failed to insert member.")
    return _member_row(row)


async def update_member(
    database: Database,
    member_id: int,
    *,
    nick: str | None,
    level: int | None,
    power: int | None,
    classe: str | None,
    data: Any,
) -> dict[str, Any] | None:
    """
    Overwrite every mutable column. Returns None when no row has this id.
    """
    row = await database.fetch_one(
        """
        UPDATE members
        SET nick = $1,
            level = $2,
            power = $3,
            classe = $4,
            data = $5::jsonb
        WHERE id = $6
        RETURNING id, clan, nick, level, power, classe, data
        """,
        nick,
        level,
        power,
        classe,
        _json_arg(data),
        member_id,
    )
    return _member_row(row) if row is not None else None


async def delete_member(database: Database, member_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM members
        WHERE id = $1
        """,
        member_id,
    )


async def delete_members_for_clan(database: Database, *, clan: int) -> int:
    return await database.execute(
        """
        DELETE FROM members
        WHERE clan = $1
        """,
        clan,
    )
