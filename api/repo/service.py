"""
Repository item rules.

`qtd` is never stored as NULL: an absent quantity means zero.
"""

from __future__ import annotations

import logging
from typing import Any

from core import params
from core.db import Database
from core.errors import bad_request, not_found, storage_failure

from . import repository, schemas

logger = logging.getLogger(__name__)


def _quantity(value: int | None) -> int:
    return value if value is not None else 0


async def list_items(database: Database, clan: Any) -> list[dict[str, Any]]:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao listar repositório", "repo_list_failed clan=%s", clan_id):
        return await repository.list_items(database, clan=clan_id)


async def create_item(database: Database, payload: schemas.RepoItemCreate) -> dict[str, Any]:
    clan_id = params.parse_clan(payload.clan)
    if not params.is_present(payload.item):
        raise bad_request("item obrigatório")

    with storage_failure("erro ao criar item", "repo_create_failed clan=%s", clan_id):
        return await repository.insert_item(
            database,
            clan=clan_id,
            item=payload.item,
            tipo=params.optional(payload.tipo),
            boss=params.optional(payload.boss),
            qtd=_quantity(payload.qtd),
        )


async def update_item(database: Database, item_id: Any, payload: schemas.RepoItemUpdate) -> dict[str, Any]:
    row_id = params.parse_id(item_id)
    with storage_failure("erro ao atualizar item", "repo_update_failed id=%s", row_id):
        row = await repository.update_item(
            database,
            row_id,
            item=payload.item,
            tipo=params.optional(payload.tipo),
            boss=params.optional(payload.boss),
            qtd=_quantity(payload.qtd),
        )
    if row is None:
        raise not_found("item não encontrado")
    return row


async def delete_item(database: Database, item_id: Any) -> None:
    row_id = params.parse_id(item_id)
    with storage_failure("erro ao excluir item", "repo_delete_failed id=%s", row_id):
        await repository.delete_item(database, row_id)


async def delete_clan_items(database: Database, clan: Any) -> None:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao apagar repositório do clã", "repo_clan_delete_failed clan=%s", clan_id):
        deleted = await repository.delete_items_for_clan(database, clan=clan_id)
    logger.info("repo_cleared clan=%s deleted=%s", clan_id, deleted)
