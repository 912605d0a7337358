"""
Member rules: input validation and mapping of storage results to API errors.
"""

from __future__ import annotations

import logging
from typing import Any

from core import params
from core.db import Database
from core.errors import bad_request, not_found, storage_failure

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_members(database: Database, clan: Any) -> list[dict[str, Any]]:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao listar membros", "member_list_failed clan=%s", clan_id):
        return await repository.list_members(database, clan=clan_id)


async def create_member(database: Database, payload: schemas.MemberCreate) -> dict[str, Any]:
    clan_id = params.parse_clan(payload.clan)
    if not params.is_present(payload.nick):
        raise bad_request("nick obrigatório")

    with storage_failure("erro ao criar membro", "member_create_failed clan=%s", clan_id):
        return await repository.insert_member(
            database,
            clan=clan_id,
            nick=payload.nick,
            level=payload.level,
            power=payload.power,
            classe=params.optional(payload.classe),
            data=params.optional(payload.data),
        )


async def update_member(database: Database, member_id: Any, payload: schemas.MemberUpdate) -> dict[str, Any]:
    row_id = params.parse_id(member_id)
    with storage_failure("erro ao atualizar membro", "member_update_failed id=%s", row_id):
        row = await repository.update_member(
            database,
            row_id,
            nick=payload.nick,
            level=payload.level,
            power=payload.power,
            classe=params.optional(payload.classe),
            data=params.optional(payload.data),
        )
    if row is None:
        raise not_found("membro não encontrado")
    return row


async def delete_member(database: Database, member_id: Any) -> None:
    # Deleting an id that does not exist is still a success.
    row_id = params.parse_id(member_id)
    with storage_failure("erro ao excluir membro", "member_delete_failed id=%s", row_id):
        await repository.delete_member(database, row_id)


async def delete_clan_members(database: Database, clan: Any) -> None:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao apagar membros do clã", "member_clan_delete_failed clan=%s", clan_id):
        deleted = await repository.delete_members_for_clan(database, clan=clan_id)
    logger.info("members_cleared clan=%s deleted=%s", clan_id, deleted)
