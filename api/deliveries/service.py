"""
Delivery rules.
"""

from __future__ import annotations

import logging
from typing import Any

from core import params
from core.db import Database
from core.errors import bad_request, not_found, storage_failure

from . import repository, schemas

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "campos obrigatórios faltando"


async def list_deliveries(database: Database, clan: Any) -> list[dict[str, Any]]:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao listar entregas", "delivery_list_failed clan=%s", clan_id):
        return await repository.list_deliveries(database, clan=clan_id)


async def create_delivery(database: Database, payload: schemas.DeliveryCreate) -> dict[str, Any]:
    clan_id = params.parse_clan(payload.clan)
    if not params.all_present(payload.data, payload.nick, payload.classe, payload.descricao):
        raise bad_request(MISSING_FIELDS_MESSAGE)

    with storage_failure("erro ao criar entrega", "delivery_create_failed clan=%s", clan_id):
        return await repository.insert_delivery(
            database,
            clan=clan_id,
            data=payload.data,
            nick=payload.nick,
            classe=payload.classe,
            descricao=payload.descricao,
        )


async def update_delivery(database: Database, delivery_id: Any, payload: schemas.DeliveryUpdate) -> dict[str, Any]:
    row_id = params.parse_id(delivery_id)
    with storage_failure("erro ao atualizar entrega", "delivery_update_failed id=%s", row_id):
        row = await repository.update_delivery(
            database,
            row_id,
            data=payload.data,
            nick=payload.nick,
            classe=payload.classe,
            descricao=payload.descricao,
        )
    if row is None:
        raise not_found("entrega não encontrada")
    return row


async def delete_delivery(database: Database, delivery_id: Any) -> None:
    row_id = params.parse_id(delivery_id)
    with storage_failure("erro ao excluir entrega", "delivery_delete_failed id=%s", row_id):
        await repository.delete_delivery(database, row_id)


async def delete_clan_deliveries(database: Database, clan: Any) -> None:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao apagar entregas do clã", "delivery_clan_delete_failed clan=%s", clan_id):
        deleted = await repository.delete_deliveries_for_clan(database, clan=clan_id)
    logger.info("deliveries_cleared clan=%s deleted=%s", clan_id, deleted)
