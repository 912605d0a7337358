"""
Event rules.
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


async def list_events(database: Database, clan: Any) -> list[dict[str, Any]]:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao listar eventos", "event_list_failed clan=%s", clan_id):
        return await repository.list_events(database, clan=clan_id)


async def create_event(database: Database, payload: schemas.EventCreate) -> dict[str, Any]:
    clan_id = params.parse_clan(payload.clan)
    if not params.all_present(payload.data, payload.evento, payload.nick, payload.status):
        raise bad_request(MISSING_FIELDS_MESSAGE)

    with storage_failure("erro ao criar evento", "event_create_failed clan=%s", clan_id):
        return await repository.insert_event(
            database,
            clan=clan_id,
            data=payload.data,
            evento=payload.evento,
            nick=payload.nick,
            status=payload.status,
            justificativa=params.optional(payload.justificativa),
        )


async def update_event(database: Database, event_id: Any, payload: schemas.EventUpdate) -> dict[str, Any]:
    row_id = params.parse_id(event_id)
    with storage_failure("erro ao atualizar evento", "event_update_failed id=%s", row_id):
        row = await repository.update_event(
            database,
            row_id,
            data=payload.data,
            evento=payload.evento,
            nick=payload.nick,
            status=payload.status,
            justificativa=params.optional(payload.justificativa),
        )
    if row is None:
        raise not_found("evento não encontrado")
    return row


async def delete_event(database: Database, event_id: Any) -> None:
    row_id = params.parse_id(event_id)
    with storage_failure("erro ao excluir evento", "event_delete_failed id=%s", row_id):
        await repository.delete_event(database, row_id)


async def delete_clan_events(database: Database, clan: Any) -> None:
    clan_id = params.parse_clan(clan)
    with storage_failure("erro ao apagar eventos do clã", "event_clan_delete_failed clan=%s", clan_id):
        deleted = await repository.delete_events_for_clan(database, clan=clan_id)
    logger.info("events_cleared clan=%s deleted=%s", clan_id, deleted)
