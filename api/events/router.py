"""
Event API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api/events")


@router.get("")
async def list_events(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> list[dict]:
    return await service.list_events(database, clan)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(
    request: schemas.EventCreate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_event(database, request)


@router.put("/{event_id}")
async def update_event(
    event_id: str,
    request: schemas.EventUpdate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_event(database, event_id, request)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_event(database, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clan_events(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_clan_events(database, clan)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
