"""
Delivery API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api/deliveries")


@router.get("")
async def list_deliveries(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> list[dict]:
    return await service.list_deliveries(database, clan)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_delivery(
    request: schemas.DeliveryCreate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_delivery(database, request)


@router.put("/{delivery_id}")
async def update_delivery(
    delivery_id: str,
    request: schemas.DeliveryUpdate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_delivery(database, delivery_id, request)


@router.delete("/{delivery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_delivery(
    delivery_id: str,
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_delivery(database, delivery_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clan_deliveries(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_clan_deliveries(database, clan)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
