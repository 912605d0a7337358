"""
Repository item API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api/repo")


@router.get("")
async def list_items(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> list[dict]:
    return await service.list_items(database, clan)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    request: schemas.RepoItemCreate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_item(database, request)


@router.put("/{item_id}")
async def update_item(
    item_id: str,
    request: schemas.RepoItemUpdate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_item(database, item_id, request)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_item(database, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clan_items(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_clan_items(database, clan)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
