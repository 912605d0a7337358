"""
Member API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api/members")


@router.get("")
async def list_members(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> list[dict]:
    return await service.list_members(database, clan)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_member(
    request: schemas.MemberCreate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.create_member(database, request)


@router.put("/{member_id}")
async def update_member(
    member_id: str,
    request: schemas.MemberUpdate,
    database: Database = Depends(get_db),
) -> dict:
    return await service.update_member(database, member_id, request)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    member_id: str,
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_member(database, member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clan_members(
    clan: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> Response:
    await service.delete_clan_members(database, clan)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
