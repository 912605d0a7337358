"""
Pydantic schemas for repository item endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RepoItemUpdate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    item: str | None = None
    tipo: str | None = None
    boss: str | None = None
    qtd: int | None = None


class RepoItemCreate(RepoItemUpdate):
    clan: Any = None
