"""
Pydantic schemas for delivery endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class DeliveryUpdate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    data: str | None = None
    nick: str | None = None
    classe: str | None = None
    descricao: str | None = None


class DeliveryCreate(DeliveryUpdate):
    clan: Any = None
