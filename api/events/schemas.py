"""
Pydantic schemas for event endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class EventUpdate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    data: str | None = None
    evento: str | None = None
    nick: str | None = None
    status: str | None = None
    justificativa: str | None = None


class EventCreate(EventUpdate):
    clan: Any = None
