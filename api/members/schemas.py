"""
Pydantic schemas for member endpoints.

Presence of required fields is checked in the service so the error message
matches the rest of the API; these models only pin the field types.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class MemberUpdate(BaseModel):
    # Nicks like 1337 arrive as JSON numbers.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    nick: str | None = None
    level: int | None = None
    power: int | None = None
    classe: str | None = None
    # Stored as jsonb and returned as sent.
    data: Any = None


class MemberCreate(MemberUpdate):
    clan: Any = None
