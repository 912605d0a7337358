"""
Parse-and-validate helpers for values coming from paths, query strings and
JSON bodies. Every parser fails closed: anything it cannot read as a valid
value raises a 400 ApiError before storage is touched.
"""

from __future__ import annotations

import re
from typing import Any

from .errors import bad_request

CLANS = (1, 2)
MAX_ID = 2**63 - 1  # bigserial

# ASCII only; str.isdigit() also admits "²" and "١".
_INTEGER = re.compile(r"[+-]?[0-9]+")

INVALID_CLAN_MESSAGE = "clan inválido"
INVALID_ID_MESSAGE = "id inválido"


def _to_int(value: Any) -> int | None:
    # bool is an int subclass; `true` is not a clan.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        raw = value.strip()
        if _INTEGER.fullmatch(raw):
            return int(raw)
    return None


def parse_clan(value: Any) -> int:
    clan = _to_int(value)
    if clan not in CLANS:
        raise bad_request(INVALID_CLAN_MESSAGE)
    return clan


def parse_id(value: Any) -> int:
    raw = str(value or "").strip()
    if not raw.isdigit() or not raw.isascii():
        raise bad_request(INVALID_ID_MESSAGE)
    row_id = int(raw)
    if not 0 < row_id <= MAX_ID:
        raise bad_request(INVALID_ID_MESSAGE)
    return row_id


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def all_present(*values: Any) -> bool:
    return all(is_present(v) for v in values)


def optional(value: Any) -> Any:
    """
    Absent optional fields are stored as NULL; an empty string counts as absent.
    """
    return value if is_present(value) else None
