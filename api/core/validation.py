"""
Presence checks shared by the feature services.
"""

from __future__ import annotations

from typing import Any

# Row ids are Postgres int4 (SERIAL).
MAX_ROW_ID = 2_147_483_647


def parse_id(raw: str | int | None) -> int | None:
    """
    Turn a path identifier into a row id.

    Returns None for anything that is not an identifier at all (empty,
    negative, non-numeric), so callers can answer NotFound without touching
    the DB. Numbers beyond the column range are still identifiers; see
    `can_exist`.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    text = (raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def can_exist(row_id: int) -> bool:
    """
    False for ids the id column cannot hold; no row can match them and
    asyncpg refuses to encode them.
    """
    return 0 <= row_id <= MAX_ROW_ID


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
