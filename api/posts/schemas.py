"""
Pydantic request schemas for post endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt


class PostPayload(BaseModel):
    text: str | None = None
    # References users.id; existence is not checked. Strict so
    # JSON booleans and numeric strings are rejected instead of coerced.
    userId: StrictInt | None = None
