"""
Pydantic request schemas for user endpoints.

Fields are optional on purpose: presence is checked by `service.validate_user`
so a missing name answers 400 with the API's own error body.
"""

from __future__ import annotations

from pydantic import BaseModel


class UserPayload(BaseModel):
    name: str | None = None
