"""
Request pre-processing for user create/update routes.
"""

from __future__ import annotations

from . import schemas


async def normalized_user_payload(
    payload: schemas.UserPayload | None = None,
) -> schemas.UserPayload:
    """
    Upper-case the submitted `name` in place before the handler sees it.

    A missing name is passed through untouched; validation reports it.
    """
    if payload is None:
        payload = schemas.UserPayload()
    if isinstance(payload.name, str):
        payload.name = payload.name.upper()
    return payload
