"""
FastAPI router for user endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core import outcomes

from . import dependencies, schemas, service

router = APIRouter()


@router.get("/api/users")
async def list_users() -> JSONResponse:
    return outcomes.render(await service.list_users())


@router.get("/api/users/{user_id}")
async def get_user(user_id: str) -> JSONResponse:
    return outcomes.render(await service.get_user(user_id))


@router.get("/api/users/{user_id}/posts")
async def list_user_posts(user_id: str) -> JSONResponse:
    return outcomes.render(await service.list_user_posts(user_id))


@router.post("/api/users")
async def create_user(
    payload: schemas.UserPayload = Depends(dependencies.normalized_user_payload),
) -> JSONResponse:
    return outcomes.render(await service.create_user(payload))


@router.put("/api/users/{user_id}")
async def update_user(
    user_id: str,
    payload: schemas.UserPayload = Depends(dependencies.normalized_user_payload),
) -> JSONResponse:
    return outcomes.render(await service.update_user(user_id, payload))


@router.delete("/api/users/{user_id}")
async def delete_user(user_id: str) -> JSONResponse:
    return outcomes.render(await service.delete_user(user_id))
