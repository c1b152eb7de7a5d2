"""
FastAPI router for post endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import outcomes

from . import schemas, service

router = APIRouter()


@router.get("/api/posts")
async def list_posts() -> JSONResponse:
    return outcomes.render(await service.list_posts())


@router.get("/api/posts/{post_id}")
async def get_post(post_id: str) -> JSONResponse:
    return outcomes.render(await service.get_post(post_id))


@router.post("/api/posts")
async def create_post(payload: schemas.PostPayload | None = None) -> JSONResponse:
    return outcomes.render(await service.create_post(payload or schemas.PostPayload()))


@router.put("/api/posts/{post_id}")
async def update_post(post_id: str, payload: schemas.PostPayload | None = None) -> JSONResponse:
    return outcomes.render(await service.update_post(post_id, payload or schemas.PostPayload()))


@router.delete("/api/posts/{post_id}")
async def delete_post(post_id: str) -> JSONResponse:
    return outcomes.render(await service.delete_post(post_id))
