"""
Shared fixtures: an in-memory persistence gateway and an HTTP client bound to
the ASGI app. The app lifespan is not run, so no database is needed.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from posts import repository as posts_repository
from users import repository as users_repository


class FakeTable:
    """
    Dict-backed stand-in for one table, recording every gateway call.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.next_id = 1
        self.calls: list[str] = []
        self.broken = False
        # When set, get-by-id misses even for rows that were just inserted.
        self.hide_rows = False

    def _enter(self, op: str, row_id: int | None = None) -> None:
        self.calls.append(op)
        if self.broken:
            raise ConnectionRefusedError("connection to database refused")
        # asyncpg cannot encode ids past the int4 column range.
        if row_id is not None and row_id > 2_147_483_647:
            raise OverflowError("value out of int32 range")

    def seed(self, **fields: Any) -> dict[str, Any]:
        row = {"id": self.next_id, **fields}
        self.rows[self.next_id] = row
        self.next_id += 1
        return dict(row)

    async def list_rows(self) -> list[dict[str, Any]]:
        self._enter("list")
        return [dict(row) for _, row in sorted(self.rows.items())]

    async def get_row(self, row_id: int) -> dict[str, Any] | None:
        self._enter("get", row_id)
        if self.hide_rows:
            return None
        row = self.rows.get(row_id)
        return dict(row) if row is not None else None

    async def insert_row(self, **fields: Any) -> dict[str, int]:
        self._enter("insert")
        row = self.seed(**fields)
        return {"id": row["id"]}

    async def update_row(self, row_id: int, **fields: Any) -> None:
        self._enter("update", row_id)
        if row_id in self.rows:
            self.rows[row_id].update(fields)

    async def remove_row(self, row_id: int) -> None:
        self._enter("remove", row_id)
        self.rows.pop(row_id, None)


class FakeGateway:
    def __init__(self) -> None:
        self.users = FakeTable()
        self.posts = FakeTable()

    async def list_user_posts(self, user_id: int) -> list[dict[str, Any]]:
        self.users._enter("list_posts")
        author = self.users.rows.get(user_id)
        return [
            {**post, "postedBy": author["name"] if author else None}
            for post in await self.posts.list_rows()
            if post["userId"] == user_id
        ]


@pytest.fixture
def gateway(monkeypatch: pytest.MonkeyPatch) -> FakeGateway:
    fake = FakeGateway()

    async def insert_user(*, name: str) -> dict:
        return await fake.users.insert_row(name=name)

    async def update_user(user_id: int, *, name: str) -> None:
        return await fake.users.update_row(user_id, name=name)

    async def insert_post(*, text: str, user_id: int) -> dict:
        return await fake.posts.insert_row(text=text, userId=user_id)

    async def update_post(post_id: int, *, text: str, user_id: int) -> None:
        return await fake.posts.update_row(post_id, text=text, userId=user_id)

    monkeypatch.setattr(users_repository, "list_users", fake.users.list_rows)
    monkeypatch.setattr(users_repository, "get_user_by_id", fake.users.get_row)
    monkeypatch.setattr(users_repository, "insert_user", insert_user)
    monkeypatch.setattr(users_repository, "update_user", update_user)
    monkeypatch.setattr(users_repository, "remove_user", fake.users.remove_row)
    monkeypatch.setattr(users_repository, "list_user_posts", fake.list_user_posts)

    monkeypatch.setattr(posts_repository, "list_posts", fake.posts.list_rows)
    monkeypatch.setattr(posts_repository, "get_post_by_id", fake.posts.get_row)
    monkeypatch.setattr(posts_repository, "insert_post", insert_post)
    monkeypatch.setattr(posts_repository, "update_post", update_post)
    monkeypatch.setattr(posts_repository, "remove_post", fake.posts.remove_row)
    return fake


@pytest.fixture
async def client(gateway: FakeGateway) -> AsyncIterator[AsyncClient]:
    import main

    async with AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as ac:
        yield ac
