"""
Post persistence (raw SQL).

The `user_id` column is exposed as `userId` in every returned row.
"""

from __future__ import annotations

from core import db


async def list_posts() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, text, user_id AS "userId"
        FROM posts
        ORDER BY id
        """
    )


async def get_post_by_id(post_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, text, user_id AS "userId"
        FROM posts
        WHERE id = $1
        """,
        post_id,
    )


async def insert_post(*, text: str, user_id: int) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO posts (text, user_id)
        VALUES ($1, $2)
        RETURNING id
        """,
        text,
        user_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert post.")
    return {"id": int(row["id"])}


async def update_post(post_id: int, *, text: str, user_id: int) -> None:
    await db.execute(
        """
        UPDATE posts
        SET text = $2,
            user_id = $3
        WHERE id = $1
        """,
        post_id,
        text,
        user_id,
    )


async def remove_post(post_id: int) -> None:
    await db.execute(
        """
        DELETE FROM posts
        WHERE id = $1
        """,
        post_id,
    )
