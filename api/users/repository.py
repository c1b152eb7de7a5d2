"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_users() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name
        FROM users
        ORDER BY id
        """
    )


async def get_user_by_id(user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def insert_user(*, name: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO users (name)
        VALUES ($1)
        RETURNING id
        """,
        name,
    )
    if row is None:
        raise RuntimeError("Failed to insert user.")
    return {"id": int(row["id"])}


async def update_user(user_id: int, *, name: str) -> None:
    await db.execute(
        """
        UPDATE users
        SET name = $2
        WHERE id = $1
        """,
        user_id,
        name,
    )


async def remove_user(user_id: int) -> None:
    await db.execute(
        """
        DELETE FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def list_user_posts(user_id: int) -> list[dict]:
    """
    Posts written by one user, with the author's name as `postedBy`.
    """
    return await db.fetch_all(
        """
        SELECT p.id, p.text, p.user_id AS "userId", u.name AS "postedBy"
        FROM posts p
        JOIN users u ON u.id = p.user_id
        WHERE p.user_id = $1
        ORDER BY p.id
        """,
        user_id,
    )
