"""
User request handling.

Each public coroutine validates its input, makes its gateway call(s), and
returns exactly one `core.outcomes` value for the router to render.
"""

from __future__ import annotations

import logging

from fastapi import status

from core import outcomes, validation

from . import repository, schemas

USER_NOT_FOUND = "The user with the specified ID does not exist."
USER_FIELDS_REQUIRED = "Please provide name for the user."
USER_UPDATED = "The user has been updated"
USER_DELETED = "The user was deleted"

logger = logging.getLogger(__name__)


def validate_user(payload: schemas.UserPayload) -> outcomes.Invalid | None:
    if not validation.is_present(payload.name):
        return outcomes.Invalid(USER_FIELDS_REQUIRED)
    return None


async def list_users() -> outcomes.Outcome:
    try:
        users = await repository.list_users()
    except Exception as exc:
        logger.exception("user_list_failed")
        return outcomes.Failure("The users information could not be retrieved.", exc)
    return outcomes.Ok(users)


async def get_user(raw_user_id: str) -> outcomes.Outcome:
    user_id = validation.parse_id(raw_user_id)
    if user_id is None or not validation.can_exist(user_id):
        return outcomes.NotFound(USER_NOT_FOUND)

    try:
        user = await repository.get_user_by_id(user_id)
    except Exception as exc:
        logger.exception("user_get_failed user_id=%s", user_id)
        return outcomes.Failure("The user information could not be retrieved.", exc)

    if user is None:
        return outcomes.NotFound(USER_NOT_FOUND)
    return outcomes.Ok(user)


async def create_user(payload: schemas.UserPayload) -> outcomes.Outcome:
    invalid = validate_user(payload)
    if invalid is not None:
        return invalid

    try:
        inserted = await repository.insert_user(name=str(payload.name))
        # Re-read the row so the response reflects what was actually stored.
        user = await repository.get_user_by_id(int(inserted["id"]))
    except Exception as exc:
        logger.exception("user_insert_failed")
        return outcomes.Failure("There was an error while saving the user to the database", exc)

    if user is None:
        return outcomes.Invalid(USER_FIELDS_REQUIRED)
    return outcomes.Ok(user, status_code=status.HTTP_201_CREATED)


async def update_user(raw_user_id: str, payload: schemas.UserPayload) -> outcomes.Outcome:
    user_id = validation.parse_id(raw_user_id)
    if user_id is None:
        return outcomes.NotFound(USER_NOT_FOUND)

    invalid = validate_user(payload)
    if invalid is not None:
        return invalid

    if not validation.can_exist(user_id):
        # No row can match; same answer as an update that touches nothing.
        return outcomes.Ok({"message": USER_UPDATED})

    try:
        await repository.update_user(user_id, name=str(payload.name))
    except Exception as exc:
        logger.exception("user_update_failed user_id=%s", user_id)
        return outcomes.Failure("The user information could not be modified.", exc)
    return outcomes.Ok({"message": USER_UPDATED})


async def delete_user(raw_user_id: str) -> outcomes.Outcome:
    user_id = validation.parse_id(raw_user_id)
    if user_id is None:
        return outcomes.NotFound(USER_NOT_FOUND)

    if not validation.can_exist(user_id):
        return outcomes.Ok({"message": USER_DELETED})

    try:
        # Deleting an id that matches nothing still counts as success.
        await repository.remove_user(user_id)
    except Exception as exc:
        logger.exception("user_remove_failed user_id=%s", user_id)
        return outcomes.Failure("The user could not be removed", exc)
    return outcomes.Ok({"message": USER_DELETED})


async def list_user_posts(raw_user_id: str) -> outcomes.Outcome:
    user_id = validation.parse_id(raw_user_id)
    if user_id is None:
        return outcomes.NotFound(USER_NOT_FOUND)

    if not validation.can_exist(user_id):
        return outcomes.Ok([])

    try:
        posts = await repository.list_user_posts(user_id)
    except Exception as exc:
        logger.exception("user_posts_failed user_id=%s", user_id)
        return outcomes.Failure("The user's posts could not be retrieved.", exc)
    return outcomes.Ok(posts)
