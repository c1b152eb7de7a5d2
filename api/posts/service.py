"""
Post request handling.
"""

from __future__ import annotations

import logging

from fastapi import status

from core import outcomes, validation

from . import repository, schemas

POST_NOT_FOUND = "The post with the specified ID does not exist."
POST_FIELDS_REQUIRED = "Please provide text and userId for the post."
# Update wording ("has updated") is part of the public contract.
POST_UPDATED = "The post has updated"
POST_DELETED = "The post was deleted"

logger = logging.getLogger(__name__)


def validate_post(payload: schemas.PostPayload) -> outcomes.Invalid | None:
    if not validation.is_present(payload.text) or not validation.is_present(payload.userId):
        return outcomes.Invalid(POST_FIELDS_REQUIRED)
    return None


async def list_posts() -> outcomes.Outcome:
    try:
        posts = await repository.list_posts()
    except Exception as exc:
        logger.exception("post_list_failed")
        return outcomes.Failure("The posts information could not be retrieved.", exc)
    return outcomes.Ok(posts)


async def get_post(raw_post_id: str) -> outcomes.Outcome:
    post_id = validation.parse_id(raw_post_id)
    if post_id is None or not validation.can_exist(post_id):
        return outcomes.NotFound(POST_NOT_FOUND)

    try:
        post = await repository.get_post_by_id(post_id)
    except Exception as exc:
        logger.exception("post_get_failed post_id=%s", post_id)
        return outcomes.Failure("The post information could not be retrieved.", exc)

    if post is None:
        return outcomes.NotFound(POST_NOT_FOUND)
    return outcomes.Ok(post)


async def create_post(payload: schemas.PostPayload) -> outcomes.Outcome:
    invalid = validate_post(payload)
    if invalid is not None:
        return invalid

    try:
        inserted = await repository.insert_post(text=str(payload.text), user_id=int(payload.userId))
        post = await repository.get_post_by_id(int(inserted["id"]))
    except Exception as exc:
        logger.exception("post_insert_failed user_id=%s", payload.userId)
        return outcomes.Failure("There was an error while saving the post to the database", exc)

    if post is None:
        return outcomes.Invalid(POST_FIELDS_REQUIRED)
    return outcomes.Ok(post, status_code=status.HTTP_201_CREATED)


async def update_post(raw_post_id: str, payload: schemas.PostPayload) -> outcomes.Outcome:
    post_id = validation.parse_id(raw_post_id)
    if post_id is None:
        return outcomes.NotFound(POST_NOT_FOUND)

    invalid = validate_post(payload)
    if invalid is not None:
        return invalid

    if not validation.can_exist(post_id):
        return outcomes.Ok({"message": POST_UPDATED})

    try:
        await repository.update_post(post_id, text=str(payload.text), user_id=int(payload.userId))
    except Exception as exc:
        logger.exception("post_update_failed post_id=%s", post_id)
        return outcomes.Failure("The post information could not be modified.", exc)
    return outcomes.Ok({"message": POST_UPDATED})


async def delete_post(raw_post_id: str) -> outcomes.Outcome:
    post_id = validation.parse_id(raw_post_id)
    if post_id is None:
        return outcomes.NotFound(POST_NOT_FOUND)

    if not validation.can_exist(post_id):
        return outcomes.Ok({"message": POST_DELETED})

    try:
        await repository.remove_post(post_id)
    except Exception as exc:
        logger.exception("post_remove_failed post_id=%s", post_id)
        return outcomes.Failure("The post could not be removed", exc)
    return outcomes.Ok({"message": POST_DELETED})
