"""
Handler outcomes and their HTTP rendering.

Services return exactly one outcome per request; routers hand it to
`render`, which is the only place a response body is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from fastapi import status
from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class Ok:
    payload: Any
    status_code: int = status.HTTP_200_OK


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Invalid:
    message: str


@dataclass(frozen=True)
class Failure:
    error: str
    exc: BaseException


Outcome = Union[Ok, NotFound, Invalid, Failure]


def describe_error(exc: BaseException) -> dict[str, Any]:
    """
    JSON-safe view of a gateway exception for the `err` field.
    """
    described: dict[str, Any] = {
        "name": type(exc).__name__,
        "message": str(exc),
    }
    sqlstate = getattr(exc, "sqlstate", None)
    if sqlstate:
        described["code"] = str(sqlstate)
    return described


def render(outcome: Outcome) -> JSONResponse:
    if isinstance(outcome, Ok):
        return JSONResponse(status_code=outcome.status_code, content=outcome.payload)
    if isinstance(outcome, NotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": outcome.message},
        )
    if isinstance(outcome, Invalid):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errorMessage": outcome.message},
        )
    if isinstance(outcome, Failure):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": outcome.error, "err": describe_error(outcome.exc)},
        )
    raise TypeError(f"Unsupported outcome: {outcome!r}")
