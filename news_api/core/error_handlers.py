"""Error normalization for the HTTP layer.

Failures raised anywhere below a route handler travel up unhandled and are
classified here, in one place. ``CLASSIFIERS`` is evaluated in order and the
first classifier that recognizes the failure decides the response; a failure
nobody recognizes is re-raised so the server answers with a generic 500.

Every classified failure is rendered as ``{"msg": <string>}``.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from news_api.core.errors import (
    ApiError,
    ForeignKeyViolation,
    InvalidInput,
    MalformedBody,
    OutOfRange,
)


logger = logging.getLogger("news_api.errors")

Classifier = Callable[[Exception], Optional[ApiError]]

# SQLSTATE codes understood by the store classifier
INVALID_TEXT_REPRESENTATION = "22P02"
NUMERIC_VALUE_OUT_OF_RANGE = "22003"
FOREIGN_KEY_VIOLATION = "23503"

# pydantic error types meaning "the body (or a required field) is not there"
_MISSING_BODY_TYPES = {
    "missing",
    "json_invalid",
    "model_type",
    "model_attributes_type",
    "dict_type",
}


def classify_api_error(exc: Exception) -> Optional[ApiError]:
    if isinstance(exc, ApiError):
        return exc
    return None


def classify_request_validation(exc: Exception) -> Optional[ApiError]:
    if not isinstance(exc, RequestValidationError):
        return None
    errors = exc.errors()
    if any(err.get("type") in _MISSING_BODY_TYPES for err in errors):
        return MalformedBody()
    return InvalidInput()


def classify_store_error(exc: Exception) -> Optional[ApiError]:
    if not isinstance(exc, asyncpg.PostgresError):
        return None
    code = getattr(exc, "sqlstate", None)
    if code == INVALID_TEXT_REPRESENTATION:
        return InvalidInput()
    if code == NUMERIC_VALUE_OUT_OF_RANGE:
        return OutOfRange()
    if code == FOREIGN_KEY_VIOLATION:
        detail = getattr(exc, "detail", None)
        return ForeignKeyViolation(detail) if detail else ForeignKeyViolation()
    return None


CLASSIFIERS: List[Classifier] = [
    classify_api_error,
    classify_request_validation,
    classify_store_error,
]


def classify(exc: Exception) -> Optional[ApiError]:
    for classifier in CLASSIFIERS:
        shaped = classifier(exc)
        if shaped is not None:
            return shaped
    return None


async def normalize_error(request: Request, exc: Exception) -> JSONResponse:
    shaped = classify(exc)
    if shaped is None:
        # server error middleware logs the traceback and answers 500
        raise exc
    level = logging.INFO if shaped is exc else logging.WARNING
    logger.log(
        level,
        "Request failed: %s",
        shaped.msg,
        extra={
            "event": "error_classified",
            "path": request.url.path,
            "status": shaped.status,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=shaped.status, content={"msg": shaped.msg})


async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    msg = "Invalid URL" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"msg": msg}, headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    for exc_type in (ApiError, RequestValidationError, asyncpg.PostgresError):
        app.add_exception_handler(exc_type, normalize_error)
    app.add_exception_handler(StarletteHTTPException, http_error)
