"""Shaped application errors.

Each error carries the HTTP status and the client-facing message. They are
raised by validation and lookup code and rendered by
:mod:`news_api.core.error_handlers`.
"""
from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    status: int = 400
    msg: str = "Bad request"

    def __init__(self, msg: Optional[str] = None, *, status: Optional[int] = None) -> None:
        if msg is not None:
            self.msg = msg
        if status is not None:
            self.status = status
        super().__init__(self.msg)


class InvalidInput(ApiError):
    msg = "Invalid input"


class InvalidSortColumn(ApiError):
    msg = "Invalid sort by query"


class InvalidOrder(ApiError):
    msg = "Invalid order query"


class MalformedBody(ApiError):
    msg = "Malformed body/missing required fields"


class OutOfRange(ApiError):
    msg = "Out of range for type integer - choose a smaller number"


class NotFound(ApiError):
    status = 404
    msg = "Not found"


class ForeignKeyViolation(ApiError):
    # msg comes from the store's detail line
    status = 404
    msg = "Referenced row does not exist"
