from __future__ import annotations

from typing import Optional, Tuple

from news_api.core.errors import InvalidInput, InvalidOrder, InvalidSortColumn

DEFAULT_SORT = "created_at"
DEFAULT_ORDER = "desc"

# sort key -> SQL expression; the only way a request can pick an ORDER BY target
SORT_COLUMNS = {
    "author": "a.author",
    "title": "a.title",
    "article_id": "a.article_id",
    "topic": "a.topic",
    "created_at": "a.created_at",
    "votes": "a.votes",
    "comment_count": "comment_count",
}

ORDERS = {"asc": "ASC", "desc": "DESC"}


def validate_id(token: object) -> str:
    """Accept only ASCII digit strings ("0" included); anything else is InvalidInput."""
    if isinstance(token, bool) or not isinstance(token, (str, int)):
        raise InvalidInput()
    text = str(token)
    if not text or not (text.isascii() and text.isdigit()):
        raise InvalidInput()
    return text


def validate_sort(sort_by: Optional[str]) -> str:
    key = DEFAULT_SORT if sort_by is None else sort_by
    if key not in SORT_COLUMNS:
        raise InvalidSortColumn()
    return SORT_COLUMNS[key]


def validate_order(order: Optional[str]) -> str:
    key = DEFAULT_ORDER if order is None else order.lower()
    if key not in ORDERS:
        raise InvalidOrder()
    return ORDERS[key]


def validate_sorting(sort_by: Optional[str], order: Optional[str]) -> Tuple[str, str]:
    return validate_sort(sort_by), validate_order(order)
