"""Compatibility façade that re-exports article and comment service functions.

Routers import this module so tests can patch one place.
"""

from .articles_read import get_article, list_articles, list_comments  # noqa: F401
from .articles_write import update_article_votes  # noqa: F401
from .comments import delete_comment, insert_comment  # noqa: F401

__all__ = [
    "get_article",
    "list_articles",
    "list_comments",
    "update_article_votes",
    "insert_comment",
    "delete_comment",
]
