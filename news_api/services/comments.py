from __future__ import annotations

import logging
from typing import Optional

from news_api.core.errors import MalformedBody
from news_api.db.pool import pool
from news_api.services.existence import not_found, resolve_id

logger = logging.getLogger("news_api.comments")


async def insert_comment(article_id: str, username: Optional[str], body: Optional[str]) -> dict:
    key = resolve_id(article_id)
    # Checked here rather than left to NOT NULL so the client gets a useful message
    if not username or not body:
        raise MalformedBody()
    sql = """
    INSERT INTO comments (article_id, author, body)
    VALUES ($1, $2, $3)
    RETURNING comment_id, body, article_id, author, votes, created_at
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, key, username, body)
    comment = dict(row)
    logger.info(
        "Comment created",
        extra={"event": "comment_created", "comment_id": comment["comment_id"], "article_id": key, "author": username},
    )
    return comment


def _affected(status: str) -> int:
    # asyncpg returns the command tag, e.g. "DELETE 1"
    return int(status.split()[-1])


async def delete_comment(comment_id: str) -> None:
    key = resolve_id(comment_id)
    p = pool()
    async with p.acquire() as conn:
        status = await conn.execute("DELETE FROM comments WHERE comment_id = $1", key)
    if _affected(status) == 0:
        raise not_found("comment")
    logger.info("Comment deleted", extra={"event": "comment_deleted", "comment_id": key})
