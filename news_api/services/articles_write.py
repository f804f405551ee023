from __future__ import annotations

import logging
from typing import Optional

from news_api.core.errors import MalformedBody
from news_api.db.pool import pool
from news_api.services.existence import require_row, resolve_id

logger = logging.getLogger("news_api.articles")


async def update_article_votes(article_id: str, inc_votes: Optional[int]) -> dict:
    """Apply a signed vote delta inside the store and return the updated article.

    The increment is a single ``votes = votes + $1`` UPDATE, so concurrent
    deltas against one article all land.
    """
    key = resolve_id(article_id)
    if inc_votes is None:
        raise MalformedBody()
    sql = """
    WITH updated AS (
      UPDATE articles
      SET votes = votes + $1
      WHERE article_id = $2
      RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
    )
    SELECT updated.*,
      (SELECT COUNT(*)::int FROM comments c WHERE c.article_id = updated.article_id) AS comment_count
    FROM updated
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, inc_votes, key)
    article = dict(require_row(row, "article"))
    logger.info(
        "Article votes updated",
        extra={"event": "article_votes_updated", "article_id": key, "delta": inc_votes, "votes": article["votes"]},
    )
    return article
