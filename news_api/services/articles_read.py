from __future__ import annotations

from typing import List, Optional

from news_api.db.pool import pool
from news_api.services.articles_query import compose_articles_query
from news_api.services.existence import ensure_exists, require_row, resolve_id


async def list_articles(
    topic: Optional[str] = None,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
) -> List[dict]:
    plan = compose_articles_query(topic=topic, sort_by=sort_by, order=order)
    p = pool()
    async with p.acquire() as conn:
        if topic is not None:
            await ensure_exists(conn, "topic", topic)
        rows = await conn.fetch(plan.sql, *plan.args)
        return [dict(r) for r in rows]


async def get_article(article_id: str) -> dict:
    key = resolve_id(article_id)
    sql = """
    SELECT
      a.article_id, a.title, a.topic, a.author, a.body, a.created_at, a.votes, a.article_img_url,
      COUNT(c.comment_id)::int AS comment_count
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
    WHERE a.article_id = $1
    GROUP BY a.article_id
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, key)
        return dict(require_row(row, "article"))


async def list_comments(article_id: str) -> List[dict]:
    key = resolve_id(article_id)
    sql = """
    SELECT comment_id, body, article_id, author, votes, created_at
    FROM comments
    WHERE article_id = $1
    ORDER BY created_at DESC
    """
    p = pool()
    async with p.acquire() as conn:
        # 404 for a missing article, [] for an article without comments
        await ensure_exists(conn, "article", key)
        rows = await conn.fetch(sql, key)
        return [dict(r) for r in rows]
