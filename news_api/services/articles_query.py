"""Composition of the article collection query.

Optional filters each contribute a predicate with its own ``$n`` placeholder
and a bound value; the ORDER BY target comes only from the sort allow-list in
:mod:`news_api.core.validators`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from news_api.core.validators import validate_sorting


ARTICLE_COLUMNS = """
    a.article_id, a.title, a.topic, a.author, a.created_at, a.votes, a.article_img_url
"""

# Predicate builder: receives the placeholder index, returns (sql, value)
# or None when its input was not supplied.
FilterBuilder = Callable[[int], Optional[Tuple[str, Any]]]


@dataclass
class QueryPlan:
    sql: str
    args: List[Any] = field(default_factory=list)


def topic_filter(topic: Optional[str]) -> FilterBuilder:
    def build(idx: int) -> Optional[Tuple[str, Any]]:
        if topic is None:
            return None
        return "a.topic = $%d" % idx, topic
    return build


def compose_where(builders: List[FilterBuilder]) -> Tuple[str, List[Any]]:
    filters: List[str] = []
    args: List[Any] = []
    for build in builders:
        clause = build(len(args) + 1)
        if clause is None:
            continue
        sql, value = clause
        filters.append(sql)
        args.append(value)
    where_sql = ("WHERE " + " AND ".join(filters)) if filters else ""
    return where_sql, args


def compose_articles_query(
    topic: Optional[str] = None,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
) -> QueryPlan:
    sort_sql, order_sql = validate_sorting(sort_by, order)
    where_sql, args = compose_where([topic_filter(topic)])
    sql = f"""
        SELECT {ARTICLE_COLUMNS.strip()},
            COUNT(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        {where_sql}
        GROUP BY a.article_id
        ORDER BY {sort_sql} {order_sql}
        """
    return QueryPlan(sql=sql, args=args)
