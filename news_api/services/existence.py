from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from news_api.core.errors import NotFound, OutOfRange
from news_api.core.validators import validate_id

# Postgres int4
MAX_ID = 2_147_483_647


@dataclass(frozen=True)
class Entity:
    table: str
    key: str
    missing: str


ENTITIES = {
    "article": Entity(table="articles", key="article_id", missing="Article ID does not exist"),
    "comment": Entity(table="comments", key="comment_id", missing="Comment does not exist"),
    "topic": Entity(table="topics", key="slug", missing="Topic does not exist"),
}


def resolve_id(token: object) -> int:
    """Turn a path token into a store-sized integer id.

    Raises InvalidInput for a malformed token and OutOfRange for a numeric
    token the store's integer column cannot represent.
    """
    # strip leading zeros so the length check sees significant digits only
    text = validate_id(token).lstrip("0") or "0"
    if len(text) > len(str(MAX_ID)):
        raise OutOfRange()
    value = int(text)
    if value > MAX_ID:
        raise OutOfRange()
    return value


def not_found(entity: str) -> NotFound:
    return NotFound(ENTITIES[entity].missing)


def require_row(row: Optional[Mapping[str, Any]], entity: str) -> Mapping[str, Any]:
    if row is None:
        raise not_found(entity)
    return row


async def ensure_exists(conn, entity: str, key: Any) -> None:
    target = ENTITIES[entity]
    sql = f"SELECT 1 FROM {target.table} WHERE {target.key} = $1"
    found = await conn.fetchval(sql, key)
    if found is None:
        raise not_found(entity)
