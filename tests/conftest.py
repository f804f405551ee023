from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import news_api`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


class FakeConnection:
    """Stand-in for an asyncpg connection.

    Responses are replayed in call order; an exception instance in the queue
    is raised instead of returned. Every call is recorded as (method, sql, args).
    """

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    async def _next(self, method, sql, args):
        self.calls.append((method, sql, args))
        assert self.responses, f"unexpected {method}: {sql}"
        res = self.responses.pop(0)
        if isinstance(res, Exception):
            raise res
        return res

    async def fetch(self, sql, *args):
        return await self._next("fetch", sql, args)

    async def fetchrow(self, sql, *args):
        return await self._next("fetchrow", sql, args)

    async def fetchval(self, sql, *args):
        return await self._next("fetchval", sql, args)

    async def execute(self, sql, *args):
        return await self._next("execute", sql, args)


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def db(monkeypatch):
    import news_api.db.pool as db_pool

    conn = FakeConnection()
    monkeypatch.setattr(db_pool, "_pool", FakePool(conn))
    return conn


def _make_client(monkeypatch, **client_kwargs):
    # Patch DB init/close in lifespan to no-op
    import news_api.db.pool as db_pool
    import news_api.db.sa as db_sa

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "connect_db", _noop)
    monkeypatch.setattr(db_pool, "close_db", _noop)
    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)

    from news_api import main as main_mod

    return TestClient(main_mod.app, **client_kwargs)


@pytest.fixture()
def client(monkeypatch):
    with _make_client(monkeypatch) as test_client:
        yield test_client
    from news_api import main as main_mod

    main_mod.app.dependency_overrides.clear()


@pytest.fixture()
def lenient_client(monkeypatch):
    """Client that reports unhandled server errors as 500 responses."""
    with _make_client(monkeypatch, raise_server_exceptions=False) as test_client:
        yield test_client


CREATED = datetime(2020, 7, 9, 20, 11, tzinfo=timezone.utc)


def article_row(**overrides):
    row = {
        "article_id": 1,
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "created_at": CREATED,
        "votes": 100,
        "article_img_url": "https://images.pexels.com/photos/158651/news.jpeg",
        "comment_count": 11,
    }
    row.update(overrides)
    return row


def full_article_row(**overrides):
    row = article_row(body="I find this existence challenging")
    row.update(overrides)
    return row


def comment_row(**overrides):
    row = {
        "comment_id": 1,
        "body": "Oh, I've got compassion running out of my nose, pal!",
        "article_id": 9,
        "author": "butter_bridge",
        "votes": 16,
        "created_at": CREATED,
    }
    row.update(overrides)
    return row
