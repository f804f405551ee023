from contextlib import asynccontextmanager

import logging

from fastapi import APIRouter, FastAPI

from news_api import config
from news_api.api import articles
from news_api.api import catalog as catalog_api
from news_api.api import comments as comments_api
from news_api.core.error_handlers import register_error_handlers
from news_api.db import pool as db_pool
from news_api.db import sa as db_sa


@asynccontextmanager
async def lifespan(app: FastAPI):
    # asyncpg pool for articles/comments, SQLAlchemy engine for topics/users
    await db_pool.connect_db()
    await db_sa.init_sa_engine()
    try:
        yield
    finally:
        await db_sa.close_sa_engine()
        await db_pool.close_db()


api_router = APIRouter(prefix="/api")
api_router.include_router(articles.router)
api_router.include_router(comments_api.router)
api_router.include_router(catalog_api.router)

app = FastAPI(
    lifespan=lifespan,
    root_path=config.ROOT_PATH,
)
app.include_router(api_router)
register_error_handlers(app)

# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
