from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models.tables import Topic, User


async def list_topics(session: AsyncSession) -> List[Topic]:
    res = await session.execute(select(Topic).order_by(Topic.slug))
    return list(res.scalars().all())


async def list_users(session: AsyncSession) -> List[User]:
    res = await session.execute(select(User).order_by(User.username))
    return list(res.scalars().all())
