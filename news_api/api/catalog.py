from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.db.sa import get_session
from news_api.models.schemas import Topic, TopicList, User, UserList
from news_api.services import catalog

router = APIRouter(tags=["catalog"])


@router.get("/topics", response_model=TopicList, summary="All topics")
async def api_list_topics(session: AsyncSession = Depends(get_session)) -> TopicList:
    rows = await catalog.list_topics(session)
    return TopicList(topics=[Topic.model_validate(t) for t in rows])


@router.get("/users", response_model=UserList, summary="All users")
async def api_list_users(session: AsyncSession = Depends(get_session)) -> UserList:
    rows = await catalog.list_users(session)
    return UserList(users=[User.model_validate(u) for u in rows])
