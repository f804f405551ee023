# news_api/models/schemas.py
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from typing import Optional, List
from datetime import datetime


# --- Articles ---
# List shape, without body
class ArticleSummary(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None
    comment_count: int = 0


# Single article by id and the vote update response
class Article(ArticleSummary):
    body: str


class ArticleList(BaseModel):
    articles: List[ArticleSummary]


class ArticleEnvelope(BaseModel):
    article: Article


# --- Comments ---
class Comment(BaseModel):
    comment_id: int
    body: str
    article_id: int
    author: str
    votes: int
    created_at: datetime


class CommentList(BaseModel):
    comments: List[Comment]


class CommentEnvelope(BaseModel):
    comment: Comment


# --- Reference data ---
class Topic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: Optional[str] = None


class TopicList(BaseModel):
    topics: List[Topic]


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    name: str
    avatar_url: Optional[str] = None


class UserList(BaseModel):
    users: List[User]


# --- Request bodies ---
# Fields are optional here; presence is checked by the services so a missing
# field reports "Malformed body" instead of a schema error.
class NewComment(BaseModel):
    username: Optional[str] = None
    body: Optional[str] = None

    @field_validator("username", "body", mode="before")
    def scalars_to_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class VoteUpdate(BaseModel):
    inc_votes: Optional[StrictInt] = None
