# news_api/api/articles.py
from fastapi import APIRouter
from typing import Optional
from news_api.services import articles as svc
from news_api.models.schemas import (
    ArticleEnvelope,
    ArticleList,
    CommentEnvelope,
    CommentList,
    NewComment,
    VoteUpdate,
)

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=ArticleList, summary="List articles, filtered by topic and sorted")
async def api_list_articles(topic: Optional[str] = None,
                            sort_by: Optional[str] = None,
                            order: Optional[str] = None):
    rows = await svc.list_articles(topic=topic, sort_by=sort_by, order=order)
    return {"articles": rows}


@router.get("/{article_id}", response_model=ArticleEnvelope, summary="Single article by id")
async def api_get_article(article_id: str):
    article = await svc.get_article(article_id)
    return {"article": article}


@router.patch("/{article_id}", response_model=ArticleEnvelope, summary="Increment article votes")
async def api_patch_article(article_id: str, payload: Optional[VoteUpdate] = None):
    inc_votes = payload.inc_votes if payload else None
    article = await svc.update_article_votes(article_id, inc_votes)
    return {"article": article}


@router.get("/{article_id}/comments", response_model=CommentList, summary="Comments for an article, newest first")
async def api_list_comments(article_id: str):
    comments = await svc.list_comments(article_id)
    return {"comments": comments}


@router.post("/{article_id}/comments", response_model=CommentEnvelope, status_code=201,
             summary="Add a comment to an article")
async def api_post_comment(article_id: str, payload: Optional[NewComment] = None):
    username = payload.username if payload else None
    body = payload.body if payload else None
    comment = await svc.insert_comment(article_id, username, body)
    return {"comment": comment}
