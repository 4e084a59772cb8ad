from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from problem_service.core.config import settings
from problem_service.core.database import get_db
from problem_service.core.repository import DB_INT_MIN, DB_INT_MAX
from problem_service.services.topic_service import TopicManager
from problem_service.schemas.topic import TopicCreate, Topic as TopicSchema, TopicList

router = APIRouter()


@router.get("/", response_model=TopicList)
def get_topics(
    page: int = Query(1, ge=1, le=DB_INT_MAX),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    """トピック一覧取得"""
    limit = min(limit or settings.DEFAULT_PAGE_LIMIT, settings.MAX_PAGE_LIMIT)
    return {"topics": TopicManager(db).get_all(page, limit)}


@router.get("/{topic_id}", response_model=TopicSchema)
def get_topic(topic_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX), db: Session = Depends(get_db)):
    """トピック詳細取得"""
    return TopicManager(db).get_one(topic_id)


@router.post("/", response_model=TopicSchema, status_code=status.HTTP_201_CREATED)
def create_topic(topic_data: TopicCreate, db: Session = Depends(get_db)):
    """トピック作成"""
    return TopicManager(db).create(topic_data)
