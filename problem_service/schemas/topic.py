from pydantic import Field
from datetime import datetime
from typing import List, Optional

from problem_service.schemas.problem import CamelModel


class TopicBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)


class TopicCreate(TopicBase):
    pass


class Topic(TopicBase):
    id: int
    created_at: Optional[datetime] = None


class TopicList(CamelModel):
    topics: List[Topic]
