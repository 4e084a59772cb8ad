import logging

from sqlalchemy.orm import Session

from problem_service.core.exceptions import InvalidInputError
from problem_service.core.repository import DB_INT_MAX, find_or_fail
from problem_service.models.topic import Topic
from problem_service.schemas.topic import TopicCreate

logger = logging.getLogger(__name__)


class TopicManager:
    """トピック管理クラス（問題の参照先）"""

    def __init__(self, db: Session):
        self.db = db

    def get_one(self, topic_id):
        return find_or_fail(self.db, Topic, topic_id, 'Topic is not found')

    def get_all(self, page, limit):
        if page < 1 or limit < 1:
            raise InvalidInputError('Invalid page or limit')

        offset = (page - 1) * limit
        if offset > DB_INT_MAX:
            return []

        return (
            self.db.query(Topic)
            .order_by(Topic.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def create(self, data: TopicCreate):
        title = data.title.strip()
        if not title:
            raise InvalidInputError('Topic title is required')

        topic = Topic(title=title)
        self.db.add(topic)
        self.db.commit()
        self.db.refresh(topic)
        logger.info("Created topic %s (%s)", topic.id, topic.title)
        return topic
