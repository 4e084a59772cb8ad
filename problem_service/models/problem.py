from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from problem_service.core.database import Base


class Problem(Base):
    __tablename__ = "problems"
    __table_args__ = (
        # 同じトピック内で order は重複不可
        UniqueConstraint("topic_id", "order", name="uq_problems_topic_id_order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True)
    order = Column(Integer, nullable=False)

    # {"fields": [{"index": 0, "value": "..."}]}
    answer = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # リレーション
    topic = relationship("Topic", back_populates="problems")
