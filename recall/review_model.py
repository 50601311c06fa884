from sqlalchemy import JSON, Column, Date, DateTime, Float, Integer, SmallInteger, String
from sqlalchemy.orm import declarative_base
from uuid import uuid4

Base = declarative_base()


class ReviewItemModel(Base):
    __tablename__ = 'review_items'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(String, nullable=False, index=True)
    topic = Column(String, nullable=False)
    question = Column(JSON, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    # repetition count, named after the level shown in the library
    srs_level = Column(SmallInteger, nullable=False, default=0)
    ease_factor = Column(Float, nullable=False, default=2.5)
    interval_days = Column(Integer, nullable=False, default=1)
    last_reviewed_at = Column(Integer, nullable=True)
    next_review_at = Column(Integer, nullable=False, index=True)
    created_at = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<ReviewItemModel(id={self.id}, topic={self.topic}, srs_level={self.srs_level}, interval_days={self.interval_days})>"


class LearningStatsModel(Base):
    __tablename__ = 'learning_stats'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=False, unique=True)
    total_xp = Column(Integer, nullable=False, default=0)
    current_streak = Column(Integer, nullable=False, default=0)
    last_activity_date = Column(Date, nullable=True)
    items_mastered = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, nullable=False)
