from dataclasses import dataclass, field
from datetime import datetime, timezone

from recall.sm2_algorithm import SchedulingState


@dataclass
class ReviewItem:
    id: str|None
    user_id: str
    topic: str
    question: dict
    schedule: SchedulingState
    next_review_at: datetime
    created_at: datetime
    last_reviewed_at: datetime|None = None
    tags: list[str] = field(default_factory=list)

    @staticmethod
    def new_item(user_id: str, topic: str, question: dict, tags: list[str]|None = None) -> 'ReviewItem':
        now = datetime.now(timezone.utc)
        return ReviewItem(
            id=None,
            user_id=user_id,
            topic=topic,
            question=question,
            schedule=SchedulingState.new_state(),
            next_review_at=now,
            created_at=now,
            tags=list(tags or []),
        )

    def apply(self, schedule: SchedulingState, reviewed_at: datetime, next_review_at: datetime):
        self.schedule = schedule
        self.last_reviewed_at = reviewed_at
        self.next_review_at = next_review_at
