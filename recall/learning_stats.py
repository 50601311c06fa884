from dataclasses import dataclass
from datetime import date, datetime, timezone

from recall.grade import Grade


def xp_reward(grade: Grade) -> int:
    if grade >= Grade.GOOD:
        return 15
    if grade == Grade.HARD:
        return 10
    return 5


@dataclass
class LearningStats:
    id: int|None
    user_id: str
    total_xp: int
    current_streak: int
    last_activity_date: date|None
    items_mastered: int
    updated_at: datetime

    @staticmethod
    def new_stats(user_id: str) -> 'LearningStats':
        return LearningStats(
            id=None,
            user_id=user_id,
            total_xp=0,
            current_streak=0,
            last_activity_date=None,
            items_mastered=0,
            updated_at=datetime.now(timezone.utc),
        )

    def record_activity(self, today: date, xp: int, items_mastered: int):
        if self.last_activity_date is not None and (today - self.last_activity_date).days <= 1:
            if self.last_activity_date != today:
                self.current_streak += 1
        else:
            self.current_streak = 1

        self.total_xp += xp
        self.items_mastered = items_mastered
        self.last_activity_date = today
        self.updated_at = datetime.now(timezone.utc)
