from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone

from recall.config import settings
from recall.errors import ItemNotFoundError, ValidationError
from recall.grade import validate_grade
from recall.learning_stats import xp_reward
from recall.learning_stats_resolver import LearningStatsResolver
from recall.logging import logger
from recall.review_item import ReviewItem
from recall.review_item_repository import ReviewItemRepository
from recall.sm2_algorithm import compute_next_schedule, next_review_at


@dataclass
class ReviewResult:
    item: ReviewItem
    next_review_at: datetime
    xp_reward: int


@dataclass
class UserStats:
    heatmap: list[dict] = field(default_factory=list)
    streak: int = 0
    xp: int = 0
    mastered: int = 0


class Review:

    def __init__(
        self,
        stats_resolver: LearningStatsResolver,
        item_repository: ReviewItemRepository,
        mastered_level: int = settings.mastered_level,
    ):
        self.stats_resolver = stats_resolver
        self.item_repository = item_repository
        self.mastered_level = mastered_level

    def submit_review(self, item_id: str, grade: int, now: datetime|None = None) -> ReviewResult:
        now = _review_time(now)

        try:
            grade = validate_grade(grade)
        except ValidationError:
            logger.warning("review_rejected", item_id=item_id, grade=grade, reason="invalid_grade")
            raise

        item = self.item_repository.get(item_id)
        if item is None:
            logger.warning("review_rejected", item_id=item_id, grade=int(grade), reason="item_not_found")
            raise ItemNotFoundError(item_id)

        try:
            schedule = compute_next_schedule(item.schedule, grade)
        except ValidationError:
            logger.warning("review_rejected", item_id=item_id, grade=int(grade), reason="invalid_state")
            raise

        due = next_review_at(schedule, now)

        item.apply(schedule, reviewed_at=now, next_review_at=due)
        self.item_repository.save(item)

        logger.info(
            "review_submitted",
            item_id=item.id,
            grade=int(grade),
            interval=schedule.interval,
            repetition=schedule.repetition,
            ease_factor=schedule.ease_factor,
            next_review_at=due.isoformat(),
        )

        reward = xp_reward(grade)
        stats = self.stats_resolver.resolve(item.user_id)
        stats.record_activity(
            today=now.date(),
            xp=reward,
            items_mastered=self.item_repository.count_mastered(item.user_id, self.mastered_level),
        )
        self.stats_resolver.learning_stats_repository.save(stats)

        return ReviewResult(item=item, next_review_at=due, xp_reward=reward)

    def get_user_stats(self, user_id: str) -> UserStats:
        activity = Counter(self.item_repository.activity_dates(user_id))
        heatmap = [
            {'date': day.isoformat(), 'count': count}
            for day, count in sorted(activity.items())
        ]

        stats = self.stats_resolver.learning_stats_repository.get_by_user_id(user_id)

        return UserStats(
            heatmap=heatmap,
            streak=stats.current_streak if stats else 0,
            xp=stats.total_xp if stats else 0,
            mastered=self.item_repository.count_mastered(user_id, self.mastered_level),
        )


def _review_time(now: datetime|None) -> datetime:
    # stored as whole unix seconds in UTC, naive values are taken as UTC
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    return now.replace(microsecond=0)
