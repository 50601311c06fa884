from datetime import date, datetime, timezone

from recall.database import Session
from recall.review_item import ReviewItem
from recall.review_model import ReviewItemModel
from recall.sm2_algorithm import SchedulingState


class ReviewItemRepository:

    def get(self, item_id: str) -> ReviewItem|None:
        with Session() as session:
            row = session.get(ReviewItemModel, item_id)
            if row is None:
                return None

            return self._map_item(row)

    def save(self, item: ReviewItem):
        with Session() as session:
            row = session.get(ReviewItemModel, item.id) if item.id is not None else None

            if row is None:
                row = ReviewItemModel(id=item.id) if item.id is not None else ReviewItemModel()
                row.created_at = _to_timestamp(item.created_at)

            self.update(row, item)
            session.add(row)
            session.commit()

            item.id = row.id

    def count_mastered(self, user_id: str, level: int) -> int:
        with Session() as session:
            return (
                session.query(ReviewItemModel)
                    .filter(ReviewItemModel.user_id == user_id)
                    .filter(ReviewItemModel.srs_level >= level)
                    .count()
            )

    def activity_dates(self, user_id: str) -> list[date]:
        with Session() as session:
            rows = (
                session.query(ReviewItemModel.created_at, ReviewItemModel.last_reviewed_at)
                    .filter(ReviewItemModel.user_id == user_id)
                    .all()
            )

        dates = []
        for created_at, last_reviewed_at in rows:
            dates.append(_from_timestamp(created_at).date())
            if last_reviewed_at is not None:
                dates.append(_from_timestamp(last_reviewed_at).date())

        return dates

    def update(self, row: ReviewItemModel, item: ReviewItem) -> ReviewItemModel:
        row.user_id = item.user_id
        row.topic = item.topic
        row.question = item.question
        row.tags = list(item.tags)
        row.srs_level = item.schedule.repetition
        row.ease_factor = item.schedule.ease_factor
        row.interval_days = item.schedule.interval
        row.last_reviewed_at = _to_timestamp(item.last_reviewed_at) if item.last_reviewed_at else None
        row.next_review_at = _to_timestamp(item.next_review_at)
        return row

    def _map_item(self, row: ReviewItemModel) -> ReviewItem:
        return ReviewItem(
            id=row.id,
            user_id=row.user_id,
            topic=row.topic,
            question=row.question,
            tags=list(row.tags or []),
            schedule=SchedulingState(
                interval=int(row.interval_days),
                repetition=int(row.srs_level),
                ease_factor=float(row.ease_factor),
            ),
            last_reviewed_at=_from_timestamp(row.last_reviewed_at) if row.last_reviewed_at is not None else None,
            next_review_at=_from_timestamp(row.next_review_at),
            created_at=_from_timestamp(row.created_at),
        )


def _to_timestamp(value: datetime) -> int:
    return int(value.timestamp())


def _from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)
