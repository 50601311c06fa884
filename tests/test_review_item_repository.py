from datetime import date, datetime, timedelta, timezone

from sqlalchemy.orm import sessionmaker

from conftest import engine
from recall.review_item import ReviewItem
from recall.review_item_repository import ReviewItemRepository
from recall.review_model import ReviewItemModel
from recall.sm2_algorithm import SchedulingState

Session = sessionmaker(bind=engine)

QUESTION = {
    'q': "What does SM-2 stand for?",
    'options': ["SuperMemo 2", "Spaced Memory 2"],
    'answer': "SuperMemo 2",
    'explanation': "The scheduler is named after SuperMemo 2.",
}


def _timestamp(value: datetime) -> int:
    return int(value.timestamp())


def test_get_review_item():
    repository = ReviewItemRepository()
    now = datetime(2024, 5, 10, 8, 0, tzinfo=timezone.utc)

    session = Session()
    session.add(ReviewItemModel(
        id="item-1",
        user_id="test",
        topic="Algorithms",
        question=QUESTION,
        tags=["srs"],
        srs_level=3,
        ease_factor=2.7,
        interval_days=16,
        last_reviewed_at=_timestamp(now),
        next_review_at=_timestamp(now + timedelta(days=16)),
        created_at=_timestamp(now - timedelta(days=20)),
    ))
    session.commit()

    item = repository.get("item-1")

    assert item is not None
    assert item.schedule == SchedulingState(interval=16, repetition=3, ease_factor=2.7)
    assert item.question == QUESTION
    assert item.tags == ["srs"]
    assert item.last_reviewed_at == now
    assert item.next_review_at == now + timedelta(days=16)


def test_get_missing_review_item():
    assert ReviewItemRepository().get("missing") is None


def test_save_new_review_item_assigns_id():
    repository = ReviewItemRepository()
    item = ReviewItem.new_item("test", "Algorithms", QUESTION, tags=["srs"])

    repository.save(item)

    assert item.id is not None
    saved = repository.get(item.id)
    assert saved.schedule == SchedulingState.new_state()
    assert saved.last_reviewed_at is None
    assert saved.topic == "Algorithms"


def test_save_existing_review_item_updates_schedule():
    repository = ReviewItemRepository()
    item = ReviewItem.new_item("test", "Algorithms", QUESTION)
    repository.save(item)
    item_id = item.id

    reviewed_at = datetime(2024, 5, 10, 8, 0, tzinfo=timezone.utc)
    item.apply(SchedulingState(6, 2, 2.6), reviewed_at=reviewed_at, next_review_at=reviewed_at + timedelta(days=6))
    repository.save(item)

    assert item.id == item_id
    session = Session()
    assert session.query(ReviewItemModel).count() == 1

    row = session.get(ReviewItemModel, item_id)
    assert row.srs_level == 2
    assert row.interval_days == 6
    assert row.ease_factor == 2.6
    assert row.next_review_at == _timestamp(reviewed_at + timedelta(days=6))


def test_count_mastered():
    repository = ReviewItemRepository()
    for level in [0, 2, 4, 5]:
        item = ReviewItem.new_item("test", "Algorithms", QUESTION)
        item.schedule = SchedulingState(1, level, 2.5)
        repository.save(item)

    other = ReviewItem.new_item("other", "Algorithms", QUESTION)
    other.schedule = SchedulingState(1, 6, 2.5)
    repository.save(other)

    assert repository.count_mastered("test", 4) == 2
    assert repository.count_mastered("test", 1) == 3
    assert repository.count_mastered("nobody", 4) == 0


def test_activity_dates():
    repository = ReviewItemRepository()
    created_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    reviewed = ReviewItem.new_item("test", "Algorithms", QUESTION)
    reviewed.created_at = created_at
    reviewed.last_reviewed_at = created_at + timedelta(days=2)
    repository.save(reviewed)

    fresh = ReviewItem.new_item("test", "Algorithms", QUESTION)
    fresh.created_at = created_at
    repository.save(fresh)

    assert sorted(repository.activity_dates("test")) == [
        date(2024, 5, 1),
        date(2024, 5, 1),
        date(2024, 5, 3),
    ]
