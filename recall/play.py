from recall.database import engine
from recall.errors import ItemNotFoundError
from recall.learning_stats_repository import LearningStatsRepository
from recall.learning_stats_resolver import LearningStatsResolver
from recall.logging import configure_logging
from recall.review import Review
from recall.review_item_repository import ReviewItemRepository
from recall.review_model import Base


def main():
    configure_logging()
    Base.metadata.create_all(engine)

    review = Review(
        stats_resolver=LearningStatsResolver(LearningStatsRepository()),
        item_repository=ReviewItemRepository(),
    )

    while True:
        item_id = input("Item id (empty to quit): ").strip()
        if not item_id:
            break

        grade = input("Grade (0=Blackout ... 3=Hard, 4=Good, 5=Easy): ").strip()
        try:
            result = review.submit_review(item_id, int(grade))
        except (ValueError, ItemNotFoundError) as e:
            print(f"Rejected: {e}")
            continue

        schedule = result.item.schedule
        print(f"Next review in {schedule.interval} day(s) on {result.next_review_at.date().isoformat()} (+{result.xp_reward} XP)")


if __name__ == "__main__":
    main()
