from datetime import datetime, timezone

from recall.database import Session
from recall.learning_stats import LearningStats
from recall.review_model import LearningStatsModel


class LearningStatsRepository:

    def save(self, stats: LearningStats):
        with Session() as session:
            values = {
                'total_xp': stats.total_xp,
                'current_streak': stats.current_streak,
                'last_activity_date': stats.last_activity_date,
                'items_mastered': stats.items_mastered,
                'updated_at': datetime.now(timezone.utc),
            }

            if stats.id is None:
                model = LearningStatsModel(user_id=stats.user_id, **values)
                session.add(model)
                session.commit()
                stats.id = model.id
            else:
                session.query(LearningStatsModel).filter(LearningStatsModel.id == stats.id).update(values)
                session.commit()

    def get_by_user_id(self, user_id: str) -> LearningStats|None:
        with Session() as session:
            result = session.query(LearningStatsModel).filter(LearningStatsModel.user_id == user_id).first()
            if result is None:
                return None

            return LearningStats(
                id=result.id,
                user_id=result.user_id,
                total_xp=result.total_xp,
                current_streak=result.current_streak,
                last_activity_date=result.last_activity_date,
                items_mastered=result.items_mastered,
                updated_at=result.updated_at,
            )
