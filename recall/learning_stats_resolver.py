from recall.learning_stats import LearningStats
from recall.learning_stats_repository import LearningStatsRepository


class LearningStatsResolver:

    def __init__(self, learning_stats_repository: LearningStatsRepository):
        self.learning_stats_repository = learning_stats_repository

    def resolve(self, user_id: str) -> LearningStats:
        stats = self.learning_stats_repository.get_by_user_id(user_id)
        if stats is None:
            stats = LearningStats.new_stats(user_id)
            self.learning_stats_repository.save(stats)

        return stats
