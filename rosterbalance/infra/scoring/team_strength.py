"""
队伍实力模型
汇总队员综合评分，并加入位置多样性和集体经验加成
"""

from typing import Optional, Sequence

import numpy as np

from rosterbalance.core.data_models import ParticipantStats, Position
from .rating_algorithms import CompositeRatingAlgorithm, RatingAlgorithm


POSITION_CATEGORY_COUNT = len(Position)


class TeamStrengthModel:
    """队伍实力: 平均评分 + 位置覆盖加成 + 经验加成"""

    def __init__(
        self,
        rating_algorithm: Optional[RatingAlgorithm] = None,
        diversity_weight: float = 0.2,
        experience_weight: float = 0.1,
        experience_matches: int = 500
    ):
        self.rating_algorithm = rating_algorithm or CompositeRatingAlgorithm()
        self.diversity_weight = diversity_weight
        self.experience_weight = experience_weight
        self.experience_matches = experience_matches

    def average_rating(self, team: Sequence[ParticipantStats]) -> float:
        """队员综合评分的平均值"""
        if not team:
            return 0.0
        return float(np.mean([self.rating_algorithm.rating(p) for p in team]))

    def diversity_bonus(self, team: Sequence[ParticipantStats]) -> float:
        """位置覆盖越全加成越高，分母固定为位置类别数"""
        distinct_positions = len({p.position for p in team})
        return (distinct_positions / POSITION_CATEGORY_COUNT) * self.diversity_weight

    def experience_bonus(self, team: Sequence[ParticipantStats]) -> float:
        total_matches = sum(p.total_matches for p in team)
        return min(total_matches / self.experience_matches, 1) * self.experience_weight

    def strength(self, team: Sequence[ParticipantStats]) -> float:
        """计算队伍实力，空队伍为0"""
        if not team:
            return 0.0
        return self.average_rating(team) + self.diversity_bonus(team) + self.experience_bonus(team)
