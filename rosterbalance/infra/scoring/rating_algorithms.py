"""
评分算法模块
将参与者的历史统计折算为单一的综合评分
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet

from rosterbalance.core.data_models import MAX_BASE_RATING, ParticipantStats, Position


# 可以同场配合的位置组合
COMPATIBLE_POSITIONS: Dict[Position, FrozenSet[Position]] = {
    Position.GOALKEEPER: frozenset({Position.GOALKEEPER}),
    Position.DEFENDER: frozenset({Position.DEFENDER, Position.FULLBACK}),
    Position.FULLBACK: frozenset({Position.FULLBACK, Position.DEFENDER}),
    Position.MIDFIELDER: frozenset({Position.MIDFIELDER, Position.FORWARD, Position.FULLBACK}),
    Position.FORWARD: frozenset({Position.FORWARD, Position.MIDFIELDER}),
}


class RatingAlgorithm(ABC):
    """评分算法基类: 定义评分算法接口"""

    @abstractmethod
    def rating(self, participant: ParticipantStats) -> float:
        """计算参与者的综合评分"""
        pass

    @abstractmethod
    def get_max_rating(self) -> float:
        """获取评分上限"""
        pass


class CompositeRatingAlgorithm(RatingAlgorithm):
    """综合评分算法: 基础评分 + 经验/进球/助攻/胜率加成，封顶为5分"""

    def __init__(
        self,
        experience_weight: float = 0.1,
        experience_matches: int = 50,
        goal_weight: float = 0.05,
        assist_weight: float = 0.05,
        win_rate_weight: float = 0.1,
        max_rating: float = MAX_BASE_RATING
    ):
        self.experience_weight = experience_weight
        self.experience_matches = experience_matches
        self.goal_weight = goal_weight
        self.assist_weight = assist_weight
        self.win_rate_weight = win_rate_weight
        self.max_rating = max_rating

    def get_max_rating(self) -> float:
        return self.max_rating

    def rating(self, participant: ParticipantStats) -> float:
        """
        计算综合评分

        公式: base + min(matches/50, 1)*0.1 + goals/matches*0.05
              + assists/matches*0.05 + win_rate*0.1
        场次为0时按1场计算进球和助攻率。
        """
        matches = participant.total_matches
        played = max(matches, 1)

        experience_bonus = min(matches / self.experience_matches, 1) * self.experience_weight
        goal_bonus = (participant.total_goals / played) * self.goal_weight
        assist_bonus = (participant.total_assists / played) * self.assist_weight
        win_rate_bonus = participant.win_rate * self.win_rate_weight

        total = participant.rating + experience_bonus + goal_bonus + assist_bonus + win_rate_bonus
        return min(total, self.max_rating)

    def compatibility(self, first: ParticipantStats, second: ParticipantStats) -> float:
        """
        计算两名参与者的配合度（0-1）

        位置可配合 +0.3，惯用脚相同 +0.1，经验接近最多 +0.2，评分接近最多 +0.4。
        分队算法不使用该值，仅供调用方参考。
        """
        score = 0.0

        if second.position in COMPATIBLE_POSITIONS[first.position]:
            score += 0.3

        if first.preferred_foot == second.preferred_foot:
            score += 0.1

        matches_diff = abs(first.total_matches - second.total_matches)
        score += max(0.0, 1 - matches_diff / 100) * 0.2

        rating_diff = abs(self.rating(first) - self.rating(second))
        score += max(0.0, 1 - rating_diff / self.max_rating) * 0.4

        return min(score, 1.0)
