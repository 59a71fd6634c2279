"""
分队策略模块
先按综合评分蛇形分配，再用有界的局部交换搜索缩小两队实力差
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from rosterbalance.core.data_models import ParticipantStats
from rosterbalance.core.exceptions import InsufficientParticipantsError
from rosterbalance.utils.logger import get_logger
from .team_strength import TeamStrengthModel

logger = get_logger(__name__)

MIN_PARTICIPANTS = 2
DEFAULT_MAX_SWAP_ITERATIONS = 10


class PartitionStrategy(ABC):
    """分队策略基类: 定义分队接口"""

    @abstractmethod
    def partition(
        self,
        pool: Sequence[ParticipantStats]
    ) -> Tuple[List[ParticipantStats], List[ParticipantStats]]:
        """将参与者分成A、B两队"""
        pass


class SnakeDraftSwapPartitioner(PartitionStrategy):
    """
    蛇形分配 + 首次改进交换的分队策略

    1. 按综合评分降序排序（稳定排序，同分保持输入顺序），偶数名次进A队，奇数名次进B队；
       人数为奇数时A队多一人。
    2. 最多迭代 max_iterations 轮：每轮按下标顺序尝试交换 A[i] 与 B[j]，
       一旦实力差变小即保留并进入下一轮；整轮没有可接受的交换则提前结束。

    只保证单次交换意义下的局部最优。对同一输入顺序结果是确定的。
    """

    def __init__(
        self,
        strength_model: Optional[TeamStrengthModel] = None,
        max_iterations: int = DEFAULT_MAX_SWAP_ITERATIONS
    ):
        if max_iterations < 0:
            raise ValueError(f"max_iterations 不能为负数: {max_iterations}")
        self.strength_model = strength_model or TeamStrengthModel()
        self.max_iterations = max_iterations

    @property
    def rating_algorithm(self):
        return self.strength_model.rating_algorithm

    def partition(
        self,
        pool: Sequence[ParticipantStats]
    ) -> Tuple[List[ParticipantStats], List[ParticipantStats]]:
        if len(pool) < MIN_PARTICIPANTS:
            raise InsufficientParticipantsError(len(pool), MIN_PARTICIPANTS)

        team_a, team_b = self.seed_split(pool)
        swaps = self.refine(team_a, team_b)
        logger.debug(
            f"分队完成: A队 {len(team_a)} 人, B队 {len(team_b)} 人, "
            f"接受交换 {swaps} 次, 实力差 {self.gap(team_a, team_b):.4f}"
        )
        return team_a, team_b

    def seed_split(
        self,
        pool: Sequence[ParticipantStats]
    ) -> Tuple[List[ParticipantStats], List[ParticipantStats]]:
        """按评分降序交替分配"""
        ranked = sorted(pool, key=self.rating_algorithm.rating, reverse=True)
        return ranked[0::2], ranked[1::2]

    def gap(self, team_a: Sequence[ParticipantStats], team_b: Sequence[ParticipantStats]) -> float:
        """两队实力差的绝对值"""
        return abs(self.strength_model.strength(team_a) - self.strength_model.strength(team_b))

    def refine(self, team_a: List[ParticipantStats], team_b: List[ParticipantStats]) -> int:
        """原地优化两队，返回接受的交换次数"""
        swaps = 0
        for iteration in range(self.max_iterations):
            current_gap = self.gap(team_a, team_b)
            if not self._swap_first_improvement(team_a, team_b, current_gap):
                logger.debug(f"第 {iteration + 1} 轮无可改进的交换，提前结束")
                break
            swaps += 1
        return swaps

    def _swap_first_improvement(
        self,
        team_a: List[ParticipantStats],
        team_b: List[ParticipantStats],
        current_gap: float
    ) -> bool:
        """找到第一个能缩小实力差的交换并保留，没有则两队保持原样"""
        for i in range(len(team_a)):
            for j in range(len(team_b)):
                team_a[i], team_b[j] = team_b[j], team_a[i]
                if self.gap(team_a, team_b) < current_gap:
                    return True
                team_a[i], team_b[j] = team_b[j], team_a[i]
        return False
