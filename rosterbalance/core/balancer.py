"""
分队引擎入口
组装评分算法、实力模型、分队策略、报告器和候选方案生成器
"""

import random
from typing import List, Optional, Sequence

from rosterbalance.core.candidates import CandidateGenerator
from rosterbalance.core.data_models import BalancingResult, ParticipantStats
from rosterbalance.core.report import MatchReporter
from rosterbalance.infra.config import ConfigManager
from rosterbalance.infra.scoring import (
    DEFAULT_MAX_SWAP_ITERATIONS,
    CompositeRatingAlgorithm,
    RatingAlgorithm,
    SnakeDraftSwapPartitioner,
    TeamStrengthModel,
)


class RosterBalancer:
    """分队引擎: 对外提供单次分队和多候选方案两种调用方式，本身不保存任何状态"""

    def __init__(
        self,
        rating_algorithm: Optional[RatingAlgorithm] = None,
        max_swap_iterations: int = DEFAULT_MAX_SWAP_ITERATIONS,
        rng: Optional[random.Random] = None
    ):
        self.rating_algorithm = rating_algorithm or CompositeRatingAlgorithm()
        self.strength_model = TeamStrengthModel(self.rating_algorithm)
        self.partitioner = SnakeDraftSwapPartitioner(self.strength_model, max_swap_iterations)
        self.reporter = MatchReporter(self.strength_model)
        self.candidate_generator = CandidateGenerator(self.partitioner, self.reporter, rng)

    @classmethod
    def from_config(cls, config_manager: ConfigManager, seed: Optional[int] = None) -> 'RosterBalancer':
        """根据配置创建引擎，seed 优先于配置文件中的 random_seed"""
        if seed is None:
            seed = config_manager.get_random_seed()
        return cls(
            max_swap_iterations=config_manager.get_max_swap_iterations(),
            rng=random.Random(seed),
        )

    def rating(self, participant: ParticipantStats) -> float:
        return self.rating_algorithm.rating(participant)

    def balance(self, pool: Sequence[ParticipantStats]) -> BalancingResult:
        """按输入顺序分队一次（结果确定）"""
        return self.candidate_generator.run_once(pool)

    def generate(self, pool: Sequence[ParticipantStats], count: int = 3) -> List[BalancingResult]:
        """生成多个候选方案，按平衡度降序排列"""
        return self.candidate_generator.generate(pool, count)
