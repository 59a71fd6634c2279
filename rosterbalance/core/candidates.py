"""
候选分队方案生成模块
对打乱后的参与者顺序多次执行分队与报告，并按平衡度排序
"""

import random
from typing import List, Optional, Sequence

from rosterbalance.core.data_models import BalancingResult, ParticipantStats
from rosterbalance.core.report import MatchReporter
from rosterbalance.infra.scoring import PartitionStrategy, SnakeDraftSwapPartitioner
from rosterbalance.utils.logger import get_logger

logger = get_logger(__name__)


class CandidateGenerator:
    """候选方案生成器: 随机源可注入，便于固定种子复现结果"""

    def __init__(
        self,
        partitioner: Optional[PartitionStrategy] = None,
        reporter: Optional[MatchReporter] = None,
        rng: Optional[random.Random] = None
    ):
        self.partitioner = partitioner or SnakeDraftSwapPartitioner()
        self.reporter = reporter or MatchReporter()
        self.rng = rng if rng is not None else random.Random()

    def run_once(self, pool: Sequence[ParticipantStats]) -> BalancingResult:
        """按给定顺序执行一次分队并生成报告"""
        team_a, team_b = self.partitioner.partition(pool)
        return self.reporter.report(team_a, team_b)

    def generate(self, pool: Sequence[ParticipantStats], count: int = 3) -> List[BalancingResult]:
        """生成 count 个候选方案，按平衡度降序返回"""
        if count < 1:
            raise ValueError(f"候选方案数量必须大于等于1，当前为 {count}")

        candidates = []
        for idx in range(count):
            shuffled = list(pool)
            self.rng.shuffle(shuffled)
            result = self.run_once(shuffled)
            logger.debug(
                f"候选方案 {idx + 1}/{count}: 平衡度 {result.balance_score}, "
                f"预测结果 {result.predicted_winner}"
            )
            candidates.append(result)

        candidates.sort(key=lambda r: r.balance_score, reverse=True)
        logger.info(
            f"已生成 {len(candidates)} 个候选方案，最佳平衡度 {candidates[0].balance_score}, "
            f"最差平衡度 {candidates[-1].balance_score}"
        )
        return candidates
