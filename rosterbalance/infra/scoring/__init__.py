"""
评分与分队基础设施
提供评分算法、队伍实力模型和分队策略
"""

from .rating_algorithms import (
    RatingAlgorithm,
    CompositeRatingAlgorithm,
    COMPATIBLE_POSITIONS,
)
from .team_strength import TeamStrengthModel
from .partition_strategies import (
    PartitionStrategy,
    SnakeDraftSwapPartitioner,
    DEFAULT_MAX_SWAP_ITERATIONS,
)

__all__ = [
    # 评分算法
    'RatingAlgorithm',
    'CompositeRatingAlgorithm',
    'COMPATIBLE_POSITIONS',
    # 队伍实力
    'TeamStrengthModel',
    # 分队策略
    'PartitionStrategy',
    'SnakeDraftSwapPartitioner',
    'DEFAULT_MAX_SWAP_ITERATIONS',
]
