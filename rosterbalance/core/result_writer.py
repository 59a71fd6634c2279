"""
分队结果保存模块
将候选方案写为JSON明细和CSV汇总表
"""

import json
import time
from pathlib import Path
from typing import Dict, List

import pandas as pd

from rosterbalance.core.data_models import BalancingResult
from rosterbalance.utils.logger import get_logger

logger = get_logger(__name__)


def candidates_to_frame(results: List[BalancingResult]) -> pd.DataFrame:
    """每个候选方案一行的汇总表"""
    rows = []
    for rank, result in enumerate(results, 1):
        rows.append({
            'rank': rank,
            'balance_score': result.balance_score,
            'predicted_winner': result.predicted_winner,
            'confidence': round(result.confidence, 4),
            'team_a_strength': round(result.team_a.predicted_strength, 4),
            'team_b_strength': round(result.team_b.predicted_strength, 4),
            'team_a_formation': result.team_a.formation,
            'team_b_formation': result.team_b.formation,
            'team_a_players': ', '.join(p.name for p in result.team_a.players),
            'team_b_players': ', '.join(p.name for p in result.team_b.players),
        })
    return pd.DataFrame(rows)


def save_results(results: List[BalancingResult], result_dir: Path, run_name: str) -> Dict[str, Path]:
    """保存结果到 result_dir/<日期>/ 下，返回生成的文件路径"""
    day_tag = time.strftime('%Y_%m_%d', time.localtime())
    output_dir = Path(result_dir) / day_tag
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / f"{run_name}_candidates.json"
    with open(json_path, 'w', encoding='utf-8') as f:
        json.dump([r.to_dict() for r in results], f, ensure_ascii=False, indent=2)

    csv_path = output_dir / f"{run_name}_summary.csv"
    candidates_to_frame(results).to_csv(csv_path, index=False, encoding='utf-8')

    logger.info(f"分队结果已保存: {json_path}, {csv_path}")
    return {'json': json_path, 'csv': csv_path}
