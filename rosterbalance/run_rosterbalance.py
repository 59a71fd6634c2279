import argparse
import sys
from typing import List, Optional

from rosterbalance.core.balancer import RosterBalancer
from rosterbalance.core.data_models import BalancingResult
from rosterbalance.core.exceptions import BalancerError
from rosterbalance.core.result_writer import save_results
from rosterbalance.core.roster_loader import load_roster
from rosterbalance.infra.config import ConfigManager
from rosterbalance.utils.env_loader import load_project_env
from rosterbalance.utils.logger import configure_root_logger, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="业余球赛分队引擎")
    parser.add_argument('--config', type=str, required=True, help='分队任务的YAML配置文件路径')
    parser.add_argument('--roster', type=str, default=None, help='参与者名单文件，覆盖配置中的 roster_file')
    parser.add_argument('--count', type=int, default=None, help='候选方案数量，覆盖配置中的 candidate_count')
    parser.add_argument('--seed', type=int, default=None, help='随机种子，覆盖配置中的 random_seed')
    return parser


def log_best_candidate(result: BalancingResult) -> None:
    """输出最佳方案摘要"""
    for team in (result.team_a, result.team_b):
        logger.info(
            f"{team.name} [{team.formation}] 实力 {team.predicted_strength:.3f}: "
            f"{', '.join(p.name for p in team.players)}"
        )
        logger.info(f"  优势: {', '.join(team.strengths)} | 短板: {', '.join(team.weaknesses)}")
    logger.info(
        f"平衡度 {result.balance_score}, 预测结果 {result.predicted_winner}, "
        f"置信度 {result.confidence:.2f} - {result.analysis}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_project_env()
    args = build_parser().parse_args(argv)

    try:
        config_manager = ConfigManager(args.config)
    except (FileNotFoundError, ValueError) as e:
        configure_root_logger()
        logger.error(f"配置加载失败: {e}")
        return 1

    try:
        configure_root_logger(**config_manager.get_logging_settings())
    except (TypeError, ValueError) as e:
        configure_root_logger()
        logger.error(f"日志配置无效: {e}")
        return 1

    validation_errors = config_manager.validate_config()
    if validation_errors:
        logger.error("配置验证失败，发现以下问题：")
        for error in validation_errors:
            logger.error(f"  - {error}")
        return 1

    try:
        roster_path = args.roster or config_manager.get_roster_path()
    except ValueError as e:
        logger.error(f"名单路径无效: {e}")
        return 1
    if roster_path is None:
        logger.error("未指定参与者名单: 请配置 roster_file 或使用 --roster")
        return 1

    count = args.count if args.count is not None else config_manager.get_candidate_count()
    run_name = config_manager.get_run_name()
    logger.info(f"分队任务启动 - {run_name}, 配置文件: {args.config}")

    try:
        participants = load_roster(roster_path)
        balancer = RosterBalancer.from_config(config_manager, seed=args.seed)
        results = balancer.generate(participants, count)
    except (BalancerError, ValueError) as e:
        logger.error(f"分队失败: {e}")
        return 1

    log_best_candidate(results[0])
    try:
        save_results(results, config_manager.get_result_dir(), run_name)
    except (OSError, ValueError) as e:
        logger.error(f"结果保存失败: {e}")
        return 1
    logger.info(f"分队任务完成 - {run_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
