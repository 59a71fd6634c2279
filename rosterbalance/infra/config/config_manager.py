"""
统一配置管理器
加载和解析YAML配置文件，支持环境变量解析、配置验证
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import os

import yaml

DEFAULT_RUN_NAME = 'roster_balance'
DEFAULT_CANDIDATE_COUNT = 3
DEFAULT_MAX_SWAP_ITERATIONS = 10
DEFAULT_RESULT_DIR = 'results'

LOGGING_DEFAULTS: Dict[str, Any] = {
    'level': 'INFO',
    'log_to_file': False,
    'log_to_console': True,
}


class ConfigManager:
    """统一配置管理器: 加载YAML配置、解析环境变量、提供配置访问接口"""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        self._config = self._load_config()

    def _load_config(self) -> dict:
        """加载配置文件"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"配置文件格式错误: {e}")
        if not config:
            raise ValueError("配置文件为空")
        if not isinstance(config, dict):
            raise ValueError("配置文件顶层必须是映射")
        return config

    def _resolve_env_var(self, value: Any) -> Any:
        """解析环境变量格式的配置值，支持格式: env_var:VARIABLE_NAME"""
        if isinstance(value, str) and value.startswith("env_var:"):
            env_key = value[8:]
            env_value = os.getenv(env_key)
            if env_value is None:
                raise ValueError(f"环境变量 {env_key} 未设置")
            return env_value
        return value

    def get_raw_config(self) -> dict:
        """获取原始配置字典"""
        return self._config

    def get_run_name(self) -> str:
        """获取本次分队任务名称"""
        return self._config.get('run_name', DEFAULT_RUN_NAME)

    def get_roster_path(self) -> Optional[Path]:
        """获取参与者名单路径，相对路径以配置文件所在目录为基准"""
        roster = self._config.get('roster_file')
        if not roster:
            return None
        roster_path = Path(self._resolve_env_var(roster))
        if not roster_path.is_absolute():
            roster_path = self.config_path.parent / roster_path
        return roster_path

    # ==================== 分队相关配置 ====================

    def get_balancing_settings(self) -> Dict:
        """获取分队设置"""
        return self._config.get('balancing', {}) or {}

    def get_candidate_count(self) -> int:
        """获取候选方案数量"""
        value = self._resolve_env_var(self.get_balancing_settings().get('candidate_count', DEFAULT_CANDIDATE_COUNT))
        return int(value)

    def get_max_swap_iterations(self) -> int:
        """获取局部交换搜索的最大轮数"""
        value = self.get_balancing_settings().get('max_swap_iterations', DEFAULT_MAX_SWAP_ITERATIONS)
        return int(self._resolve_env_var(value))

    def get_random_seed(self) -> Optional[int]:
        """获取随机种子，未配置时返回None"""
        value = self._resolve_env_var(self.get_balancing_settings().get('random_seed'))
        if value is None or value == '':
            return None
        return int(value)

    # ==================== 输出与日志配置 ====================

    def get_output_settings(self) -> Dict:
        """获取结果输出配置"""
        return self._config.get('output', {}) or {}

    def get_result_dir(self) -> Path:
        """获取结果目录"""
        result_dir = self._resolve_env_var(self.get_output_settings().get('result_dir', DEFAULT_RESULT_DIR))
        return Path(result_dir)

    def get_logging_settings(self) -> Dict:
        """获取日志配置（未配置的项使用默认值）"""
        configured = self._config.get('logging', {}) or {}
        settings = {**LOGGING_DEFAULTS, **configured}
        settings['level'] = str(self._resolve_env_var(settings['level']))
        return settings

    def validate_config(self) -> List[str]:
        """验证配置文件的完整性和有效性"""
        errors = []

        if not self._config.get('run_name'):
            errors.append("缺少必要配置: run_name")

        balancing = self._config.get('balancing', {})
        if balancing is not None and not isinstance(balancing, dict):
            errors.append("balancing 配置必须是映射")
            return errors

        try:
            count = self.get_candidate_count()
            if count < 1:
                errors.append(f"candidate_count 必须大于等于1，当前为 {count}")
        except (TypeError, ValueError) as e:
            errors.append(f"candidate_count 无效: {e}")

        try:
            iterations = self.get_max_swap_iterations()
            if iterations < 0:
                errors.append(f"max_swap_iterations 不能为负数，当前为 {iterations}")
        except (TypeError, ValueError) as e:
            errors.append(f"max_swap_iterations 无效: {e}")

        try:
            self.get_random_seed()
        except (TypeError, ValueError) as e:
            errors.append(f"random_seed 无效: {e}")

        try:
            self.get_roster_path()
        except (TypeError, ValueError) as e:
            errors.append(f"roster_file 无效: {e}")

        try:
            self.get_result_dir()
        except (TypeError, ValueError) as e:
            errors.append(f"output.result_dir 无效: {e}")

        try:
            level = self.get_logging_settings()['level']
            if level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
                errors.append(f"logging.level 无效: {level}")
        except ValueError as e:
            errors.append(f"logging.level 无效: {e}")

        return errors
