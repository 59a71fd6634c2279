"""
ConfigManager单元测试
"""

import os
import tempfile
import pytest
from pathlib import Path
import yaml

from rosterbalance.infra.config.config_manager import ConfigManager


@pytest.fixture
def sample_config():
    """创建示例配置"""
    return {
        'run_name': 'test_run',
        'roster_file': 'roster.yaml',
        'balancing': {
            'candidate_count': 5,
            'max_swap_iterations': 8,
            'random_seed': 'env_var:TEST_ROSTER_SEED',
        },
        'output': {
            'result_dir': 'balance_results',
        },
        'logging': {
            'level': 'DEBUG',
        },
    }


@pytest.fixture
def config_file(sample_config):
    """创建临时配置文件"""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(sample_config, f)
        config_path = f.name

    yield config_path

    # 清理
    os.unlink(config_path)


@pytest.fixture
def env_seed(monkeypatch):
    """为依赖环境变量的测试提供默认值"""
    monkeypatch.setenv('TEST_ROSTER_SEED', '123')
    yield
    monkeypatch.delenv('TEST_ROSTER_SEED', raising=False)


def _write_config(directory: Path, config) -> str:
    config_path = directory / 'config.yaml'
    config_path.write_text(yaml.safe_dump(config), encoding='utf-8')
    return str(config_path)


def test_config_manager_initialization(config_file):
    """测试ConfigManager初始化"""
    manager = ConfigManager(config_file)
    assert manager.config_path.exists()
    assert manager._config is not None


def test_missing_config_file(tmp_path):
    """测试配置文件不存在"""
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / 'missing.yaml'))


def test_empty_config_file(tmp_path):
    """测试空配置文件"""
    config_path = tmp_path / 'empty.yaml'
    config_path.write_text('', encoding='utf-8')

    with pytest.raises(ValueError, match="配置文件为空"):
        ConfigManager(str(config_path))


def test_non_mapping_config_file(tmp_path):
    """测试顶层不是映射的配置文件"""
    config_path = tmp_path / 'list.yaml'
    config_path.write_text('- a\n- b\n', encoding='utf-8')

    with pytest.raises(ValueError):
        ConfigManager(str(config_path))


def test_get_run_name(config_file):
    """测试获取任务名称"""
    manager = ConfigManager(config_file)
    assert manager.get_run_name() == 'test_run'


def test_get_roster_path_relative_to_config(config_file):
    """测试名单路径以配置文件目录为基准"""
    manager = ConfigManager(config_file)

    assert manager.get_roster_path() == Path(config_file).parent / 'roster.yaml'


def test_get_roster_path_absolute(tmp_path):
    """测试绝对路径原样返回"""
    roster = tmp_path / 'players.json'
    manager = ConfigManager(_write_config(tmp_path, {'run_name': 'r', 'roster_file': str(roster)}))

    assert manager.get_roster_path() == roster


def test_get_balancing_settings(config_file, env_seed):
    """测试获取分队设置"""
    manager = ConfigManager(config_file)

    assert manager.get_candidate_count() == 5
    assert manager.get_max_swap_iterations() == 8


def test_resolve_env_var(config_file, env_seed):
    """测试环境变量解析（随机种子从环境变量读取）"""
    manager = ConfigManager(config_file)

    assert manager.get_random_seed() == 123


def test_resolve_env_var_missing(config_file, monkeypatch):
    """测试缺失的环境变量"""
    monkeypatch.delenv('TEST_ROSTER_SEED', raising=False)
    manager = ConfigManager(config_file)

    with pytest.raises(ValueError, match="环境变量.*未设置"):
        manager.get_random_seed()


def test_defaults_when_sections_missing(tmp_path):
    """测试未配置的项使用默认值"""
    manager = ConfigManager(_write_config(tmp_path, {'run_name': 'minimal'}))

    assert manager.get_roster_path() is None
    assert manager.get_candidate_count() == 3
    assert manager.get_max_swap_iterations() == 10
    assert manager.get_random_seed() is None
    assert manager.get_result_dir() == Path('results')
    assert manager.get_logging_settings() == {
        'level': 'INFO',
        'log_to_file': False,
        'log_to_console': True,
    }


def test_get_output_and_logging_settings(config_file):
    """测试获取输出与日志配置"""
    manager = ConfigManager(config_file)

    assert manager.get_result_dir() == Path('balance_results')
    logging_settings = manager.get_logging_settings()
    assert logging_settings['level'] == 'DEBUG'
    assert logging_settings['log_to_console'] is True


def test_validate_config_valid(config_file, env_seed):
    """测试配置验证 - 有效配置"""
    manager = ConfigManager(config_file)
    errors = manager.validate_config()

    assert len(errors) == 0


def test_validate_config_missing_run_name(tmp_path):
    """测试配置验证 - 缺少任务名称"""
    manager = ConfigManager(_write_config(tmp_path, {'balancing': {'candidate_count': 2}}))
    errors = manager.validate_config()

    assert any('run_name' in error for error in errors)


def test_validate_config_invalid_values(tmp_path):
    """测试配置验证 - 数值不合法"""
    config = {
        'run_name': 'bad',
        'balancing': {
            'candidate_count': 0,
            'max_swap_iterations': -1,
            'random_seed': 'not-a-number',
        },
        'logging': {'level': 'LOUD'},
    }
    manager = ConfigManager(_write_config(tmp_path, config))
    errors = manager.validate_config()

    assert len(errors) == 4
    assert any('candidate_count' in error for error in errors)
    assert any('max_swap_iterations' in error for error in errors)
    assert any('random_seed' in error for error in errors)
    assert any('logging.level' in error for error in errors)


def test_validate_config_balancing_not_mapping(tmp_path):
    """测试配置验证 - balancing 不是映射"""
    manager = ConfigManager(_write_config(tmp_path, {'run_name': 'r', 'balancing': [1, 2]}))
    errors = manager.validate_config()

    assert errors == ["balancing 配置必须是映射"]


def test_validate_config_unresolved_paths(tmp_path, monkeypatch):
    """测试配置验证 - 名单路径与结果目录引用了未设置的环境变量"""
    monkeypatch.delenv('ROSTER_PATH_UNSET', raising=False)
    monkeypatch.delenv('RESULT_DIR_UNSET', raising=False)
    config = {
        'run_name': 'r',
        'roster_file': 'env_var:ROSTER_PATH_UNSET',
        'output': {'result_dir': 'env_var:RESULT_DIR_UNSET'},
    }
    manager = ConfigManager(_write_config(tmp_path, config))
    errors = manager.validate_config()

    assert len(errors) == 2
    assert any('roster_file' in error for error in errors)
    assert any('output.result_dir' in error for error in errors)
