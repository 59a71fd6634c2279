"""
工具模块
提供项目中使用的各种工具函数和类
"""

from rosterbalance.utils.logger import (
    configure_root_logger,
    get_logger,
    setup_logger,
)
from rosterbalance.utils.env_loader import load_project_env

__all__ = [
    'configure_root_logger',
    'get_logger',
    'setup_logger',
    'load_project_env',
]
