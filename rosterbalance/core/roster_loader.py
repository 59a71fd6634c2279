"""参与者名单加载: 支持 YAML 与 JSON 格式"""

import json
from pathlib import Path
from typing import List, Union

import yaml

from rosterbalance.core.data_models import ParticipantStats
from rosterbalance.core.exceptions import InvalidParticipantError, RosterFileError
from rosterbalance.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_SUFFIXES = ('.yaml', '.yml', '.json')


def _read_roster_document(path: Path):
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() == '.json':
            return json.load(f)
        return yaml.safe_load(f)


def load_roster(roster_path: Union[str, Path]) -> List[ParticipantStats]:
    """
    从文件加载参与者列表

    文件内容可以是参与者列表，也可以是包含 participants 键的映射。
    """
    path = Path(roster_path)
    if not path.exists():
        raise RosterFileError(f"名单文件不存在: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise RosterFileError(f"不支持的名单文件格式: {path.suffix}，仅支持 {', '.join(SUPPORTED_SUFFIXES)}")

    try:
        document = _read_roster_document(path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RosterFileError(f"名单文件解析失败: {path}, 错误: {e}") from e

    if isinstance(document, dict):
        document = document.get('participants')
    if not isinstance(document, list):
        raise RosterFileError(f"名单文件必须包含参与者列表: {path}")

    participants = []
    for idx, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise RosterFileError(f"名单第 {idx + 1} 项不是映射: {entry!r}")
        try:
            participants.append(ParticipantStats.from_dict(entry))
        except InvalidParticipantError as e:
            raise InvalidParticipantError(f"名单第 {idx + 1} 项数据不合法: {e}") from e

    logger.info(f"名单加载完成: {path}, 共 {len(participants)} 名参与者")
    return participants
