"""
分队引擎数据模型
集中定义参与者、队伍与分队结果的数据结构
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from rosterbalance.core.exceptions import InvalidParticipantError


MAX_BASE_RATING = 5.0


class Position(str, Enum):
    """场上位置（仅用于多样性与阵型判断，不是硬性约束）"""
    GOALKEEPER = 'goalkeeper'
    DEFENDER = 'defender'
    FULLBACK = 'fullback'
    MIDFIELDER = 'midfielder'
    FORWARD = 'forward'

    @classmethod
    def parse(cls, value: Any) -> 'Position':
        """解析位置，兼容英文名称和葡萄牙语标签（goleiro、zagueiro等）"""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        position = _POSITION_ALIASES.get(key)
        if position is None:
            raise InvalidParticipantError(f"未知的位置: {value!r}")
        return position

    @property
    def is_defensive(self) -> bool:
        return self in (Position.DEFENDER, Position.FULLBACK)


_POSITION_ALIASES: Dict[str, Position] = {
    'goalkeeper': Position.GOALKEEPER,
    'gk': Position.GOALKEEPER,
    'goleiro': Position.GOALKEEPER,
    'defender': Position.DEFENDER,
    'back': Position.DEFENDER,
    'zagueiro': Position.DEFENDER,
    'fullback': Position.FULLBACK,
    'winger': Position.FULLBACK,
    'lateral': Position.FULLBACK,
    'midfielder': Position.MIDFIELDER,
    'meia': Position.MIDFIELDER,
    'forward': Position.FORWARD,
    'striker': Position.FORWARD,
    'atacante': Position.FORWARD,
}


class PreferredFoot(str, Enum):
    """惯用脚（目前仅作展示，不参与评分）"""
    LEFT = 'left'
    RIGHT = 'right'
    BOTH = 'both'

    @classmethod
    def parse(cls, value: Any) -> 'PreferredFoot':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidParticipantError(f"未知的惯用脚: {value!r}") from None


@dataclass(frozen=True)
class PositionRecord:
    """某个位置上的历史出场记录"""
    position: Position
    matches: int = 0
    rating: float = 0.0


def _check_number(
    owner: str,
    name: str,
    value: Any,
    minimum: float,
    maximum: Optional[float] = None,
    whole: bool = False
):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParticipantError(f"参与者 {owner} 的 {name} 必须是数值，实际为 {value!r}")
    if math.isnan(value) or math.isinf(value):
        raise InvalidParticipantError(f"参与者 {owner} 的 {name} 不是有限数值: {value}")
    if whole and isinstance(value, float) and not value.is_integer():
        raise InvalidParticipantError(f"参与者 {owner} 的 {name} 必须是整数，实际为 {value}")
    if value < minimum or (maximum is not None and value > maximum):
        bound = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        raise InvalidParticipantError(f"参与者 {owner} 的 {name} 超出范围 {bound}: {value}")


def _parse_position_history(owner: Any, items: Any) -> Tuple[PositionRecord, ...]:
    if not isinstance(items, (list, tuple)):
        raise InvalidParticipantError(f"参与者 {owner} 的位置历史必须是列表，实际为 {items!r}")
    records = []
    for item in items:
        if not isinstance(item, dict) or 'position' not in item:
            raise InvalidParticipantError(f"参与者 {owner} 的位置历史记录缺少 position 字段: {item!r}")
        records.append(PositionRecord(
            position=Position.parse(item['position']),
            matches=item.get('matches', 0),
            rating=item.get('rating', 0.0),
        ))
    return tuple(records)


@dataclass(frozen=True)
class ParticipantStats:
    """
    参与者统计数据

    构造时即校验数据范围，不合法的数据直接拒绝，避免在评分阶段产生NaN或负分。
    身高、体重、年龄、惯用脚与位置历史目前不参与评分。
    """
    id: str
    name: str
    position: Position
    rating: float
    total_matches: int = 0
    total_goals: int = 0
    total_assists: int = 0
    win_rate: float = 0.0
    preferred_foot: PreferredFoot = PreferredFoot.RIGHT
    height: Optional[float] = None
    weight: Optional[float] = None
    age: Optional[int] = None
    position_history: Tuple[PositionRecord, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'position', Position.parse(self.position))
        object.__setattr__(self, 'preferred_foot', PreferredFoot.parse(self.preferred_foot))
        object.__setattr__(self, 'position_history', tuple(self.position_history))

        owner = self.name or self.id
        _check_number(owner, 'rating', self.rating, 0.0, MAX_BASE_RATING)
        _check_number(owner, 'win_rate', self.win_rate, 0.0, 1.0)
        _check_number(owner, 'total_matches', self.total_matches, 0, whole=True)
        _check_number(owner, 'total_goals', self.total_goals, 0, whole=True)
        _check_number(owner, 'total_assists', self.total_assists, 0, whole=True)
        for attr in ('height', 'weight', 'age'):
            value = getattr(self, attr)
            if value is not None:
                _check_number(owner, attr, value, 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParticipantStats':
        """从字典创建参与者，兼容 snake_case 与移动端接口的 camelCase 字段名"""
        def pick(snake: str, camel: str, default: Any = None) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        if 'id' not in data or 'position' not in data or 'rating' not in data:
            raise InvalidParticipantError(f"参与者数据缺少必要字段(id/position/rating): {data!r}")

        history = _parse_position_history(data['id'], pick('position_history', 'positionHistory', []) or [])

        return cls(
            id=str(data['id']),
            name=str(data.get('name', data['id'])),
            position=data['position'],
            rating=data['rating'],
            total_matches=pick('total_matches', 'totalMatches', 0),
            total_goals=pick('total_goals', 'totalGoals', 0),
            total_assists=pick('total_assists', 'totalAssists', 0),
            win_rate=pick('win_rate', 'winRate', 0.0),
            preferred_foot=pick('preferred_foot', 'preferredFoot', PreferredFoot.RIGHT),
            height=data.get('height'),
            weight=data.get('weight'),
            age=data.get('age'),
            position_history=history,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'position': self.position.value,
            'rating': self.rating,
            'total_matches': self.total_matches,
            'total_goals': self.total_goals,
            'total_assists': self.total_assists,
            'win_rate': self.win_rate,
            'preferred_foot': self.preferred_foot.value,
        }


@dataclass
class Team:
    """一支队伍：参与者引用及其派生属性"""
    name: str
    players: List[ParticipantStats]
    formation: str
    predicted_strength: float
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'players': [p.to_dict() for p in self.players],
            'formation': self.formation,
            'predicted_strength': self.predicted_strength,
            'strengths': list(self.strengths),
            'weaknesses': list(self.weaknesses),
        }


@dataclass
class BalancingResult:
    """一次分队的完整结果"""
    team_a: Team
    team_b: Team
    balance_score: int
    predicted_winner: str
    confidence: float
    analysis: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'team_a': self.team_a.to_dict(),
            'team_b': self.team_b.to_dict(),
            'balance_score': self.balance_score,
            'predicted_winner': self.predicted_winner,
            'confidence': self.confidence,
            'analysis': self.analysis,
        }
