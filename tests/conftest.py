"""
测试公共夹具
"""

import pytest

from rosterbalance.core.data_models import ParticipantStats


@pytest.fixture
def make_participant():
    """创建参与者的工厂，默认没有任何历史数据"""
    def _make(pid, rating=3.0, position='midfielder', **kwargs):
        return ParticipantStats(
            id=str(pid),
            name=kwargs.pop('name', f"player{pid}"),
            position=position,
            rating=rating,
            **kwargs
        )
    return _make


@pytest.fixture
def sample_players():
    """10人示例名单（与 data/sample_roster.yaml 一致）"""
    rows = [
        ('1', 'João Silva', 'goalkeeper', 'right', 4.8, 50, 0, 0, 0.7),
        ('2', 'Pedro Santos', 'defender', 'right', 4.5, 45, 2, 1, 0.65),
        ('3', 'Carlos Costa', 'fullback', 'left', 4.3, 35, 1, 3, 0.6),
        ('4', 'Lucas Oliveira', 'midfielder', 'right', 4.6, 40, 5, 8, 0.68),
        ('5', 'Felipe Gomes', 'forward', 'right', 4.7, 48, 25, 5, 0.72),
        ('6', 'Rafael Martins', 'goalkeeper', 'right', 4.6, 52, 0, 0, 0.68),
        ('7', 'Gustavo Ferreira', 'defender', 'right', 4.4, 42, 1, 0, 0.62),
        ('8', 'Bruno Alves', 'fullback', 'right', 4.2, 30, 0, 2, 0.58),
        ('9', 'André Pereira', 'midfielder', 'left', 4.4, 38, 3, 6, 0.65),
        ('10', 'Thiago Rocha', 'forward', 'left', 4.5, 44, 20, 4, 0.70),
    ]
    return [
        ParticipantStats(
            id=pid,
            name=name,
            position=position,
            preferred_foot=foot,
            rating=rating,
            total_matches=matches,
            total_goals=goals,
            total_assists=assists,
            win_rate=win_rate,
        )
        for pid, name, position, foot, rating, matches, goals, assists, win_rate in rows
    ]
