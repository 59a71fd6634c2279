"""
分队结果报告模块
为两支队伍生成阵型、优劣势标签、平衡度、胜负预测、置信度和文字分析
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from rosterbalance.core.data_models import BalancingResult, ParticipantStats, Position, Team
from rosterbalance.infra.scoring import TeamStrengthModel

TEAM_A = 'teamA'
TEAM_B = 'teamB'
DRAW = 'draw'

TEAM_A_NAME = 'Team A'
TEAM_B_NAME = 'Team B'

# 实力差达到该值即视为平衡度为0
MAX_STRENGTH_SPREAD = 2.0
DRAW_THRESHOLD = 0.3

NEUTRAL_STRENGTH = 'balanced'
NEUTRAL_WEAKNESS = 'no apparent weakness'

ANALYSIS_TIERS = [
    (90, "Perfectly balanced teams! Expect a very close match."),
    (75, "Good balance between the teams. A competitive match is expected."),
    (50, "The teams show noticeable differences. The match may be uneven."),
]
ANALYSIS_FALLBACK = "The teams are heavily unbalanced. Re-drawing is recommended."


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class MatchReporter:
    """报告生成器: 基于队伍实力模型对分队结果进行分析"""

    def __init__(self, strength_model: Optional[TeamStrengthModel] = None):
        self.strength_model = strength_model or TeamStrengthModel()

    def report(
        self,
        team_a_players: Sequence[ParticipantStats],
        team_b_players: Sequence[ParticipantStats]
    ) -> BalancingResult:
        """生成完整的分队结果"""
        team_a = self.build_team(TEAM_A_NAME, team_a_players)
        team_b = self.build_team(TEAM_B_NAME, team_b_players)

        balance_score = self.balance_score(team_a.predicted_strength, team_b.predicted_strength)

        return BalancingResult(
            team_a=team_a,
            team_b=team_b,
            balance_score=balance_score,
            predicted_winner=self.predict_winner(team_a.predicted_strength, team_b.predicted_strength),
            confidence=self.confidence(team_a.players, team_b.players, balance_score),
            analysis=self.analysis(balance_score),
        )

    def build_team(self, name: str, players: Sequence[ParticipantStats]) -> Team:
        """创建带分析信息的队伍对象，队员保持引用不复制"""
        members = list(players)
        return Team(
            name=name,
            players=members,
            formation=self.formation(members),
            predicted_strength=self.strength_model.strength(members),
            strengths=self.analyze_strengths(members),
            weaknesses=self.analyze_weaknesses(members),
        )

    @staticmethod
    def formation(players: Sequence[ParticipantStats]) -> str:
        """阵型: 门将-后卫-中场-前锋，边后卫计入后卫"""
        goalkeepers = sum(1 for p in players if p.position is Position.GOALKEEPER)
        defenders = sum(1 for p in players if p.position.is_defensive)
        midfielders = sum(1 for p in players if p.position is Position.MIDFIELDER)
        forwards = sum(1 for p in players if p.position is Position.FORWARD)
        return f"{goalkeepers}-{defenders}-{midfielders}-{forwards}"

    @staticmethod
    def _average_matches(players: Sequence[ParticipantStats]) -> float:
        if not players:
            return 0.0
        return float(np.mean([p.total_matches for p in players]))

    def analyze_strengths(self, players: Sequence[ParticipantStats]) -> List[str]:
        """分析队伍优势"""
        strengths = []

        if sum(p.total_goals for p in players) > 20:
            strengths.append('strong attack')

        if sum(1 for p in players if p.position.is_defensive) >= 3:
            strengths.append('solid defense')

        if sum(p.total_assists for p in players) > 10:
            strengths.append('creative midfield')

        if self._average_matches(players) > 30:
            strengths.append('experienced squad')

        return strengths or [NEUTRAL_STRENGTH]

    def analyze_weaknesses(self, players: Sequence[ParticipantStats]) -> List[str]:
        """分析队伍短板"""
        weaknesses = []

        if not any(p.position is Position.GOALKEEPER for p in players):
            weaknesses.append('no goalkeeper')

        if sum(1 for p in players if p.position.is_defensive) < 2:
            weaknesses.append('weak defense')

        if self.strength_model.average_rating(players) < 3:
            weaknesses.append('low technical level')

        if self._average_matches(players) < 10:
            weaknesses.append('inexperienced squad')

        return weaknesses or [NEUTRAL_WEAKNESS]

    @staticmethod
    def balance_score(strength_a: float, strength_b: float) -> int:
        """平衡度（0-100），与实力差成反比"""
        diff = abs(strength_a - strength_b)
        score = max(0.0, 100 - (diff / MAX_STRENGTH_SPREAD) * 100)
        return _round_half_up(score)

    @staticmethod
    def predict_winner(strength_a: float, strength_b: float) -> str:
        """实力差小于阈值判为平局，否则实力更强的一方获胜"""
        diff = strength_a - strength_b
        if abs(diff) < DRAW_THRESHOLD:
            return DRAW
        return TEAM_A if diff > 0 else TEAM_B

    @staticmethod
    def confidence(
        team_a_players: Sequence[ParticipantStats],
        team_b_players: Sequence[ParticipantStats],
        balance_score: int
    ) -> float:
        """
        预测置信度（0-1）

        由三部分加权: 样本量(0.3)、平衡度(0.4)、两队平均经验(0.3)。
        这是启发式数值，并非经过校准的概率。
        """
        total_players = len(team_a_players) + len(team_b_players)
        if total_players == 0:
            return 0.0

        sample_confidence = min(total_players / 20, 1)
        balance_confidence = balance_score / 100
        total_matches = sum(p.total_matches for p in team_a_players) + sum(p.total_matches for p in team_b_players)
        experience_confidence = min((total_matches / total_players) / 50, 1)

        return (
            sample_confidence * 0.3 +
            balance_confidence * 0.4 +
            experience_confidence * 0.3
        )

    @staticmethod
    def analysis(balance_score: int) -> str:
        """根据平衡度生成一句话分析"""
        for threshold, message in ANALYSIS_TIERS:
            if balance_score >= threshold:
                return message
        return ANALYSIS_FALLBACK
