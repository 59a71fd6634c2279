"""
Roster Balancer - 业余球赛智能分队引擎
"""

from rosterbalance.core.exceptions import (
    BalancerError,
    InsufficientParticipantsError,
    InvalidParticipantError,
    RosterFileError,
)
from rosterbalance.core.data_models import (
    BalancingResult,
    ParticipantStats,
    Position,
    PositionRecord,
    PreferredFoot,
    Team,
)
from rosterbalance.infra.scoring import (
    CompositeRatingAlgorithm,
    SnakeDraftSwapPartitioner,
    TeamStrengthModel,
)
from rosterbalance.core.report import MatchReporter
from rosterbalance.core.candidates import CandidateGenerator
from rosterbalance.core.balancer import RosterBalancer
from rosterbalance.core.roster_loader import load_roster

__all__ = [
    'BalancerError',
    'InsufficientParticipantsError',
    'InvalidParticipantError',
    'RosterFileError',
    'BalancingResult',
    'ParticipantStats',
    'Position',
    'PositionRecord',
    'PreferredFoot',
    'Team',
    'CompositeRatingAlgorithm',
    'SnakeDraftSwapPartitioner',
    'TeamStrengthModel',
    'MatchReporter',
    'CandidateGenerator',
    'RosterBalancer',
    'load_roster',
]
