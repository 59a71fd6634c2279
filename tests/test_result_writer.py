"""
结果保存单元测试
"""

import json
import random

import pandas as pd
import pytest

from rosterbalance.core.candidates import CandidateGenerator
from rosterbalance.core.result_writer import candidates_to_frame, save_results


@pytest.fixture
def candidates(sample_players):
    return CandidateGenerator(rng=random.Random(21)).generate(sample_players, 3)


def test_candidates_to_frame(candidates):
    """测试汇总表每个方案一行"""
    frame = candidates_to_frame(candidates)

    assert list(frame['rank']) == [1, 2, 3]
    assert list(frame['balance_score']) == [c.balance_score for c in candidates]
    assert frame.loc[0, 'team_a_formation'] == candidates[0].team_a.formation
    assert 'João Silva' in frame.loc[0, 'team_a_players'] + frame.loc[0, 'team_b_players']


def test_save_results_writes_json_and_csv(tmp_path, candidates, monkeypatch):
    """测试结果写入按日期划分的目录"""
    monkeypatch.setattr(
        "rosterbalance.core.result_writer.time.strftime",
        lambda _fmt, _ts: "2025_11_18",
    )

    paths = save_results(candidates, tmp_path, 'weekly')

    assert paths['json'] == tmp_path / '2025_11_18' / 'weekly_candidates.json'
    assert paths['csv'] == tmp_path / '2025_11_18' / 'weekly_summary.csv'

    with open(paths['json'], 'r', encoding='utf-8') as f:
        saved = json.load(f)
    assert len(saved) == 3
    assert saved[0]['balance_score'] == candidates[0].balance_score
    assert len(saved[0]['team_a']['players']) == 5

    summary = pd.read_csv(paths['csv'])
    assert len(summary) == 3
    assert summary['predicted_winner'].isin(['teamA', 'teamB', 'draw']).all()
