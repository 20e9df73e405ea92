import random

import pytest

from pysquads.balancer import AttributeModel, ImbalanceEvaluator
from pysquads.config import ImbalanceWeights
from pysquads.models import PlayerRecord


def _player(player_id: str, **ratings) -> PlayerRecord:
    base = {"attack_defense": 5, "stamina": 6, "skills": 6, "team_player": 6, "physicality": 6}
    base.update(ratings)
    return PlayerRecord(player_id=player_id, **base)


def _random_players(count: int, seed: int) -> list[PlayerRecord]:
    rng = random.Random(seed)
    return [
        _player(
            f"p{i}",
            attack_defense=rng.randint(0, 10),
            stamina=rng.randint(1, 10),
            skills=rng.randint(1, 10),
            team_player=rng.randint(1, 10),
            physicality=rng.randint(1, 10),
        )
        for i in range(count)
    ]


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_imbalance_is_symmetric(seed):
    players = _random_players(10, seed)
    team_a, team_b = players[:5], players[5:]
    evaluator = ImbalanceEvaluator(AttributeModel())
    assert evaluator.imbalance(team_a, team_b) == evaluator.imbalance(team_b, team_a)


def test_imbalance_is_zero_for_identical_players():
    players = [_player(f"p{i}", attack_defense=4, skills=7) for i in range(8)]
    evaluator = ImbalanceEvaluator(AttributeModel())
    assert evaluator.imbalance(players[:4], players[4:]) == 0.0


def test_breakdown_weights_each_term():
    defenders = [_player("d1", attack_defense=2), _player("d2", attack_defense=2)]
    attackers = [_player("a1", attack_defense=8), _player("a2", attack_defense=8)]
    evaluator = ImbalanceEvaluator(AttributeModel())

    breakdown = evaluator.breakdown(defenders, attackers)

    # Equal expressiveness (7) on both sides, so composite scores match.
    assert breakdown.score == pytest.approx(0.0)
    # attack_defense means differ by 6.
    assert breakdown.attributes == pytest.approx(0.5 * 6)
    # Two DEF on one side, two ATT on the other.
    assert breakdown.positions == pytest.approx(2.5 * 4)
    assert breakdown.total == pytest.approx(13.0)
    assert evaluator.imbalance(defenders, attackers) == pytest.approx(13.0)


def test_attack_defense_attribute_term_is_optional():
    defenders = [_player("d1", attack_defense=2), _player("d2", attack_defense=2)]
    attackers = [_player("a1", attack_defense=8), _player("a2", attack_defense=8)]
    evaluator = ImbalanceEvaluator(AttributeModel(), ImbalanceWeights(include_attack_defense=False))
    assert evaluator.breakdown(defenders, attackers).attributes == pytest.approx(0.0)
    assert evaluator.imbalance(defenders, attackers) == pytest.approx(10.0)


def test_score_term_tracks_composite_gap():
    strong = [_player("s1", skills=9), _player("s2", skills=9)]
    weak = [_player("w1", skills=5), _player("w2", skills=5)]
    evaluator = ImbalanceEvaluator(AttributeModel())
    breakdown = evaluator.breakdown(strong, weak)
    assert breakdown.score == pytest.approx(3.0 * 0.3 * 4)
    assert breakdown.attributes == pytest.approx(0.5 * 4)
    assert breakdown.positions == pytest.approx(0.0)


def test_imbalance_rejects_empty_team():
    evaluator = ImbalanceEvaluator(AttributeModel())
    with pytest.raises(ValueError):
        evaluator.imbalance([], [_player("p1")])


def test_reused_evaluator_sees_rerated_player():
    evaluator = ImbalanceEvaluator(AttributeModel())
    rival = _player("y", skills=1)
    assert evaluator.imbalance([_player("x", skills=1)], [rival]) == pytest.approx(0.0)

    rerated = evaluator.imbalance([_player("x", skills=10)], [rival])
    assert rerated == pytest.approx(3.0 * 0.3 * 9 + 0.5 * 9)
    assert rerated == pytest.approx(ImbalanceEvaluator(AttributeModel()).imbalance([_player("x", skills=10)], [rival]))
