import pytest

from goalgrid.domain import Player, Score, Side
from goalgrid.interval import (
    BivariateProbs,
    Config,
    Expansions,
    PeriodStats,
    PlayerProbs,
    PlayerStats,
    Prospect,
    PruneThresholds,
    TeamProbs,
    UnivariateProbs,
    explore,
)


def _stats(h1, h2, assists):
    return PlayerStats(PeriodStats(h1), PeriodStats(h2), assists)


def _even_team_probs(assist=1.0):
    probs = BivariateProbs(0.25, 0.25, 0.25)
    return TeamProbs(probs, probs, UnivariateProbs(assist, assist))


def _prospect(ht, ft, stats, first_scorer):
    return Prospect(Score(*ht), Score(*ft), tuple(stats), first_scorer)


def test_explore_2x2():
    exploration = explore(Config(2, _even_team_probs()), range(2))
    prospects = exploration.prospects
    assert sum(prospects.values()) == pytest.approx(1.0)
    assert exploration.pruned == 0.0
    assert len(prospects) == 16
    assert prospects[_prospect((0, 0), (0, 0), [_stats(0, 0, 0)], None)] == 0.0625
    assert prospects[_prospect((1, 0), (2, 0), [_stats(1, 1, 2)], 0)] == 0.0625
    assert prospects[_prospect((1, 1), (2, 2), [_stats(2, 2, 4)], 0)] == 0.0625
    assert prospects[_prospect((0, 0), (0, 1), [_stats(0, 1, 1)], 0)] == 0.0625
    assert all(prob == 0.0625 for prob in prospects.values())
    assert exploration.player_lookup == (Player.other(),)


def test_explore_3x3():
    exploration = explore(Config(3, _even_team_probs()), range(3))
    assert len(exploration.prospects) == 36
    assert sum(exploration.prospects.values()) == pytest.approx(1.0)
    assert exploration.pruned == 0.0


def test_explore_4x4():
    exploration = explore(Config(4, _even_team_probs()), range(4))
    assert len(exploration.prospects) == 81
    assert sum(exploration.prospects.values()) == pytest.approx(1.0)
    assert exploration.pruned == 0.0


def test_explore_1x1_player_goal():
    player = Player.named(Side.HOME, "Markos")
    exploration = explore(
        Config(1, _even_team_probs(), [(player, PlayerProbs(goal=0.25))]),
        range(1),
    )
    prospects = exploration.prospects
    assert sum(prospects.values()) == pytest.approx(1.0)
    assert exploration.pruned == 0.0
    expected = {
        _prospect((0, 0), (0, 0), [_stats(0, 0, 0), _stats(0, 0, 0)], None): 0.25,
        _prospect((0, 0), (1, 1), [_stats(0, 0, 0), _stats(0, 2, 2)], 1): 0.1875,
        _prospect((0, 0), (1, 1), [_stats(0, 1, 0), _stats(0, 1, 2)], 1): 0.03125,
        _prospect((0, 0), (1, 1), [_stats(0, 1, 0), _stats(0, 1, 2)], 0): 0.03125,
        _prospect((0, 0), (1, 0), [_stats(0, 0, 0), _stats(0, 1, 1)], 1): 0.1875,
        _prospect((0, 0), (1, 0), [_stats(0, 1, 0), _stats(0, 0, 1)], 0): 0.0625,
        _prospect((0, 0), (0, 1), [_stats(0, 0, 0), _stats(0, 1, 1)], 1): 0.25,
    }
    assert set(prospects) == set(expected)
    for prospect, prob in expected.items():
        assert prospects[prospect] == pytest.approx(prob)
    assert exploration.player_lookup == (player, Player.other())


def test_min_prob_prunes_unlikely_prospects():
    exploration = explore(
        Config(3, _even_team_probs(), prune_thresholds=PruneThresholds(min_prob=0.1)),
        range(3),
    )
    assert exploration.pruned == pytest.approx(1.0)
    assert sum(exploration.prospects.values()) == pytest.approx(1.0)
    assert len(exploration.prospects) == 16


def test_partial_interval_range_keeps_probability():
    exploration = explore(Config(4, _even_team_probs()), range(2, 4))
    assert sum(exploration.prospects.values()) == pytest.approx(1.0)
    assert all(prospect.ht_score == Score.nil_all() for prospect in exploration.prospects)


def test_explore_rejects_other_player():
    config = Config(2, _even_team_probs(), [(Player.other(), PlayerProbs(goal=0.1))])
    with pytest.raises(ValueError):
        explore(config, range(2))


def test_explore_rejects_too_many_players():
    players = [
        (Player.named(Side.HOME, name), PlayerProbs(goal=0.1))
        for name in ("A", "B", "C", "D")
    ]
    with pytest.raises(ValueError):
        explore(Config(2, _even_team_probs(), players), range(2))


def test_explore_rejects_empty_expansions():
    with pytest.raises(ValueError):
        explore(Config(2, _even_team_probs(), expansions=Expansions.empty()), range(2))


def test_expansions_validate_split_without_goals():
    expansions = Expansions(max_player_goals=0, player_split_goal_stats=True)
    with pytest.raises(ValueError, match="split goal stats"):
        expansions.validate()


def test_expansions_requirements():
    empty = Expansions.empty()
    assert not empty.requires_team_goal_probs()
    assert not empty.requires_player_goal_probs()
    assists = Expansions(
        ht_score=False, ft_score=False, max_player_goals=0,
        player_split_goal_stats=False, max_player_assists=1, first_goalscorer=False,
    )
    assert assists.requires_team_goal_probs()
    assert assists.requires_team_assist_probs()
    assert assists.requires_player_assist_probs()
    assert not assists.requires_player_goal_probs()


def test_expansions_merge_is_union():
    first = Expansions(
        ht_score=True, ft_score=False, max_player_goals=1,
        player_split_goal_stats=False, max_player_assists=0, first_goalscorer=False,
    )
    second = Expansions(
        ht_score=False, ft_score=True, max_player_goals=0,
        player_split_goal_stats=False, max_player_assists=1, first_goalscorer=True,
    )
    merged = first.merge(second)
    assert merged == Expansions(
        ht_score=True, ft_score=True, max_player_goals=1,
        player_split_goal_stats=False, max_player_assists=1, first_goalscorer=True,
    )
    assert Expansions.empty().merge(first) == first


def test_prospect_scores():
    prospect = _prospect((1, 0), (3, 2), [_stats(0, 0, 0)], None)
    assert prospect.h2_score() == Score(2, 2)
    assert prospect.total_goals() == 5
    initial = Prospect.initial(2)
    assert initial.stats == (PlayerStats(), PlayerStats())
    assert initial.total_goals() == 0
    assert initial.first_scorer is None