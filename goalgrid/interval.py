"""Interval-by-interval exploration of how a match can unfold."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from goalgrid.assist import iter_assists
from goalgrid.domain import Player, Score, Side

NUM_PLAYERS = 3
NUM_PLAYER_STATS = NUM_PLAYERS + 1
MAX_COUNT = 255
MAX_TOTAL_GOALS = 65535


@dataclass(frozen=True)
class PeriodStats:
    """A player's tally for one half."""

    goals: int = 0


@dataclass(frozen=True)
class PlayerStats:
    """A player's goals in each half and assists over the match."""

    h1: PeriodStats = field(default_factory=PeriodStats)
    h2: PeriodStats = field(default_factory=PeriodStats)
    assists: int = 0


@dataclass(frozen=True)
class Prospect:
    """One distinguishable state of the match."""

    ht_score: Score
    ft_score: Score
    stats: Tuple[PlayerStats, ...]
    first_scorer: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "stats", tuple(self.stats))

    @classmethod
    def initial(cls, players: int) -> "Prospect":
        """The state before kick-off, tracking ``players`` players."""
        return cls(
            Score.nil_all(),
            Score.nil_all(),
            tuple(PlayerStats() for _ in range(players)),
            None,
        )

    def h2_score(self) -> Score:
        return Score(
            self.ft_score.home - self.ht_score.home,
            self.ft_score.away - self.ht_score.away,
        )

    def total_goals(self) -> int:
        return max(self.ht_score.total(), self.ft_score.total())


Prospects = Dict[Prospect, float]


@dataclass(frozen=True)
class UnivariateProbs:
    home: float = 0.0
    away: float = 0.0


@dataclass(frozen=True)
class BivariateProbs:
    home: float = 0.0
    away: float = 0.0
    common: float = 0.0


@dataclass(frozen=True)
class Expansions:
    """Which aspects of the match the exploration keeps apart."""

    ht_score: bool = True
    ft_score: bool = True
    max_player_goals: int = MAX_COUNT
    player_split_goal_stats: bool = True
    max_player_assists: int = MAX_COUNT
    first_goalscorer: bool = True

    def validate(self) -> None:
        """Raise ValueError if the expansions are inconsistent or all disabled."""
        if self.player_split_goal_stats and self.max_player_goals <= 0:
            raise ValueError("cannot expand player split goal stats without player goals")
        if not (
            self.ft_score
            or self.ht_score
            or self.max_player_goals > 0
            or self.first_goalscorer
            or self.max_player_assists > 0
        ):
            raise ValueError("at least one expansion must be enabled")

    def requires_team_goal_probs(self) -> bool:
        return (
            self.ht_score
            or self.ft_score
            or self.max_player_goals > 0
            or self.first_goalscorer
            or self.max_player_assists > 0
        )

    def requires_team_assist_probs(self) -> bool:
        return self.max_player_assists > 0

    def requires_player_goal_probs(self) -> bool:
        return self.max_player_goals > 0 or self.first_goalscorer

    def requires_player_assist_probs(self) -> bool:
        return self.max_player_assists > 0

    @classmethod
    def empty(cls) -> "Expansions":
        return cls(
            ht_score=False,
            ft_score=False,
            max_player_goals=0,
            player_split_goal_stats=False,
            max_player_assists=0,
            first_goalscorer=False,
        )

    def merge(self, other: "Expansions") -> "Expansions":
        """The union of both expansions."""
        return Expansions(
            ht_score=self.ht_score or other.ht_score,
            ft_score=self.ft_score or other.ft_score,
            max_player_goals=max(self.max_player_goals, other.max_player_goals),
            player_split_goal_stats=self.player_split_goal_stats
            or other.player_split_goal_stats,
            max_player_assists=max(self.max_player_assists, other.max_player_assists),
            first_goalscorer=self.first_goalscorer or other.first_goalscorer,
        )


@dataclass(frozen=True)
class PruneThresholds:
    max_total_goals: int = MAX_TOTAL_GOALS
    min_prob: float = 0.0


@dataclass(frozen=True)
class TeamProbs:
    h1_goals: BivariateProbs
    h2_goals: BivariateProbs
    assists: UnivariateProbs = field(default_factory=UnivariateProbs)


@dataclass(frozen=True)
class PlayerProbs:
    goal: Optional[float] = None
    assist: Optional[float] = None


@dataclass
class Config:
    intervals: int
    team_probs: TeamProbs
    player_probs: List[Tuple[Player, PlayerProbs]] = field(default_factory=list)
    prune_thresholds: PruneThresholds = field(default_factory=PruneThresholds)
    expansions: Expansions = field(default_factory=Expansions)


@dataclass
class Exploration:
    """The explored prospects, the players they index, and the pruned probability."""

    player_lookup: Tuple[Player, ...]
    prospects: Prospects
    pruned: float


def _upsert(prospects: Prospects, prospect: Prospect, prob: float) -> None:
    prospects[prospect] = prospects.get(prospect, 0.0) + prob


def _credit_goal(stats: PlayerStats, expansions: Expansions, first_half: bool) -> PlayerStats:
    limit = expansions.max_player_goals
    if expansions.player_split_goal_stats and first_half:
        if stats.h1.goals < limit:
            return replace(stats, h1=PeriodStats(stats.h1.goals + 1))
        return stats
    if stats.h2.goals < limit:
        return replace(stats, h2=PeriodStats(stats.h2.goals + 1))
    return stats


def _merge(
    expansions: Expansions,
    first_half: bool,
    prospect: Prospect,
    current_prob: float,
    partial_prob: float,
    next_prospects: Prospects,
    *,
    home_scorer: Optional[int] = None,
    away_scorer: Optional[int] = None,
    home_assister: Optional[int] = None,
    away_assister: Optional[int] = None,
    first_scoring_side: Optional[Side] = None,
) -> None:
    stats = list(prospect.stats)
    ht_home, ht_away = prospect.ht_score.home, prospect.ht_score.away
    ft_home, ft_away = prospect.ft_score.home, prospect.ft_score.away
    first_scorer = prospect.first_scorer

    if home_scorer is not None:
        stats[home_scorer] = _credit_goal(stats[home_scorer], expansions, first_half)
        if expansions.ft_score:
            ft_home += 1
        if expansions.ht_score and first_half:
            ht_home += 1
        if (
            expansions.first_goalscorer
            and first_scorer is None
            and first_scoring_side is Side.HOME
        ):
            first_scorer = home_scorer

    if away_scorer is not None:
        stats[away_scorer] = _credit_goal(stats[away_scorer], expansions, first_half)
        if expansions.ft_score:
            ft_away += 1
        if expansions.ht_score and first_half:
            ht_away += 1
        if (
            expansions.first_goalscorer
            and first_scorer is None
            and first_scoring_side is Side.AWAY
        ):
            first_scorer = away_scorer

    for assister in (home_assister, away_assister):
        if assister is not None and stats[assister].assists < expansions.max_player_assists:
            stats[assister] = replace(stats[assister], assists=stats[assister].assists + 1)

    merged = Prospect(
        Score(ht_home, ht_away), Score(ft_home, ft_away), tuple(stats), first_scorer
    )
    _upsert(next_prospects, merged, current_prob * partial_prob)


def explore(config: Config, include_intervals: Iterable[int]) -> Exploration:
    """Walk the given intervals, returning every reachable prospect with its probability."""
    config.expansions.validate()
    if len(config.player_probs) > NUM_PLAYERS:
        raise ValueError(f"at most {NUM_PLAYERS} players may be tracked")

    lookup: List[Player] = []
    home_scorers: List[Tuple[int, float]] = []
    away_scorers: List[Tuple[int, float]] = []
    home_assisters: List[Tuple[int, float]] = []
    away_assisters: List[Tuple[int, float]] = []
    for index, (player, player_probs) in enumerate(config.player_probs):
        if player.is_other:
            raise ValueError(f"unsupported scorer {player}")
        lookup.append(player)
        if player.side is Side.HOME:
            scorers, assisters = home_scorers, home_assisters
        else:
            scorers, assisters = away_scorers, away_assisters
        if player_probs.goal is not None:
            scorers.append((index, player_probs.goal))
        if player_probs.assist is not None:
            assisters.append((index, player_probs.assist))

    other_index = len(config.player_probs)
    lookup.append(Player.other())
    home_scorers.append((other_index, 1.0 - sum(prob for _, prob in home_scorers)))
    away_scorers.append((other_index, 1.0 - sum(prob for _, prob in away_scorers)))
    # the share of 'other' assisters is derived as the assists are enumerated
    home_assisters.append((other_index, float("nan")))
    away_assisters.append((other_index, float("nan")))

    expansions = config.expansions
    thresholds = config.prune_thresholds
    assists = config.team_probs.assists
    prospects: Prospects = {Prospect.initial(len(lookup)): 1.0}
    pruned: List[Tuple[Prospect, float]] = []

    for interval in include_intervals:
        first_half = interval < config.intervals // 2
        params = config.team_probs.h1_goals if first_half else config.team_probs.h2_goals
        neither_prob = 1.0 - params.home - params.away - params.common
        next_prospects: Prospects = {}

        for prospect, prob in prospects.items():
            if prob < thresholds.min_prob:
                pruned.append((prospect, prob))
                continue

            _merge(expansions, first_half, prospect, prob, neither_prob, next_prospects)

            goals = prospect.total_goals()
            if goals >= thresholds.max_total_goals:
                pruned.append((prospect, prob * (params.home + params.away + params.common)))
                continue

            for scorer, score_prob in home_scorers:
                for assister, assist_prob in iter_assists(assists.home, home_assisters, scorer):
                    _merge(
                        expansions, first_half, prospect, prob,
                        params.home * score_prob * assist_prob, next_prospects,
                        home_scorer=scorer, home_assister=assister,
                        first_scoring_side=Side.HOME,
                    )

            for scorer, score_prob in away_scorers:
                for assister, assist_prob in iter_assists(assists.away, away_assisters, scorer):
                    _merge(
                        expansions, first_half, prospect, prob,
                        params.away * score_prob * assist_prob, next_prospects,
                        away_scorer=scorer, away_assister=assister,
                        first_scoring_side=Side.AWAY,
                    )

            if goals + 1 >= thresholds.max_total_goals:
                pruned.append((prospect, prob * params.common))
                continue

            for home_scorer, home_score_prob in home_scorers:
                for away_scorer, away_score_prob in away_scorers:
                    for side in (Side.HOME, Side.AWAY):
                        for home_assister, home_assist_prob in iter_assists(
                            assists.home, home_assisters, home_scorer
                        ):
                            for away_assister, away_assist_prob in iter_assists(
                                assists.away, away_assisters, away_scorer
                            ):
                                _merge(
                                    expansions, first_half, prospect, prob,
                                    params.common * 0.5 * home_score_prob * away_score_prob
                                    * home_assist_prob * away_assist_prob,
                                    next_prospects,
                                    home_scorer=home_scorer, away_scorer=away_scorer,
                                    home_assister=home_assister, away_assister=away_assister,
                                    first_scoring_side=side,
                                )

        prospects = next_prospects

    pruned_prob = 0.0
    for prospect, prob in pruned:
        pruned_prob += prob
        _upsert(prospects, prospect, prob)

    return Exploration(tuple(lookup), prospects, pruned_prob)