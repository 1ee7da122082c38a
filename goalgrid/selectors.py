"""Requirements, preparation and prospect filters for each supported kind of selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from goalgrid.domain import (
    DrawHandicapKind,
    OutcomeKind,
    Outcome,
    Period,
    Player,
    Side,
    WinHandicapKind,
)
from goalgrid.interval import Expansions, Prospect


class QueryKind(enum.Enum):
    STATELESS = "Stateless"
    PLAYER_LOOKUP = "PlayerLookup"
    NO_FIRST_GOALSCORER = "NoFirstGoalscorer"
    NO_ANYTIME_GOALSCORER = "NoAnytimeGoalscorer"
    NO_ANYTIME_ASSIST = "NoAnytimeAssist"


@dataclass(frozen=True)
class QuerySpec:
    """What a selection needs to know about the explored players before filtering."""

    kind: QueryKind
    player_index: Optional[int] = None

    @classmethod
    def stateless(cls) -> "QuerySpec":
        return cls(QueryKind.STATELESS)

    @classmethod
    def player_lookup(cls, index: int) -> "QuerySpec":
        return cls(QueryKind.PLAYER_LOOKUP, index)

    @classmethod
    def no_first_goalscorer(cls) -> "QuerySpec":
        return cls(QueryKind.NO_FIRST_GOALSCORER)

    @classmethod
    def no_anytime_goalscorer(cls) -> "QuerySpec":
        return cls(QueryKind.NO_ANYTIME_GOALSCORER)

    @classmethod
    def no_anytime_assist(cls) -> "QuerySpec":
        return cls(QueryKind.NO_ANYTIME_ASSIST)

    def __str__(self) -> str:
        if self.kind is QueryKind.PLAYER_LOOKUP:
            return f"PlayerLookup({self.player_index})"
        return self.kind.value


def period_requirements(period: Period) -> Expansions:
    """Expansions needed by score-based selections (win/draw, totals, correct score)."""
    empty = Expansions.empty()
    if period is Period.FIRST_HALF:
        return replace(empty, ht_score=True)
    if period is Period.SECOND_HALF:
        return replace(empty, ht_score=True, ft_score=True)
    return replace(empty, ft_score=True)


def first_goalscorer_requirements() -> Expansions:
    return replace(Expansions.empty(), first_goalscorer=True)


def anytime_goalscorer_requirements() -> Expansions:
    return replace(Expansions.empty(), max_player_goals=1)


def anytime_assist_requirements() -> Expansions:
    return replace(Expansions.empty(), max_player_assists=1)


def _index_of(player: Player, player_lookup: Sequence[Player]) -> int:
    try:
        return list(player_lookup).index(player)
    except ValueError:
        raise ValueError(f"{player} is not among the explored players") from None


def _prepare_player(
    outcome: Outcome, player_lookup: Sequence[Player], nobody: QuerySpec
) -> QuerySpec:
    if outcome.kind is OutcomeKind.PLAYER:
        return QuerySpec.player_lookup(_index_of(outcome.participant, player_lookup))
    if outcome.kind is OutcomeKind.NONE:
        return nobody
    raise ValueError(f"{outcome} unsupported")


def prepare_first_goalscorer(outcome: Outcome, player_lookup: Sequence[Player]) -> QuerySpec:
    return _prepare_player(outcome, player_lookup, QuerySpec.no_first_goalscorer())


def prepare_anytime_goalscorer(outcome: Outcome, player_lookup: Sequence[Player]) -> QuerySpec:
    return _prepare_player(outcome, player_lookup, QuerySpec.no_anytime_goalscorer())


def prepare_anytime_assist(outcome: Outcome, player_lookup: Sequence[Player]) -> QuerySpec:
    return _prepare_player(outcome, player_lookup, QuerySpec.no_anytime_assist())


def _period_goals(period: Period, prospect: Prospect) -> Tuple[int, int]:
    if period is Period.FIRST_HALF:
        score = prospect.ht_score
    elif period is Period.SECOND_HALF:
        score = prospect.h2_score()
    else:
        score = prospect.ft_score
    return score.home, score.away


def _wins(ours: int, theirs: int, handicap_kind: WinHandicapKind, by: int) -> bool:
    if handicap_kind is WinHandicapKind.AHEAD_OVER:
        return max(0, ours - theirs) > by
    return ours > theirs or theirs - ours < by


def filter_win_draw(period: Period, outcome: Outcome, prospect: Prospect) -> bool:
    """Whether the prospect settles a win or draw outcome, handicap included."""
    home, away = _period_goals(period, prospect)
    if outcome.kind is OutcomeKind.WIN:
        handicap = outcome.win_handicap
        if outcome.side is Side.HOME:
            return _wins(home, away, handicap.kind, handicap.by)
        return _wins(away, home, handicap.kind, handicap.by)
    if outcome.kind is OutcomeKind.DRAW:
        handicap = outcome.draw_handicap
        if handicap.kind is DrawHandicapKind.AHEAD:
            return home >= away and home - away == handicap.by
        return away >= home and away - home == handicap.by
    raise ValueError(f"{outcome} unsupported")


def filter_total_goals(period: Period, outcome: Outcome, prospect: Prospect) -> bool:
    """Whether the prospect settles an over or under outcome."""
    home, away = _period_goals(period, prospect)
    if outcome.kind is OutcomeKind.OVER:
        return home + away > outcome.limit
    if outcome.kind is OutcomeKind.UNDER:
        return home + away < outcome.limit
    raise ValueError(f"{outcome} unsupported")


def filter_correct_score(period: Period, outcome: Outcome, prospect: Prospect) -> bool:
    """Whether the prospect's score in the period is exactly the outcome's score."""
    if outcome.kind is not OutcomeKind.SCORE:
        raise ValueError(f"{outcome} unsupported")
    home, away = _period_goals(period, prospect)
    return outcome.scoreline.home == home and outcome.scoreline.away == away


def filter_first_goalscorer(query: QuerySpec, prospect: Prospect) -> bool:
    if query.kind is QueryKind.PLAYER_LOOKUP:
        return prospect.first_scorer is not None and prospect.first_scorer == query.player_index
    if query.kind is QueryKind.NO_FIRST_GOALSCORER:
        return prospect.first_scorer is None
    raise ValueError(f"{query} unsupported")


def filter_anytime_goalscorer(query: QuerySpec, prospect: Prospect) -> bool:
    if query.kind is QueryKind.PLAYER_LOOKUP:
        stats = prospect.stats[query.player_index]
        return stats.h1.goals > 0 or stats.h2.goals > 0
    if query.kind is QueryKind.NO_ANYTIME_GOALSCORER:
        return not any(stats.h1.goals > 0 or stats.h2.goals > 0 for stats in prospect.stats)
    raise ValueError(f"{query} unsupported")


def filter_anytime_assist(query: QuerySpec, prospect: Prospect) -> bool:
    if query.kind is QueryKind.PLAYER_LOOKUP:
        return prospect.stats[query.player_index].assists > 0
    if query.kind is QueryKind.NO_ANYTIME_ASSIST:
        return not any(stats.assists > 0 for stats in prospect.stats)
    raise ValueError(f"{query} unsupported")