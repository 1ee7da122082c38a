"""Probability of selections, isolated from the prospects of an exploration."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Tuple

from goalgrid.domain import OfferKind, OfferType, Outcome, Player
from goalgrid.interval import Expansions, Prospect
from goalgrid.selectors import (
    QuerySpec,
    anytime_assist_requirements,
    anytime_goalscorer_requirements,
    filter_anytime_assist,
    filter_anytime_goalscorer,
    filter_correct_score,
    filter_first_goalscorer,
    filter_total_goals,
    filter_win_draw,
    first_goalscorer_requirements,
    period_requirements,
    prepare_anytime_assist,
    prepare_anytime_goalscorer,
    prepare_first_goalscorer,
)

_SCORE_KINDS = frozenset(
    {
        OfferKind.HEAD_TO_HEAD,
        OfferKind.TOTAL_GOALS,
        OfferKind.CORRECT_SCORE,
        OfferKind.ASIAN_HANDICAP,
    }
)
_AUXILIARY_KINDS = frozenset({OfferKind.DRAW_NO_BET, OfferKind.SPLIT_HANDICAP})


def _unsupported(offer_type: OfferType) -> ValueError:
    if offer_type.kind in _AUXILIARY_KINDS:
        return ValueError(f"unsupported auxiliary {offer_type}")
    return ValueError(f"unsupported offer type {offer_type}")


def requirements(offer_type: OfferType) -> Expansions:
    """The expansions an exploration needs so that ``offer_type`` can be isolated."""
    kind = offer_type.kind
    if kind in _SCORE_KINDS:
        return period_requirements(offer_type.period)
    if kind is OfferKind.FIRST_GOALSCORER:
        return first_goalscorer_requirements()
    if kind is OfferKind.ANYTIME_GOALSCORER:
        return anytime_goalscorer_requirements()
    if kind is OfferKind.ANYTIME_ASSIST:
        return anytime_assist_requirements()
    raise _unsupported(offer_type)


def prepare(
    offer_type: OfferType, outcome: Outcome, player_lookup: Sequence[Player]
) -> QuerySpec:
    """Resolve what filtering ``outcome`` needs from the explored players."""
    kind = offer_type.kind
    if kind in _SCORE_KINDS:
        return QuerySpec.stateless()
    if kind is OfferKind.FIRST_GOALSCORER:
        return prepare_first_goalscorer(outcome, player_lookup)
    if kind is OfferKind.ANYTIME_GOALSCORER:
        return prepare_anytime_goalscorer(outcome, player_lookup)
    if kind is OfferKind.ANYTIME_ASSIST:
        return prepare_anytime_assist(outcome, player_lookup)
    raise _unsupported(offer_type)


def accepts(
    offer_type: OfferType, outcome: Outcome, query: QuerySpec, prospect: Prospect
) -> bool:
    """Whether ``prospect`` settles ``outcome`` of ``offer_type`` as a winner."""
    kind = offer_type.kind
    if kind in (OfferKind.HEAD_TO_HEAD, OfferKind.ASIAN_HANDICAP):
        return filter_win_draw(offer_type.period, outcome, prospect)
    if kind is OfferKind.TOTAL_GOALS:
        return filter_total_goals(offer_type.period, outcome, prospect)
    if kind is OfferKind.CORRECT_SCORE:
        return filter_correct_score(offer_type.period, outcome, prospect)
    if kind is OfferKind.FIRST_GOALSCORER:
        return filter_first_goalscorer(query, prospect)
    if kind is OfferKind.ANYTIME_GOALSCORER:
        return filter_anytime_goalscorer(query, prospect)
    if kind is OfferKind.ANYTIME_ASSIST:
        return filter_anytime_assist(query, prospect)
    raise _unsupported(offer_type)


def isolate(
    offer_type: OfferType,
    outcome: Outcome,
    prospects: Mapping[Prospect, float],
    player_lookup: Sequence[Player],
) -> float:
    """The total probability of the prospects in which ``outcome`` wins."""
    query = prepare(offer_type, outcome, player_lookup)
    return sum(
        (
            prob
            for prospect, prob in prospects.items()
            if accepts(offer_type, outcome, query, prospect)
        ),
        0.0,
    )


def isolate_set(
    selections: Iterable[Tuple[OfferType, Outcome]],
    prospects: Mapping[Prospect, float],
    player_lookup: Sequence[Player],
) -> float:
    """The total probability of the prospects in which every selection wins."""
    queries = [
        (offer_type, outcome, prepare(offer_type, outcome, player_lookup))
        for offer_type, outcome in selections
    ]
    return sum(
        (
            prob
            for prospect, prob in prospects.items()
            if all(
                accepts(offer_type, outcome, query, prospect)
                for offer_type, outcome, query in queries
            )
        ),
        0.0,
    )