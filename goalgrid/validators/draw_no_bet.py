"""Validation rules for draw-no-bet offers."""

from __future__ import annotations

from typing import Sequence, Tuple

from goalgrid.assertions import (
    BooksumAssertion,
    ExtraneousOutcome,
    InvalidOfferType,
    OutcomesCompleteAssertion,
)
from goalgrid.domain import DrawHandicap, OfferType, Outcome, Side


def valid_outcomes(draw_handicap: DrawHandicap) -> Tuple[Outcome, Outcome]:
    """The home win on the handicap and the away win on its European flip."""
    win_handicap = draw_handicap.to_win_handicap()
    return (
        Outcome.win(Side.HOME, win_handicap),
        Outcome.win(Side.AWAY, win_handicap.flip_european()),
    )


def validate_outcomes(
    offer_type: OfferType, outcomes: Sequence[Outcome], draw_handicap: DrawHandicap
) -> None:
    OutcomesCompleteAssertion(valid_outcomes(draw_handicap)).check(outcomes, offer_type)


def validate_outcome(offer_type: OfferType, outcome: Outcome, draw_handicap: DrawHandicap) -> None:
    if outcome not in valid_outcomes(draw_handicap):
        raise ExtraneousOutcome(outcome, offer_type)


def validate_probs(offer_type: OfferType, probs: Sequence[float]) -> float:
    """Return the booksum, which must be 1 within the default tolerance."""
    return BooksumAssertion.with_default_tolerance(1.0, 1.0).check(probs, offer_type)


def validate_type(offer_type: OfferType, draw_handicap: DrawHandicap) -> None:
    if draw_handicap == DrawHandicap.behind(0):
        raise InvalidOfferType(offer_type)