"""Validation rules for Asian handicap offers."""

from __future__ import annotations

from typing import Sequence, Tuple

from goalgrid.assertions import (
    BooksumAssertion,
    ExtraneousOutcome,
    InvalidOfferType,
    OutcomesCompleteAssertion,
)
from goalgrid.domain import OfferType, Outcome, Side, WinHandicap


def valid_outcomes(win_handicap: WinHandicap) -> Tuple[Outcome, Outcome]:
    """The home outcome on ``win_handicap`` and the away outcome on its Asian flip."""
    return (
        Outcome.win(Side.HOME, win_handicap),
        Outcome.win(Side.AWAY, win_handicap.flip_asian()),
    )


def validate_outcomes(
    offer_type: OfferType, outcomes: Sequence[Outcome], win_handicap: WinHandicap
) -> None:
    OutcomesCompleteAssertion(valid_outcomes(win_handicap)).check(outcomes, offer_type)


def validate_outcome(offer_type: OfferType, outcome: Outcome, win_handicap: WinHandicap) -> None:
    if outcome not in valid_outcomes(win_handicap):
        raise ExtraneousOutcome(outcome, offer_type)


def validate_probs(offer_type: OfferType, probs: Sequence[float]) -> None:
    BooksumAssertion.with_default_tolerance(1.0, 1.0).check(probs, offer_type)


def validate_type(offer_type: OfferType, win_handicap: WinHandicap) -> None:
    if win_handicap == WinHandicap.behind_under(0):
        raise InvalidOfferType(offer_type)