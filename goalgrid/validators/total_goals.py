"""Validation rules for total-goals offers."""

from __future__ import annotations

from typing import Sequence, Tuple

from goalgrid.assertions import BooksumAssertion, ExtraneousOutcome, OutcomesCompleteAssertion
from goalgrid.domain import OfferKind, OfferType, Outcome, Over


def valid_outcomes(over: Over) -> Tuple[Outcome, Outcome]:
    """The two outcomes a total-goals offer on ``over`` must carry."""
    return Outcome.over(over.goals), Outcome.under(over.goals + 1)


def validate_outcomes(offer_type: OfferType, outcomes: Sequence[Outcome], over: Over) -> None:
    OutcomesCompleteAssertion(valid_outcomes(over)).check(outcomes, offer_type)


def validate_outcome(offer_type: OfferType, outcome: Outcome, over: Over) -> None:
    if outcome not in valid_outcomes(over):
        raise ExtraneousOutcome(outcome, offer_type)


def validate_probs(offer_type: OfferType, probs: Sequence[float]) -> None:
    if offer_type.kind is not OfferKind.TOTAL_GOALS:
        raise ValueError(f"{offer_type} is not a total goals offer")
    BooksumAssertion.with_default_tolerance(1.0, 1.0).check(probs, offer_type)