"""Whole-offer validation, dispatched on the kind of offer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from goalgrid.assertions import check_alignment
from goalgrid.domain import Offer, OfferKind, OfferType, Outcome
from goalgrid.validators import asian_handicap, draw_no_bet, head_to_head, split_handicap
from goalgrid.validators import total_goals


def validate_offer_type(offer_type: OfferType) -> None:
    """Raise InvalidOfferType if the offer type's parameters do not make sense."""
    kind = offer_type.kind
    if kind is OfferKind.HEAD_TO_HEAD:
        head_to_head.validate_type(offer_type, offer_type.draw_handicap)
    elif kind is OfferKind.DRAW_NO_BET:
        draw_no_bet.validate_type(offer_type, offer_type.draw_handicap)
    elif kind is OfferKind.ASIAN_HANDICAP:
        asian_handicap.validate_type(offer_type, offer_type.win_handicap)
    elif kind is OfferKind.SPLIT_HANDICAP:
        split_handicap.validate_type(
            offer_type, offer_type.draw_handicap, offer_type.win_handicap
        )


def validate_outcomes(offer_type: OfferType, outcomes: Sequence[Outcome]) -> None:
    """Raise InvalidOutcome unless the outcomes are exactly those the offer type needs."""
    kind = offer_type.kind
    if kind is OfferKind.TOTAL_GOALS:
        total_goals.validate_outcomes(offer_type, outcomes, offer_type.over)
    elif kind is OfferKind.HEAD_TO_HEAD:
        head_to_head.validate_outcomes(offer_type, outcomes, offer_type.draw_handicap)
    elif kind is OfferKind.ASIAN_HANDICAP:
        asian_handicap.validate_outcomes(offer_type, outcomes, offer_type.win_handicap)
    elif kind is OfferKind.DRAW_NO_BET:
        draw_no_bet.validate_outcomes(offer_type, outcomes, offer_type.draw_handicap)
    elif kind is OfferKind.SPLIT_HANDICAP:
        split_handicap.validate_outcomes(
            offer_type, outcomes, offer_type.draw_handicap, offer_type.win_handicap
        )


def validate_outcome(offer_type: OfferType, outcome: Outcome) -> None:
    """Raise ExtraneousOutcome if a single outcome does not belong to the offer type."""
    kind = offer_type.kind
    if kind is OfferKind.TOTAL_GOALS:
        total_goals.validate_outcome(offer_type, outcome, offer_type.over)
    elif kind is OfferKind.HEAD_TO_HEAD:
        head_to_head.validate_outcome(offer_type, outcome, offer_type.draw_handicap)
    elif kind is OfferKind.ASIAN_HANDICAP:
        asian_handicap.validate_outcome(offer_type, outcome, offer_type.win_handicap)
    elif kind is OfferKind.DRAW_NO_BET:
        draw_no_bet.validate_outcome(offer_type, outcome, offer_type.draw_handicap)
    elif kind is OfferKind.SPLIT_HANDICAP:
        split_handicap.validate_outcome(
            offer_type, outcome, offer_type.draw_handicap, offer_type.win_handicap
        )


def _validate_probs(offer_type: OfferType, probs: Sequence[float]) -> None:
    kind = offer_type.kind
    if kind is OfferKind.TOTAL_GOALS:
        total_goals.validate_probs(offer_type, probs)
    elif kind is OfferKind.HEAD_TO_HEAD:
        head_to_head.validate_probs(offer_type, probs)
    elif kind is OfferKind.ASIAN_HANDICAP:
        asian_handicap.validate_probs(offer_type, probs)
    elif kind is OfferKind.DRAW_NO_BET:
        draw_no_bet.validate_probs(offer_type, probs)
    elif kind is OfferKind.SPLIT_HANDICAP:
        split_handicap.validate_probs(offer_type, probs)


def validate_offer(offer: Offer) -> Offer:
    """Check alignment, type, outcomes and booksum in turn; return the offer if all pass."""
    check_alignment(offer.outcomes, offer.probs, offer.offer_type)
    validate_offer_type(offer.offer_type)
    validate_outcomes(offer.offer_type, offer.outcomes)
    _validate_probs(offer.offer_type, offer.probs)
    return offer


@dataclass(frozen=True)
class UnvalidatedOffer:
    """Wraps an offer so it cannot be used by accident before it has been validated."""

    offer: Offer

    def unchecked(self) -> Offer:
        """The wrapped offer, without validation."""
        return self.offer

    def validated(self) -> Offer:
        """The wrapped offer, once it has passed validation."""
        return validate_offer(self.offer)