"""Validation rules for split (quarter-goal) handicap offers."""

from __future__ import annotations

from typing import Sequence, Tuple

from goalgrid.assertions import (
    BooksumAssertion,
    ExtraneousOutcome,
    InvalidOfferType,
    OutcomesCompleteAssertion,
)
from goalgrid.domain import (
    DrawHandicap,
    DrawHandicapKind,
    OfferType,
    Outcome,
    Side,
    WinHandicap,
    WinHandicapKind,
)


def valid_outcomes(
    draw_handicap: DrawHandicap, win_handicap: WinHandicap
) -> Tuple[Outcome, Outcome]:
    """The home split win as given, and the away split win on both flipped handicaps."""
    return (
        Outcome.split_win(Side.HOME, draw_handicap, win_handicap),
        Outcome.split_win(Side.AWAY, draw_handicap.flip(), win_handicap.flip_asian()),
    )


def validate_outcomes(
    offer_type: OfferType,
    outcomes: Sequence[Outcome],
    draw_handicap: DrawHandicap,
    win_handicap: WinHandicap,
) -> None:
    OutcomesCompleteAssertion(valid_outcomes(draw_handicap, win_handicap)).check(
        outcomes, offer_type
    )


def validate_outcome(
    offer_type: OfferType,
    outcome: Outcome,
    draw_handicap: DrawHandicap,
    win_handicap: WinHandicap,
) -> None:
    if outcome not in valid_outcomes(draw_handicap, win_handicap):
        raise ExtraneousOutcome(outcome, offer_type)


def validate_probs(offer_type: OfferType, probs: Sequence[float]) -> float:
    """Return the booksum, which must be 1 within the default tolerance."""
    return BooksumAssertion.with_default_tolerance(1.0, 1.0).check(probs, offer_type)


def _is_valid_pairing(draw_handicap: DrawHandicap, win_handicap: WinHandicap) -> bool:
    if win_handicap.kind is WinHandicapKind.AHEAD_OVER:
        if draw_handicap.kind is not DrawHandicapKind.AHEAD:
            return False
        # -x.25 when equal, -x.75 when the draw line is one further ahead
        return draw_handicap.by in (win_handicap.by, win_handicap.by + 1)

    if draw_handicap.kind is DrawHandicapKind.BEHIND:
        behind = draw_handicap.by
    elif draw_handicap.by == 0:
        # Behind(0) is written as Ahead(0) by convention
        behind = 0
    else:
        return False
    # +x.75 when equal, +x.25 when the win line is one further behind
    return win_handicap.by in (behind, behind + 1)


def validate_type(
    offer_type: OfferType, draw_handicap: DrawHandicap, win_handicap: WinHandicap
) -> None:
    if not _is_valid_pairing(draw_handicap, win_handicap):
        raise InvalidOfferType(offer_type)