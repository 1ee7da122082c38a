import pytest

from goalgrid.assertions import (
    ExtraneousOutcome,
    InvalidOfferType,
    MissingOutcome,
    WrongBooksum,
    check_alignment,
)
from goalgrid.domain import DrawHandicap, Offer, OfferType, Outcome, Side, WinHandicap
from goalgrid.validators import draw_no_bet

OFFER_TYPE = OfferType.draw_no_bet(DrawHandicap.ahead(2))


def _validate(offer):
    check_alignment(offer.outcomes, offer.probs, offer.offer_type)
    handicap = offer.offer_type.draw_handicap
    draw_no_bet.validate_type(offer.offer_type, handicap)
    draw_no_bet.validate_outcomes(offer.offer_type, offer.outcomes, handicap)
    return draw_no_bet.validate_probs(offer.offer_type, offer.probs)


def test_valid():
    outcomes = (
        Outcome.win(Side.HOME, WinHandicap.ahead_over(2)),
        Outcome.win(Side.AWAY, WinHandicap.behind_under(2)),
    )
    offer = Offer(OFFER_TYPE, outcomes, (0.4, 0.6))
    assert _validate(offer) == pytest.approx(1.0)
    assert draw_no_bet.valid_outcomes(DrawHandicap.ahead(2)) == outcomes


def test_wrong_booksum():
    offer = Offer(
        OFFER_TYPE,
        (
            Outcome.win(Side.HOME, WinHandicap.ahead_over(2)),
            Outcome.win(Side.AWAY, WinHandicap.behind_under(2)),
        ),
        (0.4, 0.5),
    )
    with pytest.raises(WrongBooksum) as err:
        _validate(offer)
    assert str(err.value) == (
        "expected booksum in 1.0..=1.0 ± 0.001, got 0.9 for DrawNoBet(Ahead(2))"
    )


def test_missing_outcome():
    offer = Offer(OFFER_TYPE, (Outcome.win(Side.HOME, WinHandicap.ahead_over(2)),), (1.0,))
    with pytest.raises(MissingOutcome) as err:
        _validate(offer)
    assert str(err.value) == "Win(Away, BehindUnder(2)) missing from DrawNoBet(Ahead(2))"


def test_extraneous_outcome():
    offer = Offer(
        OFFER_TYPE,
        (
            Outcome.win(Side.HOME, WinHandicap.ahead_over(2)),
            Outcome.win(Side.AWAY, WinHandicap.behind_under(2)),
            Outcome.draw(DrawHandicap.ahead(2)),
        ),
        (0.4, 0.5, 0.1),
    )
    with pytest.raises(ExtraneousOutcome) as err:
        _validate(offer)
    assert str(err.value) == "Draw(Ahead(2)) does not belong in DrawNoBet(Ahead(2))"


def test_invalid_type():
    offer = Offer(
        OfferType.draw_no_bet(DrawHandicap.behind(0)),
        (
            Outcome.win(Side.HOME, WinHandicap.behind_under(0)),
            Outcome.win(Side.AWAY, WinHandicap.ahead_over(0)),
        ),
        (0.4, 0.6),
    )
    with pytest.raises(InvalidOfferType) as err:
        _validate(offer)
    assert str(err.value) == "DrawNoBet(Behind(0)) is not a valid offer type"


def test_validate_outcome_accepts_and_rejects():
    handicap = DrawHandicap.ahead(2)
    with pytest.raises(ExtraneousOutcome) as err:
        draw_no_bet.validate_outcome(OFFER_TYPE, Outcome.none(), handicap)
    assert err.value.outcome == Outcome.none()
    assert draw_no_bet.validate_outcome(
        OFFER_TYPE, Outcome.win(Side.AWAY, WinHandicap.behind_under(2)), handicap
    ) is None


def test_valid_outcomes_behind():
    assert draw_no_bet.valid_outcomes(DrawHandicap.behind(1)) == (
        Outcome.win(Side.HOME, WinHandicap.behind_under(1)),
        Outcome.win(Side.AWAY, WinHandicap.ahead_over(1)),
    )