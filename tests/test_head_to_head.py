import pytest

from goalgrid.assertions import (
    ExtraneousOutcome,
    InvalidOfferType,
    MissingOutcome,
    WrongBooksum,
    check_alignment,
)
from goalgrid.domain import DrawHandicap, Offer, OfferType, Outcome, Period, Side, WinHandicap
from goalgrid.validators import head_to_head

OFFER_TYPE = OfferType.head_to_head(Period.FULL_TIME, DrawHandicap.ahead(2))


def _validate(offer):
    check_alignment(offer.outcomes, offer.probs, offer.offer_type)
    handicap = offer.offer_type.draw_handicap
    head_to_head.validate_type(offer.offer_type, handicap)
    head_to_head.validate_outcomes(offer.offer_type, offer.outcomes, handicap)
    return head_to_head.validate_probs(offer.offer_type, offer.probs)


def _full_outcomes():
    return (
        Outcome.win(Side.HOME, WinHandicap.ahead_over(2)),
        Outcome.win(Side.AWAY, WinHandicap.behind_under(2)),
        Outcome.draw(DrawHandicap.ahead(2)),
    )


def test_valid():
    offer = Offer(OFFER_TYPE, _full_outcomes(), (0.4, 0.4, 0.2))
    assert _validate(offer) == pytest.approx(1.0)
    assert head_to_head.valid_outcomes(DrawHandicap.ahead(2)) == _full_outcomes()


def test_wrong_booksum():
    offer = Offer(OFFER_TYPE, _full_outcomes(), (0.4, 0.4, 0.1))
    with pytest.raises(WrongBooksum) as err:
        _validate(offer)
    message = str(err.value)
    assert message.startswith("expected booksum in 1.0..=1.0 ± 0.001, got 0.9")
    assert message.endswith(" for HeadToHead(FullTime, Ahead(2))")
    assert err.value.actual == pytest.approx(0.9)


def test_missing_outcome():
    offer = Offer(OFFER_TYPE, _full_outcomes()[:2], (0.4, 0.6))
    with pytest.raises(MissingOutcome) as err:
        _validate(offer)
    assert str(err.value) == "Draw(Ahead(2)) missing from HeadToHead(FullTime, Ahead(2))"


def test_extraneous_outcome():
    offer = Offer(
        OFFER_TYPE,
        _full_outcomes() + (Outcome.none(),),
        (0.4, 0.5, 0.05, 0.05),
    )
    with pytest.raises(ExtraneousOutcome) as err:
        _validate(offer)
    assert str(err.value) == "None does not belong in HeadToHead(FullTime, Ahead(2))"


def test_invalid_type():
    offer = Offer(
        OfferType.head_to_head(Period.FULL_TIME, DrawHandicap.behind(0)),
        (
            Outcome.win(Side.HOME, WinHandicap.behind_under(0)),
            Outcome.win(Side.AWAY, WinHandicap.ahead_over(0)),
            Outcome.draw(DrawHandicap.behind(0)),
        ),
        (0.4, 0.4, 0.2),
    )
    with pytest.raises(InvalidOfferType) as err:
        _validate(offer)
    assert str(err.value) == "HeadToHead(FullTime, Behind(0)) is not a valid offer type"


def test_validate_outcome():
    handicap = DrawHandicap.ahead(2)
    assert head_to_head.validate_outcome(
        OFFER_TYPE, Outcome.draw(DrawHandicap.ahead(2)), handicap
    ) is None
    with pytest.raises(ExtraneousOutcome) as err:
        head_to_head.validate_outcome(OFFER_TYPE, Outcome.draw(DrawHandicap.ahead(1)), handicap)
    assert str(err.value) == "Draw(Ahead(1)) does not belong in HeadToHead(FullTime, Ahead(2))"