import pytest

from goalgrid.assertions import ExtraneousOutcome, MissingOutcome, WrongBooksum
from goalgrid.domain import OfferType, Outcome, Over, Period
from goalgrid.validators import total_goals

OVER = Over(2)
OFFER_TYPE = OfferType.total_goals(Period.FULL_TIME, OVER)


def test_valid():
    outcomes = [Outcome.over(2), Outcome.under(3)]
    assert total_goals.valid_outcomes(OVER) == tuple(outcomes)
    assert total_goals.validate_outcomes(OFFER_TYPE, outcomes, OVER) is None
    assert total_goals.validate_probs(OFFER_TYPE, [0.4, 0.6]) is None


def test_wrong_booksum():
    with pytest.raises(WrongBooksum) as error:
        total_goals.validate_probs(OFFER_TYPE, [0.4, 0.5])
    assert str(error.value) == (
        "expected booksum in 1.0..=1.0 ± 0.001, got 0.9 for TotalGoals(FullTime, Over(2))"
    )


def test_missing_outcome():
    with pytest.raises(MissingOutcome) as error:
        total_goals.validate_outcomes(OFFER_TYPE, [Outcome.over(2)], OVER)
    assert str(error.value) == "Under(3) missing from TotalGoals(FullTime, Over(2))"


def test_extraneous_outcome():
    with pytest.raises(ExtraneousOutcome) as error:
        total_goals.validate_outcomes(
            OFFER_TYPE, [Outcome.over(2), Outcome.under(3), Outcome.none()], OVER
        )
    assert str(error.value) == "None does not belong in TotalGoals(FullTime, Over(2))"


def test_single_outcome():
    total_goals.validate_outcome(OFFER_TYPE, Outcome.under(3), OVER)
    with pytest.raises(ExtraneousOutcome) as error:
        total_goals.validate_outcome(OFFER_TYPE, Outcome.under(2), OVER)
    assert error.value.outcome == Outcome.under(2)


def test_probs_of_other_offer_type_rejected():
    with pytest.raises(ValueError):
        total_goals.validate_probs(OfferType.first_goalscorer(), [1.0])