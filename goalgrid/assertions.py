"""Offer validation errors and the reusable checks that raise them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from goalgrid.domain import OfferType, Outcome


def _debug_float(value: float) -> str:
    return repr(float(value))


def _display_float(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class InvalidOffer(ValueError):
    """Raised when an offer fails validation."""


class MisalignedOffer(InvalidOffer):
    """The number of outcomes differs from the number of probabilities."""

    def __init__(self, outcomes: int, probs: int, offer_type: OfferType) -> None:
        self.outcomes = outcomes
        self.probs = probs
        self.offer_type = offer_type
        super().__init__(
            f"{outcomes}:{probs} outcomes:probabilities mapped for {offer_type}"
        )


class InvalidOutcome(InvalidOffer):
    """An offer's outcomes do not suit its type."""


class MissingOutcome(InvalidOutcome):
    def __init__(self, outcome: Outcome, offer_type: OfferType) -> None:
        self.outcome = outcome
        self.offer_type = offer_type
        super().__init__(f"{outcome} missing from {offer_type}")


class ExtraneousOutcome(InvalidOutcome):
    def __init__(self, outcome: Outcome, offer_type: OfferType) -> None:
        self.outcome = outcome
        self.offer_type = offer_type
        super().__init__(f"{outcome} does not belong in {offer_type}")


class InvalidOfferType(InvalidOffer):
    def __init__(self, offer_type: OfferType) -> None:
        self.offer_type = offer_type
        super().__init__(f"{offer_type} is not a valid offer type")


@dataclass(frozen=True)
class BooksumAssertion:
    """Requires the probabilities to sum into [lower, upper], give or take the tolerance."""

    lower: float
    upper: float
    tolerance: float

    DEFAULT_TOLERANCE = 1e-3

    @classmethod
    def with_default_tolerance(cls, lower: float, upper: float) -> "BooksumAssertion":
        return cls(lower, upper, cls.DEFAULT_TOLERANCE)

    def check(self, probs: Sequence[float], offer_type: OfferType) -> float:
        """Return the booksum, or raise WrongBooksum if it is out of range."""
        actual = sum(probs, 0.0)
        if actual < self.lower - self.tolerance or actual > self.upper + self.tolerance:
            raise WrongBooksum(self, actual, offer_type)
        return actual

    def __str__(self) -> str:
        return (
            f"{_debug_float(self.lower)}..={_debug_float(self.upper)}"
            f" ± {_display_float(self.tolerance)}"
        )


class WrongBooksum(InvalidOffer):
    def __init__(self, assertion: BooksumAssertion, actual: float, offer_type: OfferType) -> None:
        self.assertion = assertion
        self.actual = actual
        self.offer_type = offer_type
        super().__init__(
            f"expected booksum in {assertion}, got {_display_float(actual)} for {offer_type}"
        )


def check_alignment(
    outcomes: Sequence[Outcome], probs: Sequence[float], offer_type: OfferType
) -> None:
    """Raise MisalignedOffer unless every outcome has exactly one probability."""
    if len(outcomes) != len(probs):
        raise MisalignedOffer(len(outcomes), len(probs), offer_type)


@dataclass(frozen=True)
class OutcomesIntactAssertion:
    """Requires every one of ``outcomes`` to be present."""

    outcomes: Tuple[Outcome, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    def check(self, outcomes: Sequence[Outcome], offer_type: OfferType) -> None:
        present = set(outcomes)
        for outcome in self.outcomes:
            if outcome not in present:
                raise MissingOutcome(outcome, offer_type)


@dataclass(frozen=True)
class OutcomesMatchAssertion:
    """Requires every outcome to satisfy ``matcher``."""

    matcher: Callable[[Outcome], bool]

    def check(self, outcomes: Sequence[Outcome], offer_type: OfferType) -> None:
        mismatched = next((outcome for outcome in outcomes if not self.matcher(outcome)), None)
        if mismatched is not None:
            raise ExtraneousOutcome(mismatched, offer_type)


@dataclass(frozen=True)
class OutcomesCompleteAssertion:
    """Requires exactly ``outcomes`` to be present, no more and no fewer."""

    outcomes: Tuple[Outcome, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    def check(self, outcomes: Sequence[Outcome], offer_type: OfferType) -> None:
        OutcomesIntactAssertion(self.outcomes).check(outcomes, offer_type)
        if len(set(outcomes)) != len(self.outcomes):
            expected = self.outcomes
            OutcomesMatchAssertion(lambda outcome: outcome in expected).check(
                outcomes, offer_type
            )