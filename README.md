# goalgrid

A small library for modelling soccer match outcomes and checking betting offers.

The match is split into a number of equal intervals. In each interval the home side,
the away side, both, or neither may score, with probabilities that can differ between
the two halves. `goalgrid` walks every path through those intervals and keeps a table
of *prospects* (half-time score, full-time score, per-player goals and assists, first
scorer) with their probabilities. You can then ask for the probability of an offer
outcome, or of several outcomes happening together.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `goalgrid.domain`: the vocabulary. `Side`, `Period`, `Player` (`Player.named`,
  `Player.other`), `Score`, `Over`, `WinHandicap` (`ahead_over`, `behind_under`,
  `flip_asian`, `flip_european`), `DrawHandicap` (`ahead`, `behind`,
  `to_win_handicap`, `flip`), `OfferType`, `Outcome` and `Offer`. An `Offer` holds
  its offer type, its outcomes and one probability per outcome. The `str()` of each
  value gives a compact form such as `HeadToHead(FullTime, Ahead(0))`.
- `goalgrid.assertions`: the building blocks of validation (`BooksumAssertion`,
  `check_alignment`, `OutcomesIntactAssertion`, `OutcomesMatchAssertion`,
  `OutcomesCompleteAssertion`) and the exceptions they raise: `MisalignedOffer`,
  `InvalidOutcome` (with `MissingOutcome` and `ExtraneousOutcome`), `WrongBooksum`
  and `InvalidOfferType`. All derive from `InvalidOffer`, which is a `ValueError`.
- `goalgrid.validators`: per-market rules in `total_goals`, `head_to_head`,
  `draw_no_bet`, `asian_handicap` and `split_handicap`. Each has `valid_outcomes`,
  `validate_outcomes`, `validate_outcome` and `validate_probs`; all but
  `total_goals` also have `validate_type`.
- `goalgrid.validation`: `validate_offer`, `validate_offer_type`,
  `validate_outcomes`, `validate_outcome` and the `UnvalidatedOffer` wrapper, which
  hands out its offer through `unchecked()` or `validated()`.
- `goalgrid.assist`: `iter_assists`, which yields who assisted a goal and with what
  probability, including the unassisted case.
- `goalgrid.interval`: the model configuration (`Config`, `TeamProbs`,
  `BivariateProbs`, `UnivariateProbs`, `PlayerProbs`, `PruneThresholds`,
  `Expansions`) and `explore`, which returns an `Exploration` holding
  `player_lookup`, `prospects` and `pruned`.
- `goalgrid.selectors`: the per-market pieces used by queries: requirement
  functions, `prepare_*` functions returning a `QuerySpec`, and `filter_*`
  functions deciding whether a prospect settles an outcome.
- `goalgrid.query`: `requirements`, `prepare`, `accepts`, `isolate` and
  `isolate_set`.

## Validating an offer

`validate_offer` checks, in turn, that outcomes and probabilities line up, that the
offer type is well formed, that exactly the expected outcomes are present, and that
the probabilities sum to 1 within a tolerance of 0.001. Checks on type, outcomes and
booksum apply to total goals, head-to-head, Asian handicap, draw-no-bet and split
handicap offers. Any problem raises a subclass of `InvalidOffer`; on success the offer
is returned.

```python
from goalgrid.assertions import InvalidOffer
from goalgrid.domain import Offer, OfferType, Outcome, Over, Period
from goalgrid.validation import validate_offer

offer = Offer(
    OfferType.total_goals(Period.FULL_TIME, Over(2)),
    [Outcome.over(2)],
    [1.0],
)
try:
    validate_offer(offer)
except InvalidOffer as error:
    print(error)   # Under(3) missing from TotalGoals(FullTime, Over(2))
```

## Exploring a match

```python
from goalgrid.domain import OfferType, Outcome, Player, Side
from goalgrid.interval import (
    BivariateProbs, Config, PlayerProbs, PruneThresholds, TeamProbs,
    UnivariateProbs, explore,
)
from goalgrid.query import isolate, requirements

striker = Player.named(Side.HOME, "Striker")
config = Config(
    intervals=18,
    team_probs=TeamProbs(
        h1_goals=BivariateProbs(home=0.05, away=0.04, common=0.002),
        h2_goals=BivariateProbs(home=0.06, away=0.05, common=0.002),
        assists=UnivariateProbs(home=0.75, away=0.75),
    ),
    player_probs=[(striker, PlayerProbs(goal=0.25, assist=None))],
    prune_thresholds=PruneThresholds(max_total_goals=8, min_prob=0.0),
    expansions=requirements(OfferType.anytime_goalscorer()),
)
exploration = explore(config, range(config.intervals))

prob = isolate(
    OfferType.anytime_goalscorer(),
    Outcome.player(striker),
    exploration.prospects,
    exploration.player_lookup,
)
```

Intervals before `intervals // 2` use the first-half probabilities, the rest the
second-half ones. Up to three named players may be tracked; everyone else counts as
`Player.other()`. Prospects whose probability falls below `min_prob`, or whose goal
count reaches `max_total_goals`, stop being expanded, and the probability set aside
this way is reported as `Exploration.pruned`.

`requirements` gives the smallest `Expansions` an offer type needs; combine several
with `Expansions.merge` to query more than one market from a single exploration.
`isolate_set` takes a list of `(offer_type, outcome)` pairs and returns the
probability that all of them happen in the same match. Draw-no-bet and split
handicap offers can be validated but not queried, and player shots on target cannot
be queried either; these raise `ValueError`.

## What it does not do

`goalgrid` works with probabilities that you supply. It does not fit model
parameters to market prices, derive prices or overrounds, read or store market data,
or provide a command-line tool.