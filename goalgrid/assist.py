"""Enumeration of who assists a goal, and with what probability."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple


def iter_assists(
    assist_prob: float,
    assisters: Sequence[Tuple[int, float]],
    scorer_index: int,
) -> Iterator[Tuple[Optional[int], float]]:
    """Yield ``(assister, probability)`` pairs for a goal by ``scorer_index``.

    The last assister is the catch-all 'other' player, whose share is whatever the
    named assisters leave over. A named scorer cannot assist their own goal. The
    final pair, with no assister, is the chance that the goal was unassisted.
    Pairs with a probability that is not positive are left out.
    """
    if not assisters:
        raise ValueError("assisters must include the 'other' player")
    other_index = assisters[-1][0]
    remaining = 1.0
    for assister, player_prob in assisters:
        if assister == scorer_index and assister != other_index:
            continue
        if assister == other_index:
            share = remaining
        else:
            remaining -= player_prob
            share = player_prob
        prob = assist_prob * share
        if prob > 0.0:
            yield assister, prob
    unassisted = 1.0 - assist_prob
    if unassisted > 0.0:
        yield None, unassisted