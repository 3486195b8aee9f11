"""Measure how many t-subsets of a pool a ticket set covers."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from lottowheel.engine.combinatorics import combinations

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class CoverageResult:
    """Covered share of all t-subsets of a pool."""

    covered_count: int
    total_t_subsets: int
    percent: int


class CoverageEvaluator:
    """Check (t, m) coverage of tickets over a fixed pool.

    A t-subset of the pool is covered when some ticket shares at least ``m``
    numbers with it. Tickets and subsets are encoded as bit masks over pool
    positions, so a coverage test is a popcount of their intersection.
    """

    def __init__(self, pool: Sequence[int], must_match: int, guaranteed: int) -> None:
        if must_match < 0:
            raise ValueError("must_match must be >= 0.")
        if guaranteed < 0:
            raise ValueError("guaranteed must be >= 0.")

        self.pool = tuple(int(value) for value in pool)
        self.must_match = must_match
        self.guaranteed = guaranteed
        self._positions = {number: index for index, number in enumerate(self.pool)}

    def mask(self, numbers: Iterable[int]) -> int:
        """Encode numbers as a bit mask; numbers outside the pool are ignored."""
        encoded = 0
        for number in numbers:
            position = self._positions.get(int(number))
            if position is not None:
                encoded |= 1 << position
        return encoded

    def subset_masks(self) -> list[int]:
        """Return masks of every t-subset of the pool in enumeration order."""
        return [self.mask(subset) for subset in combinations(self.pool, self.must_match)]

    def covers(self, ticket_mask: int, subset_mask: int) -> bool:
        return (ticket_mask & subset_mask).bit_count() >= self.guaranteed

    def covered_by(self, ticket_mask: int, subset_masks: Iterable[int]) -> list[int]:
        """Return the subset masks a single ticket covers."""
        return [subset for subset in subset_masks if self.covers(ticket_mask, subset)]

    def evaluate(self, tickets: Iterable[Sequence[int]]) -> CoverageResult:
        ticket_masks = list(dict.fromkeys(self.mask(ticket) for ticket in tickets))
        subsets = self.subset_masks()
        total = len(subsets)

        covered = 0
        for subset in subsets:
            if any(self.covers(ticket, subset) for ticket in ticket_masks):
                covered += 1

        percent = round_half_up(covered / total * 100) if total > 0 else 0
        logger.debug(
            "Coverage %d/%d (%d%%) for %d tickets, t=%d, m=%d",
            covered,
            total,
            percent,
            len(ticket_masks),
            self.must_match,
            self.guaranteed,
        )
        return CoverageResult(covered_count=covered, total_t_subsets=total, percent=percent)


def calculate_coverage(
    tickets: Iterable[Sequence[int]],
    pool: Sequence[int],
    must_match: int,
    guaranteed: int,
) -> CoverageResult:
    """Return the share of t-subsets of ``pool`` covered by ``tickets``."""
    return CoverageEvaluator(pool, must_match, guaranteed).evaluate(tickets)
