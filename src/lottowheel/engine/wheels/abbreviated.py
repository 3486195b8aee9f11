"""Abbreviated wheel built by greedy set cover."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Sequence

from tqdm import tqdm

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial, combinations
from lottowheel.engine.coverage import CoverageEvaluator
from lottowheel.errors import ResourceLimitError, WheelValidationError

from .base import GuaranteeSpec, Ticket, WheelResult, savings_percent, sorted_ticket

logger = logging.getLogger(__name__)


def initial_gain(pool_size: int, game_size: int, guarantee: GuaranteeSpec) -> int:
    """Number of t-subsets any single ticket covers when nothing is covered yet."""
    t, m = guarantee.must_match, guarantee.guaranteed
    return sum(
        binomial(game_size, shared) * binomial(pool_size - game_size, t - shared)
        for shared in range(m, min(game_size, t) + 1)
    )


class GreedyCoveringOptimizer:
    """Pick tickets that cover the most uncovered t-subsets until all are covered.

    Candidates are every K-subset of the pool. Ties go to the candidate that
    comes first in enumeration order. Gains only shrink as subsets get
    covered, so stale gains kept in a heap are upper bounds and a candidate
    is re-scored only when it reaches the top (lazy greedy). The selection
    is identical to rescanning every candidate on every round.
    """

    def __init__(self, limits: WheelLimits | None = None) -> None:
        self.limits = limits or WheelLimits()

    def validate(self, pool: Sequence[int], game_size: int, guarantee: GuaranteeSpec) -> None:
        """Reject bad parameters and oversized enumerations before any work."""
        pool_size = len(pool)
        if pool_size < game_size:
            raise WheelValidationError(f"Select at least {game_size} numbers.")
        guarantee.validate(pool_size, game_size)

        t_subsets = binomial(pool_size, guarantee.must_match)
        if t_subsets > self.limits.max_t_subsets:
            raise ResourceLimitError(
                "subsets to check",
                t_subsets,
                self.limits.max_t_subsets,
                hint="Reduce the pool or pick a simpler guarantee (e.g. 3-if-4).",
            )

        candidates = binomial(pool_size, game_size)
        if candidates > self.limits.max_candidate_tickets:
            raise ResourceLimitError(
                "candidate tickets",
                candidates,
                self.limits.max_candidate_tickets,
                hint="Use a smaller pool or the balanced wheel.",
            )

    def select_tickets(
        self,
        pool: Sequence[int],
        game_size: int,
        guarantee: GuaranteeSpec,
        *,
        max_tickets: int | None = None,
        progress: bool = False,
    ) -> list[Ticket]:
        """Run the greedy loop and return the chosen tickets in selection order."""
        numbers = tuple(int(value) for value in pool)
        self.validate(numbers, game_size, guarantee)
        budget = max_tickets if max_tickets is not None else self.limits.max_tickets
        if budget <= 0:
            raise ValueError("max_tickets must be > 0.")

        evaluator = CoverageEvaluator(numbers, guarantee.must_match, guarantee.guaranteed)
        uncovered = set(evaluator.subset_masks())
        candidates = list(combinations(numbers, game_size))
        candidate_masks = [evaluator.mask(candidate) for candidate in candidates]
        logger.debug(
            "Greedy cover: %d subsets, %d candidates, guarantee %s",
            len(uncovered),
            len(candidates),
            guarantee.label,
        )

        start_gain = initial_gain(len(numbers), game_size, guarantee)
        heap = [(-start_gain, index) for index in range(len(candidates))]
        heapq.heapify(heap)

        selected: list[Ticket] = []
        with tqdm(
            total=len(uncovered),
            desc=f"Covering {guarantee.label}",
            unit="subset",
            disable=not progress,
        ) as pbar:
            while uncovered and heap and len(selected) < budget:
                _, index = heapq.heappop(heap)
                covered = evaluator.covered_by(candidate_masks[index], uncovered)
                entry = (-len(covered), index)
                if heap and entry > heap[0]:
                    heapq.heappush(heap, entry)
                    continue
                if not covered:
                    break

                selected.append(sorted_ticket(candidates[index]))
                uncovered.difference_update(covered)
                pbar.update(len(covered))

        if uncovered:
            logger.warning(
                "Greedy cover stopped with %d subsets uncovered after %d tickets",
                len(uncovered),
                len(selected),
            )
        return selected

    def generate(
        self,
        pool: Sequence[int],
        game_size: int,
        guarantee: GuaranteeSpec,
        *,
        max_tickets: int | None = None,
        progress: bool = False,
    ) -> WheelResult:
        numbers = tuple(int(value) for value in pool)
        tickets = self.select_tickets(
            numbers,
            game_size,
            guarantee,
            max_tickets=max_tickets,
            progress=progress,
        )
        full_wheel_count = binomial(len(numbers), game_size)
        coverage = CoverageEvaluator(
            numbers, guarantee.must_match, guarantee.guaranteed
        ).evaluate(tickets)

        logger.info(
            "Abbreviated wheel %s: %d tickets (full wheel %d), coverage %d%%",
            guarantee.label,
            len(tickets),
            full_wheel_count,
            coverage.percent,
        )
        return WheelResult(
            tickets=tuple(tickets),
            full_wheel_count=full_wheel_count,
            savings_percent=savings_percent(len(tickets), full_wheel_count),
            guarantee_description=guarantee.describe(),
            coverage_or_balance_score=coverage.percent,
            wheel_type="abbreviated",
        )
