"""Balanced wheel spreading pair co-occurrence evenly (BIBD-like heuristic)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial, combinations
from lottowheel.engine.coverage import round_half_up

from .base import Ticket, WheelResult, savings_percent, sorted_ticket
from .full import FullWheelGenerator

logger = logging.getLogger(__name__)


def balance_score(pair_counts: np.ndarray) -> int:
    """Map the spread of pair counts to 0~100, higher meaning more even."""
    if pair_counts.size == 0:
        return 100
    std = float(np.std(pair_counts))
    return max(0, min(100, round_half_up(100 - std * 20)))


class BalancedDesignGenerator:
    """Greedy sampling that favours tickets made of under-used pairs.

    Each round scores a sample of unused tickets by ``sum(1 / (count + 1))``
    over their internal pairs and keeps the best one. Pair counts live in a
    matrix over pool positions that exists only for one ``generate`` call.
    """

    def __init__(self, limits: WheelLimits | None = None) -> None:
        self.limits = limits or WheelLimits()

    def target_count(self, full_wheel_count: int) -> int:
        """Default number of tickets for a pool with the given full wheel size."""
        return min(
            self.limits.balanced_max_tickets,
            int(np.ceil(full_wheel_count * self.limits.balanced_fraction)),
        )

    def generate(
        self,
        pool: Sequence[int],
        game_size: int,
        target_count: int,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> WheelResult:
        if game_size <= 0:
            raise ValueError("game_size must be > 0.")
        if target_count <= 0:
            raise ValueError("target_count must be > 0.")

        numbers = tuple(int(value) for value in pool)
        pool_size = len(numbers)
        full_wheel_count = binomial(pool_size, game_size)
        if target_count >= full_wheel_count:
            logger.debug(
                "Balanced target %d covers the full wheel (%d); using the full wheel",
                target_count,
                full_wheel_count,
            )
            return FullWheelGenerator(self.limits).generate(numbers, game_size)

        generator = rng or np.random.default_rng(seed)
        exhaustive = full_wheel_count <= self.limits.balanced_sample_size
        pair_counts = np.zeros((pool_size, pool_size), dtype=np.int64)
        rows, cols = np.triu_indices(game_size, k=1)
        used: set[tuple[int, ...]] = set()
        tickets: list[Ticket] = []

        for _ in range(target_count):
            if exhaustive:
                candidates = self._remaining_candidates(pool_size, game_size, used)
            else:
                candidates = self._sample_candidates(pool_size, game_size, used, generator)
            if len(candidates) == 0:
                break

            counts = pair_counts[candidates[:, rows], candidates[:, cols]]
            scores = (1.0 / (counts + 1)).sum(axis=1)
            best = candidates[int(np.argmax(scores))]

            used.add(tuple(int(position) for position in best))
            pair_counts[best[rows], best[cols]] += 1
            tickets.append(sorted_ticket(numbers[position] for position in best))

        upper = pair_counts[np.triu_indices(pool_size, k=1)]
        mean_count = float(upper.mean()) if upper.size else 0.0
        score = balance_score(upper)
        logger.info(
            "Balanced wheel: %d tickets (full wheel %d), balance score %d",
            len(tickets),
            full_wheel_count,
            score,
        )
        return WheelResult(
            tickets=tuple(tickets),
            full_wheel_count=full_wheel_count,
            savings_percent=savings_percent(len(tickets), full_wheel_count),
            guarantee_description=(
                f"Balanced design: each pair of numbers appears about {mean_count:.1f} times"
            ),
            coverage_or_balance_score=score,
            wheel_type="balanced",
        )

    @staticmethod
    def _remaining_candidates(
        pool_size: int,
        game_size: int,
        used: set[tuple[int, ...]],
    ) -> np.ndarray:
        remaining = [
            candidate
            for candidate in combinations(range(pool_size), game_size)
            if candidate not in used
        ]
        return np.array(remaining, dtype=np.int64).reshape(-1, game_size)

    def _sample_candidates(
        self,
        pool_size: int,
        game_size: int,
        used: set[tuple[int, ...]],
        generator: np.random.Generator,
    ) -> np.ndarray:
        """Draw uniform random K-subsets of pool positions via random-key top-k."""
        keys = generator.random((self.limits.balanced_sample_size, pool_size))
        sampled = np.argpartition(keys, game_size - 1, axis=1)[:, :game_size]
        sampled.sort(axis=1)

        unique: dict[tuple[int, ...], None] = {}
        for row in sampled.tolist():
            candidate = tuple(row)
            if candidate not in used:
                unique.setdefault(candidate, None)
        return np.array(list(unique), dtype=np.int64).reshape(-1, game_size)
