"""Full wheel: every K-subset of the pool."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial, combinations
from lottowheel.errors import ResourceLimitError

from .base import WheelResult, sorted_ticket

logger = logging.getLogger(__name__)

FULL_WHEEL_DESCRIPTION = (
    "Full wheel: guarantees the top prize if every drawn number is in the pool"
)


class FullWheelGenerator:
    """Enumerate the exhaustive wheel, bounded by the configured ceiling."""

    def __init__(self, limits: WheelLimits | None = None) -> None:
        self.limits = limits or WheelLimits()

    def generate(self, pool: Sequence[int], game_size: int) -> WheelResult:
        numbers = tuple(int(value) for value in pool)
        if len(numbers) < game_size:
            return WheelResult(
                tickets=(),
                full_wheel_count=0,
                savings_percent=0,
                guarantee_description=FULL_WHEEL_DESCRIPTION,
                coverage_or_balance_score=100,
                wheel_type="full",
            )

        full_wheel_count = binomial(len(numbers), game_size)
        ceiling = self.limits.full_wheel_ceiling(game_size)
        if full_wheel_count > ceiling:
            raise ResourceLimitError(
                "full wheel tickets",
                full_wheel_count,
                ceiling,
                hint="Use an abbreviated or balanced wheel, or a smaller pool.",
            )

        tickets = tuple(sorted_ticket(ticket) for ticket in combinations(numbers, game_size))
        logger.info("Full wheel: %d tickets from a pool of %d", len(tickets), len(numbers))
        return WheelResult(
            tickets=tickets,
            full_wheel_count=full_wheel_count,
            savings_percent=0,
            guarantee_description=FULL_WHEEL_DESCRIPTION,
            coverage_or_balance_score=100,
            wheel_type="full",
        )
