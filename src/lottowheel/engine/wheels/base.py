"""Shared types for wheel generators."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from lottowheel.engine.coverage import round_half_up
from lottowheel.errors import WheelValidationError

Ticket = tuple[int, ...]


@dataclass(frozen=True)
class GuaranteeSpec:
    """If ``must_match`` drawn numbers are in the pool, some ticket hits ``guaranteed``."""

    must_match: int
    guaranteed: int

    @property
    def label(self) -> str:
        return f"{self.guaranteed}-if-{self.must_match}"

    def describe(self) -> str:
        return (
            f"Guarantees {self.guaranteed} hits if {self.must_match} "
            "of the drawn numbers are in the pool"
        )

    def validate(self, pool_size: int, game_size: int) -> None:
        """Raise WheelValidationError when the guarantee cannot apply to this pool."""
        if self.guaranteed < 1:
            raise WheelValidationError(
                f"Guaranteed hits ({self.guaranteed}) must be at least 1."
            )
        if self.guaranteed > self.must_match:
            raise WheelValidationError(
                f"Guaranteed hits ({self.guaranteed}) cannot exceed "
                f"the numbers that must be drawn ({self.must_match})."
            )
        if self.must_match > pool_size:
            raise WheelValidationError(
                f"Pool ({pool_size}) is smaller than the numbers required "
                f"by the guarantee ({self.must_match})."
            )
        if self.guaranteed > game_size:
            raise WheelValidationError(
                f"Guarantee ({self.guaranteed}) is larger than the ticket size ({game_size})."
            )


@dataclass(frozen=True)
class WheelResult:
    """Tickets of one generated wheel with summary statistics."""

    tickets: tuple[Ticket, ...]
    full_wheel_count: int
    savings_percent: int
    guarantee_description: str
    coverage_or_balance_score: int
    wheel_type: str

    @property
    def ticket_count(self) -> int:
        return len(self.tickets)

    def to_dict(self) -> dict[str, Any]:
        return {
            "wheel_type": self.wheel_type,
            "tickets": [list(ticket) for ticket in self.tickets],
            "full_wheel_count": self.full_wheel_count,
            "ticket_count": self.ticket_count,
            "savings_percent": self.savings_percent,
            "guarantee_description": self.guarantee_description,
            "coverage_or_balance_score": self.coverage_or_balance_score,
        }


def savings_percent(ticket_count: int, full_wheel_count: int) -> int:
    """Percent of the full wheel saved by a reduced wheel.

    Any wheel smaller than the full one reports below 100, even when the
    ratio rounds up.
    """
    if full_wheel_count <= 0:
        return 0
    percent = round_half_up((1 - ticket_count / full_wheel_count) * 100)
    if ticket_count < full_wheel_count:
        return min(99, percent)
    return percent


def sorted_ticket(numbers: Iterable[int]) -> Ticket:
    return tuple(sorted(int(value) for value in numbers))


def normalize_pool(pool: Sequence[int], total_numbers: int | None = None) -> tuple[int, ...]:
    """Return pool numbers as ints with duplicates dropped, keeping first occurrence."""
    numbers = tuple(dict.fromkeys(int(value) for value in pool))
    for number in numbers:
        if number < 1:
            raise WheelValidationError(f"Pool numbers must be positive, got {number}.")
        if total_numbers is not None and number > total_numbers:
            raise WheelValidationError(
                f"Pool number {number} is outside the range 1~{total_numbers}."
            )
    return numbers
