"""Pydantic schema for generation limits."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WheelLimits(BaseModel):
    """Resource ceilings and budgets applied before any enumeration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_full_wheel_tickets: int = Field(default=50_000, gt=0)
    max_full_wheel_tickets_large_game: int = Field(default=500, gt=0)
    large_game_size: int = Field(default=50, gt=0)

    max_t_subsets: int = Field(default=50_000, gt=0)
    max_candidate_tickets: int = Field(default=100_000, gt=0)
    max_tickets: int = Field(default=5_000, gt=0)

    balanced_sample_size: int = Field(default=1_000, gt=0)
    balanced_max_tickets: int = Field(default=200, gt=0)
    balanced_fraction: float = Field(default=0.5, gt=0.0, le=1.0)

    def full_wheel_ceiling(self, game_size: int) -> int:
        """Return the full wheel ticket ceiling for a given ticket size."""
        if game_size >= self.large_game_size:
            return self.max_full_wheel_tickets_large_game
        return self.max_full_wheel_tickets
