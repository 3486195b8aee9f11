"""Single entry point routing a wheel request to its generator."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal

import numpy as np
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial, schonheim_bound
from lottowheel.engine.wheels import (
    BalancedDesignGenerator,
    FullWheelGenerator,
    GreedyCoveringOptimizer,
    WheelResult,
    normalize_pool,
)
from lottowheel.errors import WheelValidationError
from lottowheel.lotteries import LotteryShape, get_lottery

from .guarantee import GuaranteeSpec, parse_guarantee

logger = logging.getLogger(__name__)

WheelType = Literal["full", "abbreviated", "balanced"]

class CustomGuarantee(BaseModel):
    """Explicit guarantee used when ``guarantee_level`` is ``"custom"``."""

    model_config = ConfigDict(extra="forbid")

    guaranteed: int = Field(ge=1)
    must_match: int = Field(ge=1, validation_alias=AliasChoices("must_match", "mustMatch"))


class WheelConfig(BaseModel):
    """Generation strategy and guarantee level of a wheel request."""

    model_config = ConfigDict(extra="forbid")

    wheel_type: WheelType = Field(
        default="full", validation_alias=AliasChoices("wheel_type", "wheelType")
    )
    guarantee_level: str = Field(
        default="3-if-4", validation_alias=AliasChoices("guarantee_level", "guaranteeLevel")
    )
    custom_guarantee: CustomGuarantee | None = Field(
        default=None, validation_alias=AliasChoices("custom_guarantee", "customGuarantee")
    )

    def guarantee(self) -> GuaranteeSpec:
        custom = None
        if self.custom_guarantee is not None:
            custom = GuaranteeSpec(
                must_match=self.custom_guarantee.must_match,
                guaranteed=self.custom_guarantee.guaranteed,
            )
        return parse_guarantee(self.guarantee_level, custom)


def _coerce_config(config: WheelConfig | Mapping[str, Any] | None) -> WheelConfig:
    if config is None:
        return WheelConfig()
    if isinstance(config, WheelConfig):
        return config
    try:
        return WheelConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise WheelValidationError(f"Invalid wheel config: {exc}") from exc


def _coerce_shape(lottery_shape: LotteryShape | str) -> LotteryShape:
    if isinstance(lottery_shape, LotteryShape):
        return lottery_shape
    try:
        return get_lottery(lottery_shape)
    except KeyError as exc:
        raise WheelValidationError(str(exc.args[0])) from exc


def generate_wheel(
    pool: Sequence[int],
    lottery_shape: LotteryShape | str,
    config: WheelConfig | Mapping[str, Any] | None = None,
    *,
    limits: WheelLimits | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    max_tickets: int | None = None,
    progress: bool = False,
) -> WheelResult:
    """Generate a wheel for ``pool`` as described by ``config``.

    Validation and resource errors are raised before any enumeration and
    are left for the caller to handle. ``seed``/``rng`` only affect the
    balanced wheel; ``max_tickets`` and ``progress`` only the abbreviated one.
    """
    cfg = _coerce_config(config)
    shape = _coerce_shape(lottery_shape)
    active_limits = limits or WheelLimits()

    numbers = normalize_pool(pool, shape.total_numbers)
    game_size = shape.game_size
    if len(numbers) < game_size:
        raise WheelValidationError(
            f"Select at least {game_size} numbers (got {len(numbers)})."
        )

    logger.debug(
        "Generating %s wheel: pool=%d, game_size=%d", cfg.wheel_type, len(numbers), game_size
    )
    if cfg.wheel_type == "abbreviated":
        return GreedyCoveringOptimizer(active_limits).generate(
            numbers,
            game_size,
            cfg.guarantee(),
            max_tickets=max_tickets,
            progress=progress,
        )
    if cfg.wheel_type == "balanced":
        generator = BalancedDesignGenerator(active_limits)
        target = generator.target_count(binomial(len(numbers), game_size))
        return generator.generate(numbers, game_size, target, seed=seed, rng=rng)
    return FullWheelGenerator(active_limits).generate(numbers, game_size)


def estimate_ticket_count(
    pool_size: int,
    lottery_shape: LotteryShape | str,
    config: WheelConfig | Mapping[str, Any] | None = None,
    *,
    limits: WheelLimits | None = None,
) -> int:
    """Cheap preview of how many tickets a request would produce."""
    cfg = _coerce_config(config)
    shape = _coerce_shape(lottery_shape)
    game_size = shape.game_size
    full_wheel_count = binomial(pool_size, game_size)
    if full_wheel_count == 0:
        return 0

    if cfg.wheel_type == "full":
        return full_wheel_count
    if cfg.wheel_type == "balanced":
        return BalancedDesignGenerator(limits).target_count(full_wheel_count)

    spec = cfg.guarantee()
    spec.validate(pool_size, game_size)

    # A pool barely larger than the ticket is covered by a handful of tickets.
    if pool_size <= game_size + 3:
        return max(1, pool_size - game_size + 1)

    return min(full_wheel_count, schonheim_bound(pool_size, game_size, spec.guaranteed))
