"""Lottery wheel (covering design) generation."""

from .engine.dispatch import WheelConfig, estimate_ticket_count, generate_wheel
from .engine.wheels import WheelResult
from .errors import ResourceLimitError, WheelError, WheelValidationError
from .lotteries import LOTTERIES, LotteryShape, get_lottery

__all__ = [
    "LOTTERIES",
    "LotteryShape",
    "ResourceLimitError",
    "WheelConfig",
    "WheelError",
    "WheelResult",
    "WheelValidationError",
    "estimate_ticket_count",
    "generate_wheel",
    "get_lottery",
]
