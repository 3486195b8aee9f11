"""Wheel generators."""

from .abbreviated import GreedyCoveringOptimizer
from .balanced import BalancedDesignGenerator
from .base import GuaranteeSpec, WheelResult, normalize_pool
from .full import FullWheelGenerator

__all__ = [
    "BalancedDesignGenerator",
    "FullWheelGenerator",
    "GreedyCoveringOptimizer",
    "GuaranteeSpec",
    "WheelResult",
    "normalize_pool",
]
