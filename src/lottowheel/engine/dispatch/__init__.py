"""Guarantee parsing and wheel dispatch."""

from .dispatcher import CustomGuarantee, WheelConfig, estimate_ticket_count, generate_wheel
from .guarantee import (
    DEFAULT_CUSTOM_GUARANTEE,
    GuaranteeSpec,
    available_presets,
    parse_guarantee,
)

__all__ = [
    "CustomGuarantee",
    "DEFAULT_CUSTOM_GUARANTEE",
    "GuaranteeSpec",
    "WheelConfig",
    "available_presets",
    "estimate_ticket_count",
    "generate_wheel",
    "parse_guarantee",
]
