"""Limits loading and schema."""

from .loader import ConfigLoadError, load_limits
from .schema import WheelLimits

__all__ = ["ConfigLoadError", "WheelLimits", "load_limits"]
