"""Combination enumeration and counting."""

from .bounds import schonheim_bound
from .enumeration import binomial, combinations

__all__ = ["binomial", "combinations", "schonheim_bound"]
