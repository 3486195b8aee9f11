"""Coverage evaluation for wheels."""

from .evaluator import CoverageEvaluator, CoverageResult, calculate_coverage, round_half_up

__all__ = ["CoverageEvaluator", "CoverageResult", "calculate_coverage", "round_half_up"]
