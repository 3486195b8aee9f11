"""Wheel generation engine."""
