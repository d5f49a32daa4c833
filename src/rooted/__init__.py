"""Rooted: calorie targets, adaptive adjustments and goal tracking."""

__version__ = "0.1.0"
