"""Data models for weight logs and goal progress."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from rooted.profiles.body_calc import WeightUnit

VALID_WEIGHT_UNITS = tuple(u.value for u in WeightUnit)


@dataclass
class WeightLog:
    """A single weight measurement."""

    log_id: Optional[int]
    weight: float
    logged_at: date
    unit: str = "lbs"
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if self.unit not in VALID_WEIGHT_UNITS:
            raise ValueError(f"unit must be one of {VALID_WEIGHT_UNITS}, got '{self.unit}'")
        self.unit = WeightUnit(self.unit).value

    def to_dict(self) -> dict:
        return {
            "log_id": self.log_id,
            "weight": self.weight,
            "unit": self.unit,
            "logged_at": self.logged_at.isoformat(),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class WeightChange:
    """Change between the oldest and newest weight log."""

    change: float
    change_percent: float
    period: str  # e.g. "14 days"

    def to_dict(self) -> dict:
        return {
            "change": self.change,
            "change_percent": self.change_percent,
            "period": self.period,
        }


@dataclass(frozen=True)
class GoalProgress:
    """Progress from the starting weight toward the target weight."""

    start_weight: float
    current_weight: float
    target_weight: float
    total_change: float
    total_goal: float
    percent_complete: float
    on_track: bool
    days_elapsed: int
    days_remaining: Optional[int]

    def to_dict(self) -> dict:
        return {
            "start_weight": self.start_weight,
            "current_weight": self.current_weight,
            "target_weight": self.target_weight,
            "total_change": self.total_change,
            "total_goal": self.total_goal,
            "percent_complete": self.percent_complete,
            "on_track": self.on_track,
            "days_elapsed": self.days_elapsed,
            "days_remaining": self.days_remaining,
        }
