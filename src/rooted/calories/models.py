"""Data models for calorie targets and daily tracking."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from typing import Optional

from rooted.profiles.body_calc import ActivityLevel, Sex


class GoalType(str, Enum):
    """Direction of a fitness goal."""
    LOSE_WEIGHT = "lose_weight"
    GAIN_WEIGHT = "gain_weight"
    MAINTAIN_WEIGHT = "maintain_weight"


VALID_SEXES = tuple(s.value for s in Sex)
VALID_ACTIVITY_LEVELS = tuple(a.value for a in ActivityLevel)
VALID_GOAL_TYPES = tuple(g.value for g in GoalType)


@dataclass(frozen=True)
class UserProfile:
    """Body metrics for calorie calculations.

    Height and weight are normalized to inches and pounds by the caller.
    """

    age: int
    sex: str  # 'male' or 'female'
    height_inches: float
    weight_lbs: float
    activity_level: str  # 'sedentary', 'light', 'moderate', 'active', 'very_active'

    def __post_init__(self) -> None:
        if self.sex not in VALID_SEXES:
            raise ValueError(f"sex must be 'male' or 'female', got '{self.sex}'")
        if self.activity_level not in VALID_ACTIVITY_LEVELS:
            raise ValueError(
                f"activity_level must be one of {VALID_ACTIVITY_LEVELS}, "
                f"got '{self.activity_level}'"
            )
        # Store plain strings even when enum members are passed in
        object.__setattr__(self, "sex", Sex(self.sex).value)
        object.__setattr__(self, "activity_level", ActivityLevel(self.activity_level).value)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        return cls(
            age=int(data["age"]),
            sex=data["sex"],
            height_inches=float(data["height_inches"]),
            weight_lbs=float(data["weight_lbs"]),
            activity_level=data["activity_level"],
        )


@dataclass(frozen=True)
class FitnessGoal:
    """A weight goal with a planned weekly rate of change."""

    goal_type: str  # 'lose_weight', 'gain_weight', 'maintain_weight'
    target_weight_lbs: float
    weekly_goal_lbs: float
    start_date: date
    target_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.goal_type not in VALID_GOAL_TYPES:
            raise ValueError(
                f"goal_type must be one of {VALID_GOAL_TYPES}, got '{self.goal_type}'"
            )
        object.__setattr__(self, "goal_type", GoalType(self.goal_type).value)

    def to_dict(self) -> dict:
        return {
            "goal_type": self.goal_type,
            "target_weight_lbs": self.target_weight_lbs,
            "weekly_goal_lbs": self.weekly_goal_lbs,
            "start_date": self.start_date.isoformat(),
            "target_date": self.target_date.isoformat() if self.target_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FitnessGoal":
        target_date = data.get("target_date")
        return cls(
            goal_type=data["goal_type"],
            target_weight_lbs=float(data["target_weight_lbs"]),
            weekly_goal_lbs=float(data["weekly_goal_lbs"]),
            start_date=date.fromisoformat(data["start_date"]),
            target_date=date.fromisoformat(target_date) if target_date else None,
        )


@dataclass(frozen=True)
class CalorieTarget:
    """Derived daily calorie target. Never cached; recompute on demand.

    Adjustment results carry bmr=0 and tdee=0 since they only move the
    daily target.
    """

    bmr: int
    tdee: int
    daily_target: int
    adjustment_reason: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DailyTracking:
    """Calories targeted and consumed on a single day."""

    date: date
    target_calories: float
    consumed_calories: float
    remaining_calories: float
    is_adjusted: bool = False
    adjustment_reason: Optional[str] = None
    original_target: Optional[float] = None

    @classmethod
    def for_day(
        cls,
        day: date,
        target_calories: float,
        consumed_calories: float,
        adjustment: Optional[CalorieTarget] = None,
    ) -> "DailyTracking":
        """Build a record, computing remaining calories.

        If an adjustment is given, its daily target replaces
        ``target_calories`` and the original is kept in ``original_target``.
        """
        if adjustment is not None and adjustment.adjustment_reason:
            return cls(
                date=day,
                target_calories=adjustment.daily_target,
                consumed_calories=consumed_calories,
                remaining_calories=adjustment.daily_target - consumed_calories,
                is_adjusted=True,
                adjustment_reason=adjustment.adjustment_reason,
                original_target=target_calories,
            )
        return cls(
            date=day,
            target_calories=target_calories,
            consumed_calories=consumed_calories,
            remaining_calories=target_calories - consumed_calories,
        )

    @property
    def deviation(self) -> float:
        """Calories consumed above (+) or below (-) target."""
        return self.consumed_calories - self.target_calories

    def to_dict(self) -> dict:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DailyTracking":
        return cls(
            date=date.fromisoformat(data["date"]),
            target_calories=float(data["target_calories"]),
            consumed_calories=float(data["consumed_calories"]),
            remaining_calories=float(data["remaining_calories"]),
            is_adjusted=bool(data.get("is_adjusted", False)),
            adjustment_reason=data.get("adjustment_reason"),
            original_target=data.get("original_target"),
        )


@dataclass(frozen=True)
class WeeklySummary:
    """Totals and deviation over a window of tracked days."""

    total_target: float
    total_consumed: float
    weekly_deviation: float
    average_daily_deviation: float
    on_track: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class GoalCompletion:
    """Projected completion of a weight goal.

    ``estimated_days``/``estimated_date`` are None when neither the observed
    nor the planned rate gives any weight change. ``estimated_date`` alone is
    None when the projection runs past the last representable date.
    """

    estimated_days: Optional[int]
    estimated_date: Optional[date]
    weekly_rate_lbs: float
    on_pace: bool

    def to_dict(self) -> dict:
        return {
            "estimated_days": self.estimated_days,
            "estimated_date": self.estimated_date.isoformat() if self.estimated_date else None,
            "weekly_rate_lbs": self.weekly_rate_lbs,
            "on_pace": self.on_pace,
        }
