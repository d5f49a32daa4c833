"""Calorie target engine and its records."""

from rooted.calories.engine import (
    calculate_daily_calorie_target,
    calculate_smart_adjustment,
    get_weekly_summary,
    predict_goal_completion,
)
from rooted.calories.models import (
    CalorieTarget,
    DailyTracking,
    FitnessGoal,
    GoalCompletion,
    GoalType,
    UserProfile,
    WeeklySummary,
)

__all__ = [
    "CalorieTarget",
    "DailyTracking",
    "FitnessGoal",
    "GoalCompletion",
    "GoalType",
    "UserProfile",
    "WeeklySummary",
    "calculate_daily_calorie_target",
    "calculate_smart_adjustment",
    "get_weekly_summary",
    "predict_goal_completion",
]
