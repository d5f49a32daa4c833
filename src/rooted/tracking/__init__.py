"""Weight logging and goal progress."""

from __future__ import annotations

from rooted.tracking.models import GoalProgress, WeightChange, WeightLog
from rooted.tracking.progress import (
    calculate_goal_progress,
    calculate_weight_change,
    weight_trend,
)

__all__ = [
    "GoalProgress",
    "WeightChange",
    "WeightLog",
    "calculate_goal_progress",
    "calculate_weight_change",
    "weight_trend",
]
