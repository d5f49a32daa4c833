"""Weight change and goal progress from weight logs.

Logs may be passed in any order; they are sorted by date here. Weights are
compared in pounds, so kg logs are converted first.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

from rooted.calories.models import FitnessGoal
from rooted.profiles.body_calc import WeightUnit, convert_weight
from rooted.tracking.models import GoalProgress, WeightChange, WeightLog

# On track if actual change reaches this fraction of the planned change
ON_TRACK_FRACTION = 0.8


def _weight_lbs(log: WeightLog) -> float:
    return convert_weight(log.weight, log.unit, WeightUnit.LBS.value)


def _sorted(logs: Sequence[WeightLog]) -> list[WeightLog]:
    return sorted(logs, key=lambda log: log.logged_at)


def weight_trend(
    logs: Sequence[WeightLog], days: int = 30, today: Optional[date] = None
) -> list[WeightLog]:
    """Return the logs from the last ``days`` days up to ``today``, oldest first."""
    if today is None:
        today = date.today()
    start = today - timedelta(days=days)
    return [log for log in _sorted(logs) if start <= log.logged_at <= today]


def calculate_weight_change(logs: Sequence[WeightLog]) -> Optional[WeightChange]:
    """Calculate the change between the oldest and newest log.

    Returns:
        WeightChange in lbs, or None with fewer than two logs
    """
    if len(logs) < 2:
        return None

    ordered = _sorted(logs)
    oldest, latest = ordered[0], ordered[-1]
    oldest_lbs = _weight_lbs(oldest)
    change = _weight_lbs(latest) - oldest_lbs
    days = (latest.logged_at - oldest.logged_at).days

    return WeightChange(
        change=change,
        change_percent=(change / oldest_lbs) * 100 if oldest_lbs else 0.0,
        period=f"{days} days",
    )


def calculate_goal_progress(
    goal: FitnessGoal,
    logs: Sequence[WeightLog],
    start_weight: Optional[float] = None,
    today: Optional[date] = None,
) -> Optional[GoalProgress]:
    """Calculate progress toward a goal's target weight.

    Args:
        goal: Active goal
        logs: Weight logs
        start_weight: Weight when the goal started (defaults to the oldest log)
        today: Reference date (defaults to today)

    Returns:
        GoalProgress, or None if there are no logs
    """
    if not logs:
        return None
    if today is None:
        today = date.today()

    ordered = _sorted(logs)
    current_weight = _weight_lbs(ordered[-1])
    if start_weight is None:
        start_weight = _weight_lbs(ordered[0])
    target_weight = goal.target_weight_lbs

    total_change = current_weight - start_weight
    total_goal = target_weight - start_weight
    percent_complete = (total_change / total_goal) * 100 if total_goal else 0.0

    days_elapsed = (today - goal.start_date).days
    days_remaining = (goal.target_date - today).days if goal.target_date else None

    on_track = True
    if goal.weekly_goal_lbs and days_elapsed > 0:
        expected_change = goal.weekly_goal_lbs * (days_elapsed / 7)
        on_track = abs(total_change) >= expected_change * ON_TRACK_FRACTION

    return GoalProgress(
        start_weight=start_weight,
        current_weight=current_weight,
        target_weight=target_weight,
        total_change=total_change,
        total_goal=total_goal,
        percent_complete=percent_complete,
        on_track=on_track,
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
    )
