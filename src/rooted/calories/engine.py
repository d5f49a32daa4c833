"""Calorie target engine.

Computes a daily calorie target from a fitness goal, corrects it from
recent adherence, summarizes a week of tracking and projects when a weight
goal will be reached.

Every function is a deterministic transform over its arguments. Bounds are
enforced by clamping, never by raising.

Constants:
- 3500 kcal ≈ 1 lb of body weight
- Weight-loss floor: 1200 kcal (female) / 1500 kcal (male)
- Adjustment clamp: 1200-4000 kcal (independent of the weight-loss floor)
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from rooted.calories.models import (
    CalorieTarget,
    DailyTracking,
    FitnessGoal,
    GoalCompletion,
    GoalType,
    UserProfile,
    WeeklySummary,
)
from rooted.profiles.body_calc import Sex, calculate_bmr, calculate_tdee, round_half_up

logger = logging.getLogger(__name__)

CALORIES_PER_LB = 3500
DAYS_PER_WEEK = 7

# Minimum safe daily intake while losing weight
MIN_CALORIES_FEMALE = 1200
MIN_CALORIES_MALE = 1500

# Smart adjustment: dead-band and clamp on the corrected target
ADJUSTMENT_THRESHOLD = 100
ADJUSTMENT_MIN_CALORIES = 1200
ADJUSTMENT_MAX_CALORIES = 4000

# Weekly summary: on track if average daily deviation within this band
ON_TRACK_TOLERANCE = 300

# Goal projection: on pace if actual rate within this fraction of planned rate
ON_PACE_TOLERANCE = 0.2


def minimum_safe_calories(sex: str) -> int:
    """Return the weight-loss calorie floor for the given sex."""
    return MIN_CALORIES_FEMALE if sex == Sex.FEMALE else MIN_CALORIES_MALE


def calculate_daily_calorie_target(
    profile: UserProfile,
    goal: FitnessGoal,
) -> CalorieTarget:
    """Calculate the daily calorie target for a fitness goal.

    Steps:
    1. BMR via Mifflin-St Jeor
    2. TDEE = round(BMR × activity multiplier)
    3. Daily delta = weekly_goal_lbs × 3500 / 7
    4. Lose: TDEE − delta, never below the sex-based floor.
       Gain: TDEE + delta, uncapped. Maintain: TDEE.

    Args:
        profile: User body metrics
        goal: Fitness goal

    Returns:
        CalorieTarget with rounded BMR, TDEE and daily target
    """
    bmr = calculate_bmr(profile.weight_lbs, profile.height_inches, profile.age, profile.sex)
    tdee = calculate_tdee(bmr, profile.activity_level)

    daily_adjustment = (goal.weekly_goal_lbs * CALORIES_PER_LB) / DAYS_PER_WEEK

    if goal.goal_type == GoalType.LOSE_WEIGHT:
        daily_target = round_half_up(tdee - daily_adjustment)
        floor = minimum_safe_calories(profile.sex)
        if daily_target < floor:
            logger.debug(
                "Target %d below %s floor, clamping to %d", daily_target, profile.sex, floor
            )
            daily_target = floor
    elif goal.goal_type == GoalType.GAIN_WEIGHT:
        daily_target = round_half_up(tdee + daily_adjustment)
    else:
        daily_target = tdee

    return CalorieTarget(bmr=round_half_up(bmr), tdee=tdee, daily_target=daily_target)


def _average_deviation(days: Sequence[DailyTracking]) -> float:
    if not days:
        return 0.0
    return sum(day.deviation for day in days) / len(days)


def calculate_smart_adjustment(
    recent_days: Sequence[DailyTracking],
    current_target: int,
    goal: Optional[FitnessGoal] = None,
) -> CalorieTarget:
    """Correct the daily target from recent over- or under-eating.

    If the average daily deviation (consumed − target) exceeds 100 kcal in
    either direction, one seventh of it is taken off future days, clamped
    to 1200-4000 kcal. Within the dead-band the target is returned as is.

    Args:
        recent_days: Recent tracked days (any window size)
        current_target: Current daily target
        goal: Active goal (the correction is the same for every goal type)

    Returns:
        CalorieTarget with bmr=0 and tdee=0, and an adjustment_reason when
        the target moved
    """
    avg_deviation = _average_deviation(recent_days)

    if abs(avg_deviation) <= ADJUSTMENT_THRESHOLD:
        return CalorieTarget(bmr=0, tdee=0, daily_target=current_target)

    # Spread the correction over the next week
    daily_correction = round_half_up(avg_deviation / DAYS_PER_WEEK)
    adjusted_target = current_target - daily_correction
    safe_target = max(ADJUSTMENT_MIN_CALORIES, min(ADJUSTMENT_MAX_CALORIES, adjusted_target))

    if avg_deviation > 0:
        reason = (
            f"Reduced by {abs(daily_correction)} cal/day to compensate for recent overeating"
        )
    else:
        reason = (
            f"Increased by {abs(daily_correction)} cal/day to compensate for recent undereating"
        )

    logger.debug(
        "Average deviation %.1f over %d days: %d -> %d",
        avg_deviation,
        len(recent_days),
        current_target,
        safe_target,
    )
    return CalorieTarget(bmr=0, tdee=0, daily_target=safe_target, adjustment_reason=reason)


def get_weekly_summary(week_data: Sequence[DailyTracking]) -> WeeklySummary:
    """Summarize a window of tracked days.

    The window is "on track" when the average daily deviation is within
    ±300 kcal. An empty window has zero deviation but is never on track.
    """
    total_target = sum(day.target_calories for day in week_data)
    total_consumed = sum(day.consumed_calories for day in week_data)
    weekly_deviation = total_consumed - total_target
    average_daily_deviation = weekly_deviation / len(week_data) if week_data else 0.0

    return WeeklySummary(
        total_target=total_target,
        total_consumed=total_consumed,
        weekly_deviation=weekly_deviation,
        average_daily_deviation=average_daily_deviation,
        on_track=bool(week_data) and abs(average_daily_deviation) <= ON_TRACK_TOLERANCE,
    )


def predict_goal_completion(
    current_weight: float,
    target_weight: float,
    recent_progress: Sequence[DailyTracking],
    goal: FitnessGoal,
    today: Optional[date] = None,
) -> GoalCompletion:
    """Project when the target weight will be reached.

    The calorie deviation over ``recent_progress`` is read as an implied
    weekly weight change (deviation / 3500 lbs). If that rate is zero, the
    goal's planned weekly rate is used instead.

    Args:
        current_weight: Current weight in lbs
        target_weight: Target weight in lbs
        recent_progress: Recent tracked days
        goal: Active goal with the planned weekly rate
        today: Projection start date (defaults to today)

    Returns:
        GoalCompletion. on_pace is True when the implied rate is within 20%
        of the planned rate.
    """
    if today is None:
        today = date.today()

    summary = get_weekly_summary(recent_progress)
    actual_weekly_rate = summary.weekly_deviation / CALORIES_PER_LB

    weight_remaining = abs(target_weight - current_weight)
    rate = abs(actual_weekly_rate or goal.weekly_goal_lbs)

    estimated_days: Optional[int] = None
    estimated_date: Optional[date] = None
    if rate > 0:
        estimated_days = round_half_up(weight_remaining / rate * DAYS_PER_WEEK)
        if today.toordinal() + estimated_days <= date.max.toordinal():
            estimated_date = today + timedelta(days=estimated_days)
        else:
            logger.debug("Projection of %d days runs past date.max", estimated_days)
    else:
        logger.debug("No observed or planned rate, cannot project completion")

    on_pace = abs(actual_weekly_rate - goal.weekly_goal_lbs) <= (
        goal.weekly_goal_lbs * ON_PACE_TOLERANCE
    )

    return GoalCompletion(
        estimated_days=estimated_days,
        estimated_date=estimated_date,
        weekly_rate_lbs=abs(actual_weekly_rate),
        on_pace=on_pace,
    )
