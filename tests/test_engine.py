"""Tests for the calorie target engine."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from rooted.calories.engine import (
    calculate_daily_calorie_target,
    calculate_smart_adjustment,
    get_weekly_summary,
    predict_goal_completion,
)
from rooted.calories.models import CalorieTarget, DailyTracking, FitnessGoal, UserProfile


class TestDailyCalorieTarget:
    """Tests for calculate_daily_calorie_target."""

    def test_lose_weight(self, female_profile, lose_goal) -> None:
        """TDEE 2172 minus 500 kcal/day for 1 lb/week."""
        result = calculate_daily_calorie_target(female_profile, lose_goal)
        assert result == CalorieTarget(bmr=1401, tdee=2172, daily_target=1672)

    def test_maintain_weight(self, female_profile, lose_goal) -> None:
        goal = replace(lose_goal, goal_type="maintain_weight")
        result = calculate_daily_calorie_target(female_profile, goal)
        assert result.daily_target == result.tdee == 2172

    def test_gain_weight_adds_surplus(self, female_profile, lose_goal) -> None:
        goal = replace(lose_goal, goal_type="gain_weight", weekly_goal_lbs=0.5)
        result = calculate_daily_calorie_target(female_profile, goal)
        assert result.daily_target == 2172 + 250

    def test_gain_weight_uncapped(self, female_profile, lose_goal) -> None:
        goal = replace(lose_goal, goal_type="gain_weight", weekly_goal_lbs=10)
        result = calculate_daily_calorie_target(female_profile, goal)
        assert result.daily_target == 2172 + 5000

    @pytest.mark.parametrize("weekly", [2, 3, 5, 20])
    def test_female_floor(self, female_profile, lose_goal, weekly: float) -> None:
        goal = replace(lose_goal, weekly_goal_lbs=weekly)
        result = calculate_daily_calorie_target(female_profile, goal)
        assert result.daily_target >= 1200

    def test_female_floor_exact(self, female_profile, lose_goal) -> None:
        goal = replace(lose_goal, weekly_goal_lbs=5)
        assert calculate_daily_calorie_target(female_profile, goal).daily_target == 1200

    def test_male_floor(self, female_profile, lose_goal) -> None:
        """Sedentary male TDEE 1881; a 3 lb/week deficit is clamped to 1500."""
        profile = replace(female_profile, sex="male", activity_level="sedentary")
        goal = replace(lose_goal, weekly_goal_lbs=3)
        result = calculate_daily_calorie_target(profile, goal)
        assert result.tdee == 1881
        assert result.daily_target == 1500


class TestSmartAdjustment:
    """Tests for calculate_smart_adjustment."""

    def test_overeating_reduces_target(self, make_week, lose_goal) -> None:
        days = make_week(2000, 2350)
        result = calculate_smart_adjustment(days, 2000, lose_goal)
        assert result.daily_target == 1950
        assert result.adjustment_reason == (
            "Reduced by 50 cal/day to compensate for recent overeating"
        )
        assert result.bmr == 0
        assert result.tdee == 0

    def test_undereating_increases_target(self, make_week, lose_goal) -> None:
        days = make_week(2000, 1650)
        result = calculate_smart_adjustment(days, 2000, lose_goal)
        assert result.daily_target == 2050
        assert result.adjustment_reason == (
            "Increased by 50 cal/day to compensate for recent undereating"
        )

    @pytest.mark.parametrize("consumed", [2000, 2100, 1900, 2050])
    def test_dead_band_leaves_target(self, make_week, lose_goal, consumed: float) -> None:
        """Average deviation within ±100 kcal leaves the target unchanged."""
        days = make_week(2000, consumed)
        result = calculate_smart_adjustment(days, 1800, lose_goal)
        assert result == CalorieTarget(bmr=0, tdee=0, daily_target=1800)

    def test_mixed_days_average(self, lose_goal) -> None:
        """Deviations +700 and -300 average to +200, correction round(28.57) = 29."""
        days = [
            DailyTracking.for_day(date(2024, 1, 1), 2000, 2700),
            DailyTracking.for_day(date(2024, 1, 2), 2000, 1700),
        ]
        result = calculate_smart_adjustment(days, 2000, lose_goal)
        assert result.daily_target == 1971

    def test_clamped_low(self, make_week, lose_goal) -> None:
        days = make_week(1250, 1950)
        result = calculate_smart_adjustment(days, 1250, lose_goal)
        assert result.daily_target == 1200
        assert "Reduced by 100" in result.adjustment_reason

    def test_clamped_high(self, make_week, lose_goal) -> None:
        days = make_week(3990, 3290)
        result = calculate_smart_adjustment(days, 3990, lose_goal)
        assert result.daily_target == 4000

    def test_empty_window(self, lose_goal) -> None:
        result = calculate_smart_adjustment([], 1800, lose_goal)
        assert result.daily_target == 1800
        assert result.adjustment_reason is None


class TestWeeklySummary:
    """Tests for get_weekly_summary."""

    def test_on_target_week(self, make_week) -> None:
        result = get_weekly_summary(make_week(2000, 2000))
        assert result.total_target == 14000
        assert result.total_consumed == 14000
        assert result.weekly_deviation == 0
        assert result.average_daily_deviation == 0
        assert not result.on_track

    def test_tolerance_boundary(self, make_week) -> None:
        assert get_weekly_summary(make_week(2000, 2300)).on_track
        assert not get_weekly_summary(make_week(2000, 2301)).on_track
        assert not get_weekly_summary(make_week(2000, 1699)).on_track

    def test_deviation_sign(self, make_week) -> None:
        result = get_weekly_summary(make_week(2000, 1800, days=5))
        assert result.weekly_deviation == -1000
        assert result.average_daily_deviation == -200

    def test_empty(self) -> None:
        result = get_weekly_summary([])
        assert result.weekly_deviation == 0
        assert result.average_daily_deviation == 0
        assert result.on_track


class TestPredictGoalCompletion:
    """Tests for predict_goal_completion."""

    TODAY = date(2024, 2, 1)

    def test_gain_on_pace(self, make_week, lose_goal) -> None:
        """250 kcal/day surplus is 0.5 lb/week: 10 lbs takes 20 weeks."""
        goal = replace(lose_goal, goal_type="gain_weight", weekly_goal_lbs=0.5)
        result = predict_goal_completion(
            150, 160, make_week(2000, 2250), goal, today=self.TODAY
        )
        assert result.weekly_rate_lbs == pytest.approx(0.5)
        assert result.estimated_days == 140
        assert result.estimated_date == self.TODAY + timedelta(days=140)
        assert result.on_pace

    def test_falls_back_to_planned_rate(self, make_week, lose_goal) -> None:
        """No deviation from target: project with the goal's 1 lb/week."""
        result = predict_goal_completion(
            150, 140, make_week(2000, 2000), lose_goal, today=self.TODAY
        )
        assert result.estimated_days == 70
        assert result.weekly_rate_lbs == 0
        assert not result.on_pace

    def test_observed_rate_drives_projection(self, make_week, lose_goal) -> None:
        """A 3500 kcal weekly deficit reads as 1 lb/week."""
        goal = replace(lose_goal, weekly_goal_lbs=2)
        result = predict_goal_completion(
            150, 140, make_week(2000, 1500), goal, today=self.TODAY
        )
        assert result.weekly_rate_lbs == pytest.approx(1.0)
        assert result.estimated_days == 70

    def test_no_rate_available(self, make_week, lose_goal) -> None:
        goal = replace(lose_goal, goal_type="maintain_weight", weekly_goal_lbs=0)
        result = predict_goal_completion(
            150, 150, make_week(2000, 2000), goal, today=self.TODAY
        )
        assert result.estimated_days is None
        assert result.estimated_date is None
        assert result.on_pace

    def test_projection_past_date_max(self, lose_goal) -> None:
        """A 1 kcal surplus against 250 lbs to go outlasts the calendar."""
        days = [DailyTracking.for_day(date(2024, 1, 1), 2000, 2001)]
        result = predict_goal_completion(400, 150, days, lose_goal, today=self.TODAY)
        assert result.estimated_days == 6_125_000
        assert result.estimated_date is None

    def test_defaults_to_today(self, make_week, lose_goal) -> None:
        result = predict_goal_completion(150, 140, make_week(2000, 2000), lose_goal)
        assert result.estimated_date == date.today() + timedelta(days=70)


class TestModels:
    """Validation and helpers on the records."""

    def test_profile_rejects_unknown_sex(self) -> None:
        with pytest.raises(ValueError, match="sex"):
            UserProfile(age=30, sex="other", height_inches=65, weight_lbs=150,
                        activity_level="moderate")

    def test_profile_rejects_unknown_activity(self) -> None:
        with pytest.raises(ValueError, match="activity_level"):
            UserProfile(age=30, sex="female", height_inches=65, weight_lbs=150,
                        activity_level="extreme")

    def test_goal_rejects_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="goal_type"):
            FitnessGoal(goal_type="bulk", target_weight_lbs=180, weekly_goal_lbs=0.5,
                        start_date=date(2024, 1, 1))

    def test_for_day_with_adjustment(self) -> None:
        adjustment = CalorieTarget(
            bmr=0, tdee=0, daily_target=1950, adjustment_reason="Reduced by 50 cal/day"
        )
        tracking = DailyTracking.for_day(date(2024, 1, 8), 2000, 1000, adjustment)
        assert tracking.is_adjusted
        assert tracking.target_calories == 1950
        assert tracking.original_target == 2000
        assert tracking.remaining_calories == 950

    def test_for_day_ignores_unchanged_target(self) -> None:
        unchanged = CalorieTarget(bmr=0, tdee=0, daily_target=2000)
        tracking = DailyTracking.for_day(date(2024, 1, 8), 2000, 2500, unchanged)
        assert not tracking.is_adjusted
        assert tracking.remaining_calories == -500

    def test_goal_dict_round_trip(self, lose_goal) -> None:
        assert FitnessGoal.from_dict(lose_goal.to_dict()) == lose_goal
