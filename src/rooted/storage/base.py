"""Storage interface for profiles, goals, daily tracking and weight logs.

The calculation engine never reads or writes a store. Callers load records
from a store, pass them to the engine and save what they want to keep.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Optional

from rooted.calories.models import DailyTracking, FitnessGoal, UserProfile
from rooted.tracking.models import WeightLog

UPDATABLE_WEIGHT_FIELDS = ("weight", "unit", "logged_at", "notes")


def check_weight_changes(changes: dict) -> None:
    unknown = sorted(set(changes) - set(UPDATABLE_WEIGHT_FIELDS))
    if unknown:
        raise ValueError(f"cannot update weight log fields: {', '.join(unknown)}")


class CalorieStore(ABC):
    """Persistence backend for calorie tracking records."""

    @abstractmethod
    def save_profile(self, profile: UserProfile) -> None:
        """Store the user profile, replacing any existing one."""

    @abstractmethod
    def load_profile(self) -> Optional[UserProfile]:
        """Return the stored profile, or None."""

    @abstractmethod
    def save_goal(self, goal: FitnessGoal) -> None:
        """Store the active goal, replacing any existing one."""

    @abstractmethod
    def load_goal(self) -> Optional[FitnessGoal]:
        """Return the active goal, or None."""

    @abstractmethod
    def save_day_tracking(self, tracking: DailyTracking) -> None:
        """Store tracking for ``tracking.date``, replacing that date's record."""

    @abstractmethod
    def load_day_tracking(self, day: date) -> Optional[DailyTracking]:
        """Return tracking for a date, or None."""

    @abstractmethod
    def add_weight_log(self, log: WeightLog) -> WeightLog:
        """Store a weight log and return it with its assigned ID."""

    @abstractmethod
    def load_weight_logs(self) -> list[WeightLog]:
        """Return all weight logs, newest first."""

    @abstractmethod
    def update_weight_log(self, log_id: int, **changes) -> Optional[WeightLog]:
        """Apply field changes to a weight log.

        Only ``weight``, ``unit``, ``logged_at`` and ``notes`` can change.

        Returns:
            The updated log, or None if no log had that ID

        Raises:
            ValueError: If a change names another field or an invalid unit
        """

    @abstractmethod
    def delete_weight_log(self, log_id: int) -> bool:
        """Delete a weight log. Returns False if no log had that ID."""

    def load_weight_logs_between(self, start: date, end: date) -> list[WeightLog]:
        """Return weight logs dated from ``start`` to ``end`` inclusive, newest first."""
        return [log for log in self.load_weight_logs() if start <= log.logged_at <= end]

    def load_latest_weight_log(self) -> Optional[WeightLog]:
        """Return the most recent weight log, or None."""
        logs = self.load_weight_logs()
        return logs[0] if logs else None

    def load_recent_days(self, num_days: int, today: Optional[date] = None) -> list[DailyTracking]:
        """Load tracking for the last ``num_days`` calendar days.

        Days without a record are skipped.

        Args:
            num_days: Window size, counting today
            today: Last day of the window (defaults to today)

        Returns:
            Tracked days, oldest first
        """
        if today is None:
            today = date.today()

        days = []
        for offset in range(num_days):
            tracking = self.load_day_tracking(today - timedelta(days=offset))
            if tracking is not None:
                days.append(tracking)

        days.reverse()
        return days
