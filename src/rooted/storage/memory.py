"""In-memory store."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from rooted.calories.models import DailyTracking, FitnessGoal, UserProfile
from rooted.storage.base import CalorieStore, check_weight_changes
from rooted.tracking.models import WeightLog

logger = logging.getLogger(__name__)


class InMemoryCalorieStore(CalorieStore):
    """Keeps records in process memory. Not shared between processes."""

    def __init__(self) -> None:
        self._profile: Optional[UserProfile] = None
        self._goal: Optional[FitnessGoal] = None
        self._days: dict[date, DailyTracking] = {}
        self._weights: list[WeightLog] = []
        self._next_log_id = 1

    def save_profile(self, profile: UserProfile) -> None:
        self._profile = profile

    def load_profile(self) -> Optional[UserProfile]:
        return self._profile

    def save_goal(self, goal: FitnessGoal) -> None:
        self._goal = goal

    def load_goal(self) -> Optional[FitnessGoal]:
        return self._goal

    def save_day_tracking(self, tracking: DailyTracking) -> None:
        logger.debug("Saving tracking for %s", tracking.date)
        self._days[tracking.date] = replace(tracking)

    def load_day_tracking(self, day: date) -> Optional[DailyTracking]:
        tracking = self._days.get(day)
        return replace(tracking) if tracking is not None else None

    def add_weight_log(self, log: WeightLog) -> WeightLog:
        stored = replace(log, log_id=self._next_log_id)
        self._next_log_id += 1
        self._weights.append(stored)
        return stored

    def load_weight_logs(self) -> list[WeightLog]:
        # Newest first; ties keep the most recently added first
        return sorted(
            reversed(self._weights), key=lambda log: log.logged_at, reverse=True
        )

    def update_weight_log(self, log_id: int, **changes) -> Optional[WeightLog]:
        check_weight_changes(changes)
        for index, log in enumerate(self._weights):
            if log.log_id == log_id:
                updated = replace(log, **changes)
                self._weights[index] = updated
                return replace(updated)
        return None

    def delete_weight_log(self, log_id: int) -> bool:
        remaining = [log for log in self._weights if log.log_id != log_id]
        if len(remaining) == len(self._weights):
            return False
        self._weights = remaining
        return True
