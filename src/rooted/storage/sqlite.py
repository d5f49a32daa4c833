"""SQLite-backed store."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from datetime import date
from typing import Optional

from rooted.calories.models import DailyTracking, FitnessGoal, UserProfile
from rooted.db.connection import DatabaseConnection
from rooted.storage.base import CalorieStore, check_weight_changes
from rooted.tracking.models import WeightLog

logger = logging.getLogger(__name__)


def _row_to_weight_log(row: sqlite3.Row) -> WeightLog:
    return WeightLog(
        log_id=row["log_id"],
        weight=row["weight"],
        unit=row["unit"],
        logged_at=date.fromisoformat(row["logged_at"]),
        notes=row["notes"],
    )


class SQLiteCalorieStore(CalorieStore):
    """Store records in a SQLite database.

    Each operation opens its own connection, so the store is safe to share
    across commands but provides no cross-operation transactions.
    """

    def __init__(self, db: DatabaseConnection, initialize: bool = True):
        """Initialize the store.

        Args:
            db: Database connection manager
            initialize: Create tables if they don't exist
        """
        self.db = db
        if initialize:
            db.initialize_schema()

    def save_profile(self, profile: UserProfile) -> None:
        with self.db.get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO user_profile (profile_id, age, sex, height_inches,
                                                     weight_lbs, activity_level)
                VALUES (1, ?, ?, ?, ?, ?)
                """,
                (
                    profile.age,
                    profile.sex,
                    profile.height_inches,
                    profile.weight_lbs,
                    profile.activity_level,
                ),
            )
        logger.debug("Saved profile")

    def load_profile(self) -> Optional[UserProfile]:
        with self.db.get_connection() as conn:
            row = conn.execute(
                """
                SELECT age, sex, height_inches, weight_lbs, activity_level
                FROM user_profile WHERE profile_id = 1
                """
            ).fetchone()

        if row is None:
            return None
        return UserProfile.from_dict(dict(row))

    def save_goal(self, goal: FitnessGoal) -> None:
        data = goal.to_dict()
        with self.db.get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO fitness_goal (goal_id, goal_type, target_weight_lbs,
                                                     weekly_goal_lbs, start_date, target_date)
                VALUES (1, ?, ?, ?, ?, ?)
                """,
                (
                    data["goal_type"],
                    data["target_weight_lbs"],
                    data["weekly_goal_lbs"],
                    data["start_date"],
                    data["target_date"],
                ),
            )
        logger.debug("Saved goal %s", data["goal_type"])

    def load_goal(self) -> Optional[FitnessGoal]:
        with self.db.get_connection() as conn:
            row = conn.execute(
                """
                SELECT goal_type, target_weight_lbs, weekly_goal_lbs, start_date, target_date
                FROM fitness_goal WHERE goal_id = 1
                """
            ).fetchone()

        if row is None:
            return None
        return FitnessGoal.from_dict(dict(row))

    def save_day_tracking(self, tracking: DailyTracking) -> None:
        with self.db.get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO calorie_tracking (date, target_calories,
                    consumed_calories, remaining_calories, is_adjusted,
                    adjustment_reason, original_target)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    tracking.date.isoformat(),
                    tracking.target_calories,
                    tracking.consumed_calories,
                    tracking.remaining_calories,
                    tracking.is_adjusted,
                    tracking.adjustment_reason,
                    tracking.original_target,
                ),
            )
        logger.debug("Saved tracking for %s", tracking.date)

    def load_day_tracking(self, day: date) -> Optional[DailyTracking]:
        with self.db.get_connection() as conn:
            row = conn.execute(
                """
                SELECT date, target_calories, consumed_calories, remaining_calories,
                       is_adjusted, adjustment_reason, original_target
                FROM calorie_tracking WHERE date = ?
                """,
                (day.isoformat(),),
            ).fetchone()

        if row is None:
            return None
        return DailyTracking.from_dict(dict(row))

    def add_weight_log(self, log: WeightLog) -> WeightLog:
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO weight_log (weight, unit, logged_at, notes)
                VALUES (?, ?, ?, ?)
                """,
                (log.weight, log.unit, log.logged_at.isoformat(), log.notes),
            )
            log_id = cursor.lastrowid

        return WeightLog(
            log_id=log_id,
            weight=log.weight,
            unit=log.unit,
            logged_at=log.logged_at,
            notes=log.notes,
        )

    def load_weight_logs(self) -> list[WeightLog]:
        with self.db.get_connection() as conn:
            rows = conn.execute(
                """
                SELECT log_id, weight, unit, logged_at, notes
                FROM weight_log
                ORDER BY logged_at DESC, log_id DESC
                """
            ).fetchall()

        return [_row_to_weight_log(row) for row in rows]

    def load_weight_logs_between(self, start: date, end: date) -> list[WeightLog]:
        with self.db.get_connection() as conn:
            rows = conn.execute(
                """
                SELECT log_id, weight, unit, logged_at, notes
                FROM weight_log
                WHERE logged_at BETWEEN ? AND ?
                ORDER BY logged_at DESC, log_id DESC
                """,
                (start.isoformat(), end.isoformat()),
            ).fetchall()

        return [_row_to_weight_log(row) for row in rows]

    def update_weight_log(self, log_id: int, **changes) -> Optional[WeightLog]:
        check_weight_changes(changes)
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT log_id, weight, unit, logged_at, notes FROM weight_log WHERE log_id = ?",
                (log_id,),
            ).fetchone()
            if row is None:
                return None

            updated = replace(_row_to_weight_log(row), **changes)
            conn.execute(
                """
                UPDATE weight_log SET weight = ?, unit = ?, logged_at = ?, notes = ?
                WHERE log_id = ?
                """,
                (
                    updated.weight,
                    updated.unit,
                    updated.logged_at.isoformat(),
                    updated.notes,
                    log_id,
                ),
            )

        logger.debug("Updated weight log %d", log_id)
        return updated

    def delete_weight_log(self, log_id: int) -> bool:
        with self.db.get_connection() as conn:
            cursor = conn.execute("DELETE FROM weight_log WHERE log_id = ?", (log_id,))
            return cursor.rowcount > 0
