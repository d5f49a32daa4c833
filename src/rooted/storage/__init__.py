"""Pluggable persistence for profiles, goals, tracking and weight logs."""

from rooted.storage.base import CalorieStore
from rooted.storage.memory import InMemoryCalorieStore
from rooted.storage.sqlite import SQLiteCalorieStore

__all__ = ["CalorieStore", "InMemoryCalorieStore", "SQLiteCalorieStore"]
