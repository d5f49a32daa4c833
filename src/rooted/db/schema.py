"""SQLite database schema definitions."""

SCHEMA_SQL = """
-- Single user profile (profile_id is always 1)
CREATE TABLE IF NOT EXISTS user_profile (
    profile_id INTEGER PRIMARY KEY CHECK(profile_id = 1),
    age INTEGER NOT NULL,
    sex TEXT NOT NULL CHECK(sex IN ('male', 'female')),
    height_inches REAL NOT NULL,
    weight_lbs REAL NOT NULL,
    activity_level TEXT NOT NULL CHECK(activity_level IN ('sedentary', 'light', 'moderate', 'active', 'very_active')),
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Active fitness goal (goal_id is always 1)
CREATE TABLE IF NOT EXISTS fitness_goal (
    goal_id INTEGER PRIMARY KEY CHECK(goal_id = 1),
    goal_type TEXT NOT NULL CHECK(goal_type IN ('lose_weight', 'gain_weight', 'maintain_weight')),
    target_weight_lbs REAL NOT NULL,
    weekly_goal_lbs REAL NOT NULL,
    start_date DATE NOT NULL,
    target_date DATE,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Daily calorie tracking, one row per date
CREATE TABLE IF NOT EXISTS calorie_tracking (
    date DATE PRIMARY KEY,
    target_calories REAL NOT NULL,
    consumed_calories REAL NOT NULL,
    remaining_calories REAL NOT NULL,
    is_adjusted BOOLEAN NOT NULL DEFAULT FALSE,
    adjustment_reason TEXT,
    original_target REAL
);

-- Weight log
CREATE TABLE IF NOT EXISTS weight_log (
    log_id INTEGER PRIMARY KEY AUTOINCREMENT,
    weight REAL NOT NULL,
    unit TEXT NOT NULL DEFAULT 'lbs' CHECK(unit IN ('lbs', 'kg')),
    logged_at DATE NOT NULL,
    notes TEXT
);

CREATE INDEX IF NOT EXISTS idx_weight_log_date ON weight_log(logged_at);
"""


def get_schema_sql() -> str:
    """Return the complete schema SQL."""
    return SCHEMA_SQL
