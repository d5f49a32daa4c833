"""Body metrics: height conversion, BMI, BMR and TDEE."""

from rooted.profiles.body_calc import (
    ACTIVITY_MULTIPLIERS,
    ActivityLevel,
    Sex,
    WeightUnit,
    calculate_bmi,
    calculate_bmr,
    calculate_tdee,
    convert_weight,
    format_weight,
    round_half_up,
)
from rooted.profiles.height import (
    HeightUnit,
    HeightValue,
    convert_from_inches,
    convert_height,
    convert_to_inches,
    format_height,
    is_valid_height,
    parse_height_input,
)

__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "ActivityLevel",
    "HeightUnit",
    "HeightValue",
    "Sex",
    "WeightUnit",
    "calculate_bmi",
    "calculate_bmr",
    "calculate_tdee",
    "convert_from_inches",
    "convert_height",
    "convert_to_inches",
    "convert_weight",
    "format_height",
    "format_weight",
    "is_valid_height",
    "parse_height_input",
    "round_half_up",
]
