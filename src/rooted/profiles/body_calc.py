"""Body metric calculations: BMI, BMR, TDEE and weight units.

Uses Mifflin-St Jeor equation for BMR as it's widely validated for
calculating resting metabolic rate. Inputs are imperial (lbs, inches) and
converted to metric internally.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

LBS_TO_KG = 0.453592
KG_TO_LBS = 2.20462
CM_PER_INCH = 2.54

# BMI = 703 × weight(lbs) / height(in)²
BMI_IMPERIAL_FACTOR = 703


class Sex(str, Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity level multipliers for TDEE calculation."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Exercise 1-3 days/week
    MODERATE = "moderate"            # Exercise 3-5 days/week
    ACTIVE = "active"                # Exercise 6-7 days/week
    VERY_ACTIVE = "very_active"      # Hard exercise 6-7 days/week


class WeightUnit(str, Enum):
    """Supported weight units."""
    LBS = "lbs"
    KG = "kg"


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def calculate_bmi(height_inches: float, weight_lbs: float) -> float:
    """Calculate Body Mass Index from imperial measurements."""
    return (weight_lbs * BMI_IMPERIAL_FACTOR) / (height_inches * height_inches)


def calculate_bmr(
    weight_lbs: float,
    height_inches: float,
    age: int,
    sex: Union[Sex, str],
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161

    Args:
        weight_lbs: Weight in pounds
        height_inches: Height in inches
        age: Age in years
        sex: "male" or "female"

    Returns:
        BMR in calories per day (unrounded)
    """
    # Convert to metric
    weight_kg = weight_lbs * LBS_TO_KG
    height_cm = height_inches * CM_PER_INCH

    bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age)
    if sex == Sex.MALE:
        return bmr + 5
    return bmr - 161


def calculate_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> int:
    """Calculate Total Daily Energy Expenditure.

    TDEE = round(BMR × activity multiplier)

    Unlike the calorie engine, this validates its input: an unknown level
    has no multiplier to fall back on. UserProfile rejects unknown levels
    first, so engine callers never reach this error.

    Raises:
        ValueError: If activity_level is not a known level
    """
    multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    return round_half_up(bmr * multiplier)


def convert_weight(weight: float, from_unit: str, to_unit: str) -> float:
    """Convert a weight between lbs and kg.

    Same-unit and unrecognized conversions return the weight unchanged.
    """
    if from_unit == to_unit:
        return weight
    if from_unit == WeightUnit.LBS and to_unit == WeightUnit.KG:
        return weight * LBS_TO_KG
    if from_unit == WeightUnit.KG and to_unit == WeightUnit.LBS:
        return weight * KG_TO_LBS
    return weight


def format_weight(weight: float, unit: str, decimals: int = 1) -> str:
    """Format a weight for display, e.g. ``180.0 lbs``."""
    unit_label = unit.value if isinstance(unit, WeightUnit) else unit
    return f"{weight:.{decimals}f} {unit_label}"
