"""Height conversion between inches, centimeters and feet+inches.

Inches are the canonical unit: every conversion goes through inches, so
converting to another unit and back returns the original value (within
floating-point tolerance).

Unknown units are passed through unchanged rather than rejected. The only
validation signal in this module is ``parse_height_input`` returning None.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

# Plausibility bounds for an adult height (4 ft to 8 ft)
MIN_HEIGHT_INCHES = 48
MAX_HEIGHT_INCHES = 96

# Matches "5'10", "5 10", "5ft 10in", "5 feet 10 inches", "5'10.5\"" and "5"
_FEET_INCHES_RE = re.compile(
    r"""^(\d+)\s*(?:'|ft|feet|foot)?\s*
        (?:(\d+(?:\.\d+)?)\s*(?:"|''|in|inch|inches)?)?$""",
    re.IGNORECASE | re.VERBOSE,
)
_NUMBER_RE = re.compile(r"\d*\.?\d+")


class HeightUnit(str, Enum):
    """Supported height units."""
    INCHES = "in"
    CENTIMETERS = "cm"
    FEET = "ft"


@dataclass
class HeightValue:
    """A height measurement in a given unit.

    For ``ft`` values, ``value`` holds the total height in inches and the
    ``feet``/``inches`` pair holds the decomposition used for display.
    """

    value: float
    unit: str
    feet: Optional[int] = None
    inches: Optional[float] = None


def convert_to_inches(height: HeightValue) -> float:
    """Convert a height to inches.

    Args:
        height: Height in any supported unit

    Returns:
        Height in inches. Unknown units return the raw value.
    """
    if height.unit == HeightUnit.INCHES:
        return height.value
    if height.unit == HeightUnit.CENTIMETERS:
        return height.value / CM_PER_INCH
    if height.unit == HeightUnit.FEET:
        return (height.feet or 0) * INCHES_PER_FOOT + (height.inches or 0)
    return height.value


def convert_from_inches(inches: float, target_unit: str) -> HeightValue:
    """Convert inches to a HeightValue in the target unit.

    Args:
        inches: Height in inches
        target_unit: "in", "cm" or "ft"

    Returns:
        HeightValue in the target unit (inches for unknown units)
    """
    if target_unit == HeightUnit.CENTIMETERS:
        return HeightValue(value=inches * CM_PER_INCH, unit=HeightUnit.CENTIMETERS.value)
    if target_unit == HeightUnit.FEET:
        feet = math.floor(inches / INCHES_PER_FOOT)
        return HeightValue(
            value=inches,
            unit=HeightUnit.FEET.value,
            feet=feet,
            inches=inches - feet * INCHES_PER_FOOT,
        )
    return HeightValue(value=inches, unit=HeightUnit.INCHES.value)


def convert_height(height: HeightValue, target_unit: str) -> HeightValue:
    """Convert a height between units, using inches as the intermediate."""
    return convert_from_inches(convert_to_inches(height), target_unit)


def format_height(height: HeightValue) -> str:
    """Format a height for display, e.g. ``70.0 in`` or ``5' 10.0"``."""
    if height.unit == HeightUnit.FEET:
        return f"{height.feet or 0}' {(height.inches or 0):.1f}\""
    if height.unit in (HeightUnit.INCHES, HeightUnit.CENTIMETERS):
        return f"{height.value:.1f} {HeightUnit(height.unit).value}"
    return f"{height.value:.1f} {height.unit}"


def parse_height_input(text: str, unit: str) -> Optional[HeightValue]:
    """Leniently parse user-entered height text.

    For ``ft``, accepts feet+inches forms ("5'10", "5 10", "5ft 10in") or a
    decimal number of feet ("5.5" -> 5 ft 6 in). For ``in`` and ``cm``,
    any non-numeric characters are stripped before parsing.

    Args:
        text: Raw user input
        unit: Unit the input is expressed in

    Returns:
        Parsed HeightValue, or None if the input is unparseable or not
        positive.
    """
    trimmed = text.strip()

    if unit == HeightUnit.FEET:
        match = _FEET_INCHES_RE.match(trimmed)
        if match:
            feet = int(match.group(1))
            inches = float(match.group(2)) if match.group(2) else 0.0
            total_inches = feet * INCHES_PER_FOOT + inches
            if total_inches <= 0:
                return None
            return HeightValue(
                value=total_inches, unit=HeightUnit.FEET.value, feet=feet, inches=inches
            )

    numeric = _NUMBER_RE.match(re.sub(r"[^\d.]", "", trimmed))
    if numeric is None:
        return None
    numeric_value = float(numeric.group(0))
    if numeric_value <= 0:
        return None

    if unit == HeightUnit.FEET:
        # A bare number is a decimal count of feet
        feet = math.floor(numeric_value)
        inches = (numeric_value - feet) * INCHES_PER_FOOT
        return HeightValue(
            value=feet * INCHES_PER_FOOT + inches,
            unit=HeightUnit.FEET.value,
            feet=feet,
            inches=inches,
        )

    return HeightValue(value=numeric_value, unit=unit)


def is_valid_height(height: HeightValue) -> bool:
    """Check a height falls within 48-96 inches (4-8 ft)."""
    inches = convert_to_inches(height)
    return MIN_HEIGHT_INCHES <= inches <= MAX_HEIGHT_INCHES
