"""
Derived work-session fields, computed from the submitted payload at write time
"""
from typing import Optional
import re
from app.core.errors import ValidationError

CLOCK_RE = re.compile(r"([01]\d|2[0-3]):([0-5]\d)")


def parse_clock(value: str) -> int:
    """Convert an "HH:MM" wall-clock string to minutes since midnight"""
    match = CLOCK_RE.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM")
    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def compute_total_hours(start_time: Optional[str], end_time: Optional[str]) -> Optional[float]:
    """
    Elapsed hours between two clock strings.
    An end earlier than the start (overnight shift) gives a negative value.
    """
    if not start_time or not end_time:
        return None
    return (parse_clock(end_time) - parse_clock(start_time)) / 60


def compute_total_km(odometer_start: Optional[float], odometer_end: Optional[float]) -> Optional[float]:
    """Distance from odometer readings; a negative delta is clamped to zero"""
    if odometer_start is None or odometer_end is None:
        return None
    return max(0, float(odometer_end) - float(odometer_start))
