# signalform/validators.py
"""
Field validators for chart configuration.
Each validator takes a value and returns a (possibly empty) list of messages.
"""
import re
from typing import Callable, List

from .config import COLORS, TIME_SPAN_TYPES
from .exceptions import ValidationError

RELATIVE_TIME_PATTERN = re.compile(r"-([0-9]+)[mhdw]")


def validate_chart_color(value: str) -> List[str]:
    """Validates the color field against the SignalFx palette names."""
    if value not in COLORS:
        return [f"{value} not allowed; must be either {', '.join(COLORS)}"]
    return []


def validate_time_span_type(value: str) -> List[str]:
    if value not in TIME_SPAN_TYPES:
        return [f"{value} not allowed; must be either relative or absolute"]
    return []


def validate_sort_by(value: str) -> List[str]:
    """Validates that sort_by starts with either + or -."""
    if not value.startswith(("+", "-")):
        return [f"{value} not allowed; must start either with + or - (ascending or descending)"]
    return []


def validate_relative_time(value: str) -> List[str]:
    if not RELATIVE_TIME_PATTERN.search(value):
        return [
            f"{value} not allowed. Please use milliseconds from epoch "
            "or SignalFx time syntax (e.g. -5m, -1h)"
        ]
    return []


def ensure_valid(value, *checks: Callable[[str], List[str]]):
    """Run the given validators and raise ValidationError on any message"""
    errors = []
    for check in checks:
        errors.extend(check(value))
    if errors:
        raise ValidationError(errors)
    return value
