# signalform/time_range.py
"""
Conversion of SignalFx relative time syntax (-5m, -1h, -2d, -1w) to milliseconds.
"""
import re
from typing import Union

from .config import TIME_UNITS
from .exceptions import TimeRangeError

TIME_RANGE_PATTERN = re.compile(r"-([0-9]+)(\D)")


def from_range_to_milliseconds(time_range: str) -> int:
    """
    Convert a relative time expression into a millisecond duration.
    Unit characters outside m/h/d/w are taken as milliseconds already.
    """
    match = TIME_RANGE_PATTERN.search(time_range)
    if match is None:
        raise TimeRangeError(f"{time_range} is not a SignalFx relative time (e.g. -5m, -1h)")

    magnitude, unit = match.groups()
    try:
        value = int(magnitude)
    except ValueError as e:
        raise TimeRangeError(f"Invalid magnitude in {time_range}: {e}") from e

    return value * TIME_UNITS.get(unit, 1)


def to_milliseconds(value: Union[int, str]) -> int:
    """Accept raw milliseconds or relative time syntax"""
    if isinstance(value, int):
        return value
    if value.isdigit():
        return int(value)
    return from_range_to_milliseconds(value)
