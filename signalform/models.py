# signalform/models.py
from dataclasses import dataclass, field
from typing import List, Optional

from . import validators


@dataclass
class ResourceState:
    """
    Local mirror of a remote SignalFx resource.
    id is None while the resource does not exist remotely.
    """
    name: str
    id: Optional[str] = None
    last_updated: float = 0.0
    synced: bool = False

    @property
    def exists(self) -> bool:
        return bool(self.id)


@dataclass
class ColorScale:
    thresholds: List[int] = field(default_factory=list)
    inverted: bool = False


@dataclass
class ChartConfig:
    """Declared configuration of a chart, as handed over by the host tool."""
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    color_scale: List[ColorScale] = field(default_factory=list)
    legend_fields_to_hide: List[str] = field(default_factory=list)
    time_span_type: Optional[str] = None
    time_range: Optional[str] = None
    sort_by: Optional[str] = None

    def validate(self) -> List[str]:
        """Return every validation message for the fields that are set"""
        errors = []
        if self.color is not None:
            errors += validators.validate_chart_color(self.color)
        if self.time_span_type is not None:
            errors += validators.validate_time_span_type(self.time_span_type)
            if self.time_span_type == "relative" and self.time_range is None:
                errors.append("time_range is required when time_span_type is relative")
        if self.time_range is not None and not str(self.time_range).isdigit():
            errors += validators.validate_relative_time(self.time_range)
        if self.sort_by is not None:
            errors += validators.validate_sort_by(self.sort_by)
        return errors
