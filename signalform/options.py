# signalform/options.py
from typing import Dict, Iterable, Optional, Sequence, Any

from .config import COLORS
from .time_range import to_milliseconds
from .models import ChartConfig, ColorScale


def color_hex(name: str) -> str:
    """Map a palette name (e.g. 'blue') to its SignalFx hex code"""
    try:
        return COLORS[name]
    except KeyError:
        raise ValueError(f"Unknown color {name}; must be one of {', '.join(COLORS)}") from None


def get_color_scale_options(color_scale: Sequence[ColorScale]) -> Dict[str, Any]:
    """
    Build the colorScale options. Exactly one ColorScale block is expected;
    thresholds are always emitted highest to lowest.
    """
    if len(color_scale) != 1:
        raise ValueError(f"Expected exactly one color_scale block, got {len(color_scale)}")
    options = color_scale[0]
    return {
        "thresholds": sorted((int(t) for t in options.thresholds), reverse=True),
        "inverted": bool(options.inverted),
    }


def get_legend_options(fields_to_hide: Optional[Iterable[str]]) -> Optional[Dict[str, Any]]:
    """Legend options hiding every listed property, or None when nothing is hidden"""
    fields = [{"property": prop, "enabled": False} for prop in (fields_to_hide or [])]
    if not fields:
        return None
    return {"fields": fields}


def get_chart_options(config: ChartConfig) -> Dict[str, Any]:
    options: Dict[str, Any] = {}

    if config.color is not None:
        options["defaultPlotColor"] = color_hex(config.color)

    if config.color_scale:
        options["colorScale"] = get_color_scale_options(config.color_scale)

    legend = get_legend_options(config.legend_fields_to_hide)
    if legend:
        options["legendOptions"] = legend

    if config.time_span_type == "relative":
        if config.time_range is None:
            raise ValueError(f"Chart {config.name} has a relative time span but no time_range")
        options["time"] = {"type": "relative", "range": to_milliseconds(config.time_range)}
    elif config.time_span_type is not None:
        options["time"] = {"type": config.time_span_type}

    if config.sort_by is not None:
        options["sortBy"] = config.sort_by

    return options
