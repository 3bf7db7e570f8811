# signalform/config.py
from types import MappingProxyType

# Workaround for SignalFx post processing delaying lastUpdated
OFFSET = 10000.0

API_URL = "https://api.signalfx.com"
API_VERSION = "v2"
CHART_API_URL = f"{API_URL}/{API_VERSION}/chart"

AUTH_HEADER = "X-SF-Token"
DEFAULT_TIMEOUT = 30

RESOURCE_NOT_FOUND = "Resource not found"

# Palette names accepted in chart configuration, mapped to SignalFx hex codes
COLORS = MappingProxyType({
    "gray": "#999999",
    "blue": "#0077c2",
    "navy": "#6CA2B7",
    "orange": "#b04600",
    "yellow": "#e5b312",
    "magenta": "#bd468d",
    "purple": "#e9008a",
    "violet": "#876ffe",
    "lilac": "#a747ff",
    "green": "#05ce00",
    "aquamarine": "#0dba8f",
})

TIME_SPAN_TYPES = ("relative", "absolute")

TIME_UNITS = MappingProxyType({
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
    "w": 7 * 24 * 60 * 60 * 1000,
})

DEFAULT_CONFIG = MappingProxyType({
    "api_url": API_URL,
    "timeout": DEFAULT_TIMEOUT,
    "auth_header": AUTH_HEADER,
    "drift_offset": OFFSET,
})
