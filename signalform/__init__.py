# signalform/__init__.py
from .state_manager import ResourceManager
from .models import ResourceState, ChartConfig, ColorScale
from .exceptions import (
    SignalformError, TransportError, DecodeError, UpstreamError,
    ValidationError, TimeRangeError, RollbackError,
)

__version__ = "0.1.0"
__all__ = [
    "ResourceManager", "ResourceState", "ChartConfig", "ColorScale",
    "SignalformError", "TransportError", "DecodeError", "UpstreamError",
    "ValidationError", "TimeRangeError", "RollbackError",
]
