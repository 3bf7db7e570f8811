# signalform/adapters/__init__.py
from .rest_adapter import RESTTransport
from .signalfx_adapter import SignalFxAdapter

__all__ = ["RESTTransport", "SignalFxAdapter"]
