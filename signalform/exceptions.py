# signalform/exceptions.py
from typing import List, Optional

class SignalformError(Exception):
    """Base exception for signalform operations"""
    pass

class TransportError(SignalformError):
    """Raised when a request cannot be sent or its response cannot be read"""
    def __init__(self, message: str, status_code: int = -1):
        super().__init__(message)
        self.status_code = status_code

class DecodeError(SignalformError):
    """Raised when a response body is not the JSON we expect"""
    pass

class UpstreamError(SignalformError):
    """Raised when SignalFx answers with an unexpected status code"""
    def __init__(self, resource_name: str, status_code: int, body: Optional[bytes]):
        self.resource_name = resource_name
        self.status_code = status_code
        self.body = body
        text = body.decode("utf-8", errors="replace") if body else ""
        super().__init__(
            f"For the resource {resource_name} SignalFx returned status {status_code}: \n{text}"
        )

class ValidationError(SignalformError):
    """Raised when a configuration value fails validation"""
    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))

class TimeRangeError(SignalformError, ValueError):
    """Raised when a relative time expression cannot be parsed"""
    pass

class RollbackError(SignalformError):
    """Raised when rollback operations fail"""
    pass
